"""牌堆单元测试 - 完整性、洗牌、摸牌、随机源配置"""

import random

import pytest
from fivecard.config import SHUFFLE_SEED_ENV, make_rng, shuffle_seed
from fivecard.engine.card import Card, Rank, Suit
from fivecard.errors import EmptyDeckError, HandFullError
from fivecard.game.deck import Deck
from fivecard.game.hand import Hand


def _drain(deck: Deck) -> list[Card]:
    """摸光整副牌"""
    drawn = []
    while not deck.is_empty:
        drawn.append(deck.draw())
    return drawn


# ============================================================
#  新牌堆
# ============================================================

class TestNewDeck:

    def test_has_52_cards(self):
        deck = Deck()
        assert len(deck) == 52
        assert deck.remaining == 52
        assert not deck.is_empty

    def test_full_cross_product_no_duplicates(self):
        cards = _drain(Deck())
        assert len(cards) == len(set(cards)) == 52
        assert set(cards) == {Card(r, s) for s in Suit for r in Rank}

    def test_canonical_order_suit_major(self):
        """未洗牌时：同花色连续，点数从小到大"""
        deck = Deck()
        first = [deck.draw() for _ in range(13)]
        assert all(card.suit == Suit.SPADE for card in first)
        assert [card.rank for card in first] == list(Rank)


# ============================================================
#  洗牌
# ============================================================

class TestShuffle:

    def test_shuffle_preserves_multiset(self):
        before = _drain(Deck(rng=random.Random(1)))
        deck = Deck(rng=random.Random(1))
        deck.shuffle()
        after = _drain(deck)
        assert len(after) == 52
        assert sorted(after, key=lambda x: (x.suit, x.rank)) == \
            sorted(before, key=lambda x: (x.suit, x.rank))

    def test_shuffle_after_draws_keeps_remaining(self):
        deck = Deck()
        drawn = {deck.draw() for _ in range(10)}
        deck.shuffle()
        rest = _drain(deck)
        assert len(rest) == 42
        assert drawn.isdisjoint(rest)

    def test_shuffle_changes_order(self):
        deck = Deck(rng=random.Random(42))
        deck.shuffle()
        canonical = [Card(r, s) for s in Suit for r in Rank]
        assert _drain(deck) != canonical

    def test_same_seed_same_order(self):
        d1, d2 = Deck(rng=random.Random(7)), Deck(rng=random.Random(7))
        d1.shuffle()
        d2.shuffle()
        assert _drain(d1) == _drain(d2)


# ============================================================
#  摸牌
# ============================================================

class TestDraw:

    def test_draw_takes_top_card(self):
        deck = Deck()
        assert deck.draw() == Card(Rank.TWO, Suit.SPADE)
        assert deck.draw() == Card(Rank.THREE, Suit.SPADE)

    def test_draw_reduces_length_and_removes_card(self):
        deck = Deck()
        deck.shuffle()
        card = deck.draw()
        assert len(deck) == 51
        assert card not in _drain(deck)

    def test_53rd_draw_raises(self):
        deck = Deck()
        deck.shuffle()
        cards = [deck.draw() for _ in range(52)]
        assert len(set(cards)) == 52
        assert deck.is_empty
        with pytest.raises(EmptyDeckError):
            deck.draw()

    def test_repr(self):
        deck = Deck()
        deck.draw()
        assert repr(deck) == "Deck(remaining=51)"


# ============================================================
#  发牌到手牌
# ============================================================

class TestDeal:

    def test_deal_fills_hand(self):
        deck, hand = Deck(), Hand()
        deck.deal(hand)
        assert hand.is_full
        assert len(deck) == 47

    def test_deal_tops_up_partial_hand(self):
        deck, hand = Deck(), Hand()
        deck.deal(hand, 2)
        assert len(hand) == 2
        deck.deal(hand)
        assert hand.is_full
        assert len(deck) == 47

    def test_deal_into_full_hand_raises(self):
        deck, hand = Deck(), Hand()
        deck.deal(hand)
        with pytest.raises(HandFullError):
            deck.deal(hand, 1)
        assert len(deck) == 47
        assert len(hand) == 5

    def test_deal_over_capacity_keeps_cards_in_deck(self):
        """发牌数超过手牌剩余空间时一张都不摸"""
        deck, hand = Deck(), Hand()
        deck.deal(hand, 3)
        with pytest.raises(HandFullError):
            deck.deal(hand, 3)
        assert len(deck) == 49
        assert len(hand) == 3

    def test_deal_from_short_deck_raises(self):
        deck = Deck()
        for _ in range(50):
            deck.draw()
        hand = Hand()
        with pytest.raises(EmptyDeckError):
            deck.deal(hand)
        assert len(hand) == 2


# ============================================================
#  随机源配置
# ============================================================

class TestShuffleSeedConfig:

    def test_no_env_seed(self, monkeypatch):
        monkeypatch.delenv(SHUFFLE_SEED_ENV, raising=False)
        assert shuffle_seed() is None

    def test_env_seed_makes_shuffle_reproducible(self, monkeypatch):
        monkeypatch.setenv(SHUFFLE_SEED_ENV, "123")
        assert shuffle_seed() == 123
        d1, d2 = Deck(), Deck()
        d1.shuffle()
        d2.shuffle()
        assert _drain(d1) == _drain(d2)

    def test_explicit_seed_wins(self, monkeypatch):
        monkeypatch.setenv(SHUFFLE_SEED_ENV, "123")
        assert make_rng(5).random() == random.Random(5).random()

    def test_invalid_env_seed(self, monkeypatch):
        monkeypatch.setenv(SHUFFLE_SEED_ENV, "abc")
        with pytest.raises(ValueError):
            Deck()
