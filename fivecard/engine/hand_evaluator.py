"""牌型评估器 - 判定五张牌属于哪种牌型"""

import logging
from typing import Callable, List, Sequence, Tuple
from collections import Counter

from ..config import HAND_SIZE
from ..errors import IncompleteHandError
from .card import Card, Rank
from .hand_rank import HandRank

logger = logging.getLogger(__name__)


# 皇家同花顺需要的点数
_ROYAL_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})

# A 当 1 用的唯一例外：A-2-3-4-5
_WHEEL_VALUES = [2, 3, 4, 5, 14]


def evaluate_cards(cards: Sequence[Card]) -> HandRank:
    """
    判定五张牌的牌型。
    张数不是恰好5张时抛出 IncompleteHandError，不做部分评估。
    """
    if len(cards) != HAND_SIZE:
        raise IncompleteHandError(len(cards), HAND_SIZE)

    cards = list(cards)
    rank_counts = Counter(c.rank for c in cards)

    # 从强到弱依次检测，命中即返回
    # 顺序不能颠倒：葫芦里也含三条，同花顺同时满足同花和顺子
    for hand_rank, check in _CHECKS:
        if check(cards, rank_counts):
            logger.debug("评估 %s -> %s", cards, hand_rank.name)
            return hand_rank

    logger.debug("评估 %s -> %s", cards, HandRank.HIGH_CARD.name)
    return HandRank.HIGH_CARD


# ============================================================
#  辅助函数
# ============================================================

def _count_of(rc: Counter, count: int) -> int:
    """出现恰好 count 次的点数有几种"""
    return sum(1 for c in rc.values() if c == count)


def _is_flush(cards: List[Card]) -> bool:
    """所有牌与第一张同花色"""
    first_suit = cards[0].suit
    return all(c.suit == first_suit for c in cards)


def _is_straight(cards: List[Card]) -> bool:
    """五个数值连续，或恰好是 A-2-3-4-5；不支持其他绕圈顺子"""
    values = sorted(c.value for c in cards)
    if values == _WHEEL_VALUES:
        return True
    for i in range(len(values) - 1):
        if values[i + 1] - values[i] != 1:
            return False
    return True


# ============================================================
#  牌型检测（强 -> 弱）
# ============================================================

def _detect_royal_flush(cards: List[Card], rc: Counter) -> bool:
    """皇家同花顺：同花 + 10-J-Q-K-A"""
    return _is_flush(cards) and set(rc) == _ROYAL_RANKS


def _detect_straight_flush(cards: List[Card], rc: Counter) -> bool:
    """同花顺"""
    return _is_flush(cards) and _is_straight(cards)


def _detect_four_of_a_kind(cards: List[Card], rc: Counter) -> bool:
    """四条：某点数恰好4张"""
    return _count_of(rc, 4) >= 1


def _detect_full_house(cards: List[Card], rc: Counter) -> bool:
    """葫芦：三条 + 另一点数的对子"""
    return _count_of(rc, 3) >= 1 and _count_of(rc, 2) >= 1


def _detect_flush(cards: List[Card], rc: Counter) -> bool:
    return _is_flush(cards)


def _detect_straight(cards: List[Card], rc: Counter) -> bool:
    return _is_straight(cards)


def _detect_three_of_a_kind(cards: List[Card], rc: Counter) -> bool:
    """三条：某点数恰好3张（葫芦已在前面排除）"""
    return _count_of(rc, 3) >= 1


def _detect_two_pair(cards: List[Card], rc: Counter) -> bool:
    """两对：恰好两种点数各2张"""
    return _count_of(rc, 2) == 2


def _detect_one_pair(cards: List[Card], rc: Counter) -> bool:
    """一对"""
    return _count_of(rc, 2) == 1


_CHECKS: List[Tuple[HandRank, Callable[[List[Card], Counter], bool]]] = [
    (HandRank.ROYAL_FLUSH, _detect_royal_flush),
    (HandRank.STRAIGHT_FLUSH, _detect_straight_flush),
    (HandRank.FOUR_OF_A_KIND, _detect_four_of_a_kind),
    (HandRank.FULL_HOUSE, _detect_full_house),
    (HandRank.FLUSH, _detect_flush),
    (HandRank.STRAIGHT, _detect_straight),
    (HandRank.THREE_OF_A_KIND, _detect_three_of_a_kind),
    (HandRank.TWO_PAIR, _detect_two_pair),
    (HandRank.ONE_PAIR, _detect_one_pair),
]
