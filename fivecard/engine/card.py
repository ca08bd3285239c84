"""牌的定义 - 标准52张扑克牌的数据模型"""

from enum import IntEnum, Enum
from dataclasses import dataclass
from typing import List

from ..config import DECK_SIZE


class Rank(IntEnum):
    """点数枚举（A 按 14 计，仅在 A-2-3-4-5 顺子中当 1 用）"""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(str, Enum):
    """花色枚举"""
    SPADE = "♠"
    HEART = "♥"
    DIAMOND = "♦"
    CLUB = "♣"


# 点数显示映射
RANK_DISPLAY = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7",
    Rank.EIGHT: "8", Rank.NINE: "9", Rank.TEN: "10",
    Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K",
    Rank.ACE: "A",
}


@dataclass(frozen=True)
class Card:
    """一张扑克牌"""
    rank: Rank
    suit: Suit

    @property
    def value(self) -> int:
        """比较用的数值 2~14"""
        return int(self.rank)

    @property
    def display(self) -> str:
        return f"{RANK_DISPLAY[self.rank]}{self.suit.value}"

    def __repr__(self) -> str:
        return self.display

    def __str__(self) -> str:
        return self.display


def standard_cards() -> List[Card]:
    """按固定顺序生成52张牌：花色优先，同花色内点数从小到大"""
    cards = [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]
    assert len(cards) == DECK_SIZE, f"牌数错误: {len(cards)}"
    return cards
