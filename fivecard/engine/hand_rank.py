"""牌型定义 - 五张牌扑克的10种牌型"""

from enum import Enum


class HandRank(Enum):
    """牌型枚举，定义顺序即强弱顺序（从弱到强）"""
    HIGH_CARD = 100             # 高牌
    ONE_PAIR = 200              # 一对
    TWO_PAIR = 300              # 两对
    THREE_OF_A_KIND = 400       # 三条
    STRAIGHT = 500              # 顺子（含 A-2-3-4-5）
    FLUSH = 600                 # 同花
    FULL_HOUSE = 700            # 葫芦
    FOUR_OF_A_KIND = 800        # 四条
    STRAIGHT_FLUSH = 900        # 同花顺
    ROYAL_FLUSH = 1000          # 皇家同花顺

    @property
    def score(self) -> int:
        """牌型分数，越大越强"""
        return self.value

    @property
    def display(self) -> str:
        return HAND_RANK_NAME[self]

    def __lt__(self, other: "HandRank") -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.score < other.score

    def __le__(self, other: "HandRank") -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.score <= other.score

    def __gt__(self, other: "HandRank") -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.score > other.score

    def __ge__(self, other: "HandRank") -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.score >= other.score


# 牌型中文名
HAND_RANK_NAME = {
    HandRank.HIGH_CARD: "高牌", HandRank.ONE_PAIR: "一对",
    HandRank.TWO_PAIR: "两对", HandRank.THREE_OF_A_KIND: "三条",
    HandRank.STRAIGHT: "顺子", HandRank.FLUSH: "同花",
    HandRank.FULL_HOUSE: "葫芦", HandRank.FOUR_OF_A_KIND: "四条",
    HandRank.STRAIGHT_FLUSH: "同花顺", HandRank.ROYAL_FLUSH: "皇家同花顺",
}
