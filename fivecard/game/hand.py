"""手牌 - 玩家持有的最多5张牌，以及牌型评估与比较"""

from typing import List, Tuple

from ..config import HAND_SIZE
from ..engine.card import Card
from ..engine.hand_evaluator import evaluate_cards
from ..engine.hand_rank import HandRank
from ..errors import HandFullError, NullCardError


class Hand:
    """一手牌（保持加入顺序，最多5张）"""

    def __init__(self) -> None:
        self._cards: List[Card] = []

    @property
    def cards(self) -> Tuple[Card, ...]:
        """当前手牌的只读快照，与内部列表互不影响"""
        return tuple(self._cards)

    @property
    def is_full(self) -> bool:
        return len(self._cards) == HAND_SIZE

    def add(self, card: Card) -> None:
        """把一张牌加到末尾"""
        if card is None:
            raise NullCardError("不能加入 None")
        if not isinstance(card, Card):
            raise TypeError(f"只能加入 Card，收到 {type(card).__name__}")
        if self.is_full:
            raise HandFullError(f"手牌最多 {HAND_SIZE} 张")
        self._cards.append(card)

    def clear(self) -> None:
        """弃掉全部手牌"""
        self._cards.clear()

    # ============================================================
    #  评估与比较
    # ============================================================

    def evaluate(self) -> HandRank:
        """判定牌型，手牌不足/超过5张抛 IncompleteHandError"""
        return evaluate_cards(self._cards)

    def open(self) -> int:
        """亮牌，返回牌型分数"""
        return self.evaluate().score

    def compare(self, other: "Hand") -> int:
        """
        按牌型分数比较两手牌，返回 -1 / 0 / 1。
        不比较踢脚牌：同牌型即视为相等。
        """
        mine, theirs = self.open(), other.open()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) >= 0

    # ============================================================
    #  显示
    # ============================================================

    def describe(self) -> str:
        """形如 [A♠, 2♦, 3♣]，空手牌为 []"""
        return "[" + ", ".join(c.display for c in self._cards) + "]"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Hand({self.describe()})"

    def __len__(self) -> int:
        return len(self._cards)
