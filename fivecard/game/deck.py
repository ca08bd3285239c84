"""牌堆 - 一副52张牌的洗牌与摸牌"""

import logging
import random
from typing import List, Optional, TYPE_CHECKING

from ..config import HAND_SIZE, make_rng
from ..engine.card import Card, standard_cards
from ..errors import EmptyDeckError, HandFullError

if TYPE_CHECKING:
    from .hand import Hand

logger = logging.getLogger(__name__)


class Deck:
    """
    一副牌。
    新建时按固定顺序装满52张，只能通过摸牌减少，不支持补牌；
    一局结束或摸空后应丢弃并新建一副。
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._cards: List[Card] = standard_cards()
        self._rng = rng if rng is not None else make_rng()
        logger.debug("新建牌堆，共 %d 张", len(self._cards))

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def remaining(self) -> int:
        return len(self._cards)

    def shuffle(self) -> None:
        """原地均匀洗牌，不改变牌的集合与张数"""
        self._rng.shuffle(self._cards)
        logger.debug("洗牌完成，剩余 %d 张", len(self._cards))

    def draw(self) -> Card:
        """从牌顶（下标0）摸一张并移出牌堆"""
        if not self._cards:
            raise EmptyDeckError("牌堆已空，无法摸牌")
        card = self._cards.pop(0)
        logger.debug("摸牌 %s，剩余 %d 张", card, len(self._cards))
        return card

    def deal(self, hand: "Hand", count: Optional[int] = None) -> None:
        """给手牌发牌：默认补满5张，也可指定张数"""
        if count is None:
            count = HAND_SIZE - len(hand)
        # 先检查手牌容量再摸牌，放不下的牌不能离开牌堆
        if len(hand) + count > HAND_SIZE:
            raise HandFullError(
                f"手牌已有 {len(hand)} 张，再发 {count} 张会超过 {HAND_SIZE} 张"
            )
        for _ in range(count):
            hand.add(self.draw())

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"
