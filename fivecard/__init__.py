"""五张牌扑克 - 牌堆、手牌与牌型评估"""

from .engine import Card, Rank, Suit, HandRank, evaluate_cards
from .game import Deck, Hand
from .errors import (
    PokerError,
    EmptyDeckError,
    NullCardError,
    HandFullError,
    IncompleteHandError,
)

__version__ = "0.1.0"
