# 牌堆与手牌模块
from .deck import Deck
from .hand import Hand
