# 牌与牌型评估模块
from .card import Card, Rank, Suit, RANK_DISPLAY, standard_cards
from .hand_rank import HandRank, HAND_RANK_NAME
from .hand_evaluator import evaluate_cards
