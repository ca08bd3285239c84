"""牌局异常定义 - 均为调用方逻辑错误或牌堆耗尽，直接抛给调用方"""


class PokerError(Exception):
    """基础异常类"""
    pass


class EmptyDeckError(PokerError):
    """牌堆已空仍尝试摸牌，调用方需要换一副新牌"""
    pass


class NullCardError(PokerError, ValueError):
    """向手牌加入了 None"""
    pass


class HandFullError(PokerError):
    """手牌已满5张仍尝试加牌"""
    pass


class IncompleteHandError(PokerError):
    """手牌不是恰好5张时尝试评估/比较"""

    def __init__(self, count: int, required: int = 5):
        self.count = count
        self.required = required
        super().__init__(f"手牌必须恰好 {required} 张才能评估，当前 {count} 张")
