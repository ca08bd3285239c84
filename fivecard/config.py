"""全局配置 - 牌数常量与洗牌随机源"""

import os
import random
from typing import Optional

# 一副牌的张数
DECK_SIZE = 52

# 一手牌的张数
HAND_SIZE = 5

# 洗牌种子的环境变量名（设置后洗牌结果可复现）
SHUFFLE_SEED_ENV = "FIVECARD_SHUFFLE_SEED"


def shuffle_seed() -> Optional[int]:
    """读取环境变量中的洗牌种子，未配置返回 None"""
    raw = os.getenv(SHUFFLE_SEED_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{SHUFFLE_SEED_ENV} 必须是整数，当前为 {raw!r}") from None


def make_rng(seed: Optional[int] = None) -> random.Random:
    """创建洗牌用的随机源：显式种子优先，其次环境变量，否则用系统熵"""
    if seed is None:
        seed = shuffle_seed()
    return random.Random(seed)
