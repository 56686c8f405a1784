# huffcode/frequency.py
from __future__ import annotations
from collections import Counter
from typing import Dict

__all__ = ["count_frequencies"]

def count_frequencies(text: str) -> Dict[str, int]:
    """
    统计文本中每个字符的出现次数

    参数:
    - text: 原始文本（可以为空）

    返回:
    - dict，字符 -> 出现次数；键的顺序为字符首次出现的顺序，空文本返回 {}
    """
    return dict(Counter(text))
