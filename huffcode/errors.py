# huffcode/errors.py
from __future__ import annotations
from typing import Optional

__all__ = [
    "HuffmanError",
    "EmptyAlphabetError",
    "UnknownSymbolError",
    "MalformedEncodingError",
]

class HuffmanError(ValueError):
    """Huffman 编解码相关错误的基类。"""

class EmptyAlphabetError(HuffmanError):
    """频率表为空（输入文本为空），无法构建 Huffman 树。"""

    def __init__(self, msg: str = "频率表为空：无法从空文本构建 Huffman 树。"):
        super().__init__(msg)

class UnknownSymbolError(HuffmanError):
    """
    编码时遇到编码表中不存在的字符。
    - symbol: 出错的字符
    - index : 该字符在输入文本中的位置
    """

    def __init__(self, symbol: str, index: int):
        self.symbol = symbol
        self.index = index
        super().__init__(f"编码表中没有字符 {symbol!r}（位置 {index}）。")

class MalformedEncodingError(HuffmanError):
    """
    比特串无法按 Huffman 树完整解码：
    - 末尾停在内部节点（码字被截断）
    - 出现 '0'/'1' 以外的字符
    """

    def __init__(self, position: int, reason: Optional[str] = None):
        self.position = position
        self.reason = reason or "比特串被截断"
        super().__init__(f"非法的编码比特串（位置 {position}）：{self.reason}")
