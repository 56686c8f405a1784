# huffcode/huffman.py
from __future__ import annotations
from typing import Dict, NamedTuple, Optional

from huffcode.codes import SINGLE_SYMBOL_CODE, build_codes
from huffcode.errors import EmptyAlphabetError, MalformedEncodingError, UnknownSymbolError
from huffcode.frequency import count_frequencies
from huffcode.tree import Node, build_huffman_tree, is_leaf, is_released

__all__ = ["CodeBuild", "build_code", "huffman_encode", "huffman_decode"]

class CodeBuild(NamedTuple):
    tree: Node
    table: Dict[str, str]
    freq: Dict[str, int]

def build_code(text: str) -> CodeBuild:
    """
    频率统计 -> 构建 Huffman 树 -> 生成编码表

    参数:
    - text: str，原始要编码的明文（不能为空）

    返回:
    - CodeBuild(tree, table, freq)，可直接解包为三元组
    """
    if not text:
        raise EmptyAlphabetError("输入文本为空：无法构建 Huffman 编码。")
    freq = count_frequencies(text)
    root = build_huffman_tree(freq)
    table = build_codes(root)
    return CodeBuild(root, table, freq)

def huffman_encode(text: str, codes: Dict[str, str]) -> str:
    """
    对文本进行 Huffman 编码

    参数:
    - text: str，原始要编码的明文
    - codes: dict，字符到比特串的映射表

    返回:
    - encoded: str，仅由 '0' 和 '1' 构成的比特流字符串

    文本中出现编码表里没有的字符时抛出 UnknownSymbolError，不返回部分结果。
    """
    parts = []
    for i, ch in enumerate(text):
        try:
            parts.append(codes[ch])
        except KeyError:
            raise UnknownSymbolError(ch, i) from None
    return "".join(parts)

def huffman_decode(root: Optional[Node], encoded: str) -> str:
    """
    按 Huffman 树逐比特解码

    参数:
    - root: Huffman 树根节点（必须与编码时使用的保持一致）
    - encoded: str，Huffman 编码后的比特流

    返回:
    - decoded: str，解码后的明文字符串

    '0' 走左子树，'1' 走右子树，到达叶子即输出字符并回到根节点。
    比特流结束时若未回到根节点（码字被截断），或出现 '0'/'1' 以外的字符，
    抛出 MalformedEncodingError。
    """
    if root is None:
        if encoded:
            raise MalformedEncodingError(0, "空树无法解码非空比特串")
        return ""

    if is_released(root):
        raise MalformedEncodingError(0, "树已释放")

    if is_leaf(root):
        # 单字符树：每个占位比特对应一次出现
        for i, bit in enumerate(encoded):
            if bit != SINGLE_SYMBOL_CODE:
                raise MalformedEncodingError(i, f"单字符编码只允许 {SINGLE_SYMBOL_CODE!r}，得到 {bit!r}")
        return root.char * len(encoded)

    decoded = []
    current = root
    for i, bit in enumerate(encoded):
        if bit == "0":
            current = current.left
        elif bit == "1":
            current = current.right
        else:
            raise MalformedEncodingError(i, f"非法比特 {bit!r}")

        if is_leaf(current):
            decoded.append(current.char)
            current = root

    if current is not root:
        raise MalformedEncodingError(len(encoded))
    return "".join(decoded)
