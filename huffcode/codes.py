# huffcode/codes.py
from __future__ import annotations
from typing import Dict, Optional

from huffcode.errors import HuffmanError
from huffcode.tree import Node, is_leaf, is_released

__all__ = ["build_codes", "is_prefix_free", "SINGLE_SYMBOL_CODE"]

# 只有一种字符时，根节点就是叶子，路径为空串；改用 1 bit 占位码
SINGLE_SYMBOL_CODE = "0"

def build_codes(root: Optional[Node]) -> Dict[str, str]:
    """
    构建字符到 Huffman 编码的映射表（字典）

    参数:
    - root: Huffman 树根节点（None 时返回空表）

    返回:
    - codes: dict, 每个字符对应的二进制编码，如 {'a': '010', 'b': '11'}
      左分支记 '0'，右分支记 '1'；只有一种字符时为 {ch: '0'}
    """
    codes: Dict[str, str] = {}
    if root is None:
        return codes
    if is_released(root):
        raise HuffmanError("Huffman 树已释放，无法生成编码表。")
    if is_leaf(root):
        codes[root.char] = SINGLE_SYMBOL_CODE
        return codes

    stack = [(root, "")]
    while stack:
        node, current = stack.pop()
        if is_leaf(node):
            codes[node.char] = current
            continue
        if node.right is not None:
            stack.append((node.right, current + "1"))
        if node.left is not None:
            stack.append((node.left, current + "0"))
    return codes

def is_prefix_free(codes: Dict[str, str]) -> bool:
    """
    检查编码表是否为前缀码：任意码字都不是另一码字的前缀。
    排序后若 a 是 b 的前缀，则 a 与紧随其后的码字也构成前缀关系，只需比较相邻项。
    """
    words = sorted(codes.values())
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return True
