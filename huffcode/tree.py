# huffcode/tree.py
from __future__ import annotations
import heapq
from itertools import count
from typing import Dict, Iterator, List, Optional, Tuple

from huffcode.errors import EmptyAlphabetError

__all__ = [
    "Node",
    "build_huffman_tree",
    "is_leaf",
    "is_released",
    "iter_leaves",
    "count_nodes",
    "tree_height",
    "release_tree",
]

class Node:
    def __init__(self, char=None, freq=None, left=None, right=None):
        self.char = char
        self.freq = freq
        self.left = left
        self.right = right

    def __repr__(self):
        if self.char is not None:
            return f"Node({self.char!r}, {self.freq})"
        return f"Node(freq={self.freq})"

def build_huffman_tree(frequency: Dict[str, int]) -> Node:
    """
    由频率表构建 Huffman 编码树

    参数:
    - frequency: dict，字符 -> 出现次数（不能为空）

    返回:
    - Huffman 树的根节点；只有一种字符时根节点本身就是叶子

    堆中元素为 (freq, order, node)：频率相同时按入堆顺序出堆，
    叶子按频率表的键顺序（即字符首次出现顺序）入堆，
    合并节点依次取后续序号，因此同一输入总是得到同一棵树。
    """
    if not frequency:
        raise EmptyAlphabetError()

    order = count()
    heap: List[Tuple[int, int, Node]] = []
    for ch, freq in frequency.items():
        if freq <= 0:
            raise ValueError(f"字符 {ch!r} 的频率必须为正整数，得到 {freq}。")
        heap.append((freq, next(order), Node(ch, freq)))
    heapq.heapify(heap)

    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = Node(freq=left.freq + right.freq, left=left, right=right)
        heapq.heappush(heap, (merged.freq, next(order), merged))

    return heap[0][2]

def is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None

def is_released(node: Node) -> bool:
    """release_tree 之后根节点没有子节点也没有字符，不再是一棵可用的树。"""
    return is_leaf(node) and node.char is None

def _walk(root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
    """先序遍历（左子树优先），产出 (node, depth)；显式栈，避免深树递归溢出。"""
    if root is None:
        return
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))

def iter_leaves(root: Optional[Node]) -> Iterator[Node]:
    """从左到右产出所有叶子。"""
    for node, _ in _walk(root):
        if is_leaf(node):
            yield node

def count_nodes(root: Optional[Node]) -> Tuple[int, int]:
    """返回 (叶子数, 内部节点数)。"""
    leaves = internal = 0
    for node, _ in _walk(root):
        if is_leaf(node):
            leaves += 1
        else:
            internal += 1
    return leaves, internal

def tree_height(root: Optional[Node]) -> int:
    """根到最深叶子的边数；单叶子树为 0，空树为 -1。"""
    return max((depth for _, depth in _walk(root)), default=-1)

def release_tree(root: Optional[Node]) -> None:
    """
    拆除整棵树：断开每个节点的左右子节点引用。
    可重复调用；root 为 None 时什么都不做。
    """
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
        node.left = None
        node.right = None
