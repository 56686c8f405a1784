# huffcode/session.py
# 持有最近一次编码结果的会话上下文；新文本进来前先拆除旧树
from __future__ import annotations
from typing import Dict, NamedTuple, Optional

from huffcode.errors import HuffmanError
from huffcode.huffman import build_code, huffman_decode, huffman_encode
from huffcode.tree import Node, release_tree

__all__ = ["SessionResult", "HuffmanSession"]

class SessionResult(NamedTuple):
    text: str
    tree: Node
    codes: Dict[str, str]
    freq: Dict[str, int]
    encoded: str
    decoded: str

class HuffmanSession:
    """
    一次只保存一棵 Huffman 树及其编码表、编码串和解码串。
    - submit(text): 拆除旧树 -> 构建编码 -> 编码 -> 解码并校验往返一致
    - clear():      拆除当前树并清空结果
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self._result: Optional[SessionResult] = None

    @property
    def result(self) -> Optional[SessionResult]:
        return self._result

    @property
    def has_result(self) -> bool:
        return self._result is not None

    def submit(self, text: str) -> SessionResult:
        self.clear()

        tree, codes, freq = build_code(text)
        encoded = huffman_encode(text, codes)
        decoded = huffman_decode(tree, encoded)
        if decoded != text:
            release_tree(tree)
            raise HuffmanError("往返校验失败：解码结果与原文不一致。")

        self._result = SessionResult(text, tree, codes, freq, encoded, decoded)
        if self.verbose:
            print(f"[INFO] Encode completed: {len(freq)} symbols, {len(encoded)} bits")
        return self._result

    def clear(self) -> None:
        if self._result is None:
            return
        release_tree(self._result.tree)
        self._result = None
        if self.verbose:
            print("[INFO] Previous Huffman tree released")
