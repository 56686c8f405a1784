# huffcode/table.py
# 编码表 / 压缩结果的文本展示：Char | Freq | Huffman Code 三列表格 + 大小对比
from __future__ import annotations
import unicodedata
from typing import Dict, List, Tuple

__all__ = ["code_table_rows", "format_symbol", "display_width", "format_code_table", "format_summary"]

def code_table_rows(freq: Dict[str, int], codes: Dict[str, str]) -> List[Tuple[str, int, str]]:
    """
    生成 (symbol, frequency, code) 行，按频率降序、码长升序、码字排序。
    """
    rows = [(ch, freq[ch], codes[ch]) for ch in codes]
    rows.sort(key=lambda r: (-r[1], len(r[2]), r[2]))
    return rows

def format_symbol(ch: str) -> str:
    if ch == " ":
        return "' '"
    if ch.isprintable():
        return ch
    return repr(ch)[1:-1]  # '\n' -> \n

def display_width(s: str) -> int:
    """终端显示宽度：全角/宽字符（East Asian W/F）占 2 列，组合字符占 0 列。"""
    width = 0
    for ch in s:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width

def _ljust(s: str, width: int) -> str:
    return s + " " * (width - display_width(s))

def format_code_table(freq: Dict[str, int], codes: Dict[str, str]) -> str:
    rows = code_table_rows(freq, codes)
    w_char = max([4] + [display_width(format_symbol(ch)) for ch, _, _ in rows])
    w_freq = max([4] + [len(str(f)) for _, f, _ in rows])
    w_code = max([12] + [len(c) for _, _, c in rows])

    border = f"+-{'-' * w_char}-+-{'-' * w_freq}-+-{'-' * w_code}-+"
    lines = [
        border,
        f"| {'Char':<{w_char}} | {'Freq':>{w_freq}} | {'Huffman Code':<{w_code}} |",
        border,
    ]
    for ch, f, c in rows:
        lines.append(f"| {_ljust(format_symbol(ch), w_char)} | {f:>{w_freq}} | {c:<{w_code}} |")
    lines.append(border)
    return "\n".join(lines)

def format_summary(stats: Dict[str, float]) -> str:
    return "\n".join([
        f"Original size: {int(stats['original_bits'])} bits",
        f"Encoded size: {int(stats['encoded_bits'])} bits",
        f"Ratio: {stats['ratio'] * 100:.2f}% of original",
        f"Entropy: {stats['entropy']:.4f} bits/symbol  |  "
        f"Avg code length: {stats['avg_code_length']:.4f} bits/symbol",
    ])
