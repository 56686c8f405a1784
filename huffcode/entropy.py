# huffcode/entropy.py
from __future__ import annotations
import numpy as np
from typing import Dict

__all__ = [
    "original_bits",
    "calculate_entropy",
    "average_code_length",
    "compression_stats",
]

def original_bits(text: str) -> int:
    """原文大小（bit）：UTF-8 字节数 * 8。"""
    return len(text.encode("utf-8")) * 8

def _probabilities(freq: Dict[str, int]) -> np.ndarray:
    counts = np.fromiter(freq.values(), dtype=np.float64, count=len(freq))
    total = counts.sum()
    if total <= 0:
        return np.zeros(0, dtype=np.float64)
    return counts / total

def calculate_entropy(freq: Dict[str, int]) -> float:
    """
    由频率表计算 Shannon entropy（bits per symbol）。
    空频率表返回 0.0；只有一种字符时熵为 0。
    """
    p = _probabilities(freq)
    # 仅对 p>0 的项求和，避免 log2(0)
    m = p > 0
    if not m.any():
        return 0.0
    H = -np.sum(p[m] * np.log2(p[m]))
    return float(H)

def average_code_length(freq: Dict[str, int], codes: Dict[str, str]) -> float:
    """
    按频率加权的平均码长（bits per symbol）。
    - freq : 字符 -> 出现次数
    - codes: 字符 -> 码字（必须覆盖 freq 中的全部字符）
    """
    if not freq:
        return 0.0
    p = _probabilities(freq)
    lengths = np.array([len(codes[ch]) for ch in freq], dtype=np.float64)
    return float(np.sum(p * lengths))

def compression_stats(
    text: str,
    encoded: str,
    freq: Dict[str, int],
    codes: Dict[str, str],
) -> Dict[str, float]:
    """
    汇总一次编码的压缩效果，返回:
      {
        "original_bits":   原文 bit 数（UTF-8 字节 * 8）,
        "encoded_bits":    编码后 bit 数（'0'/'1' 字符个数）,
        "ratio":           encoded_bits / original_bits（原文为空时 0.0）,
        "saving":          1 - ratio（原文为空时 0.0）,
        "entropy":         Shannon entropy（bits/symbol）,
        "avg_code_length": 平均码长（bits/symbol）,
        "efficiency":      entropy / avg_code_length（平均码长为 0 时记 1.0）,
      }
    """
    orig = original_bits(text)
    enc = len(encoded)
    ratio = enc / orig if orig > 0 else 0.0
    H = calculate_entropy(freq)
    L = average_code_length(freq, codes)
    eff = H / L if L > 0 else 1.0
    return {
        "original_bits": orig,
        "encoded_bits": enc,
        "ratio": ratio,
        "saving": 1.0 - ratio if orig > 0 else 0.0,
        "entropy": H,
        "avg_code_length": L,
        "efficiency": eff,
    }
