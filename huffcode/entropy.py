# huffcode/entropy.py
from __future__ import annotations
import numpy as np
from typing import Dict, Iterable, Sequence

from huffcode.huffman import WeightedSymbol
from huffcode.report import HuffmanReport

__all__ = [
    "calculate_entropy",
    "calculate_entropy_from_symbols",
    "compare_entropy",
]

def _as_probabilities(weights: Iterable[float], normalize: bool) -> np.ndarray:
    """
    权重 -> float64 概率向量。normalize=False 时原样返回（调用方保证已是概率）。
    """
    p = np.asarray(list(weights), dtype=np.float64).reshape(-1)
    if p.size == 0:
        raise ValueError("calculate_entropy: 权重列表为空。")
    if not normalize:
        return p
    total = p.sum()
    if total <= 0:
        return np.zeros_like(p)
    return p / total

def calculate_entropy(weights: Iterable[float], normalize: bool = True) -> float:
    """
    计算 Shannon entropy（bits per symbol）。
    - weights: 频数或概率
    - normalize: True 时先按总和归一化；False 时直接把 weights 当作概率
    仅对 p>0 的项求和，避免 log2(0)。
    """
    p = _as_probabilities(weights, normalize)
    m = p > 0
    H = -np.sum(p[m] * np.log2(p[m]))
    return float(H) + 0.0  # -0.0 -> 0.0

def calculate_entropy_from_symbols(symbols: Sequence[WeightedSymbol], normalize: bool = True) -> float:
    return calculate_entropy((w for _, w in symbols), normalize=normalize)

def compare_entropy(report: HuffmanReport) -> Dict[str, float]:
    """
    对比信息熵与 Huffman 平均码长，返回 {entropy, avg_len, redundancy, efficiency}。
    - avg_len 按总权重归一化（频数输入时也是 bits per symbol）
    - redundancy = avg_len - entropy
    - efficiency = entropy / avg_len（avg_len 为 0 时记为 1.0）
    """
    H = calculate_entropy_from_symbols(report.symbols)
    total = report.total_weight()
    L = report.avg_len() / total if total > 0 else 0.0
    eff = H / L if L > 0 else 1.0
    return {"entropy": H, "avg_len": L, "redundancy": L - H, "efficiency": eff}
