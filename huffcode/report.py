# huffcode/report.py
# 对外入口：HuffmanReport（码表 + 树形文本 + 平均码长）

from __future__ import annotations
import numpy as np
from typing import Dict, Hashable, Sequence, Tuple

from huffcode.huffman import (
    CodeBook,
    DuplicateSymbolError,
    EmptyInputError,
    WeightedSymbol,
    build_codes,
    build_huffman_tree,
)

__all__ = ["HuffmanReport", "format_weight"]


def format_weight(w) -> str:
    """最短十进制写法，不用科学计数法，整数不带 ".0"（2.0 -> "2"，1e-7 -> "0.0000001"）。"""
    return np.format_float_positional(float(w), trim="-")


class HuffmanReport:
    """
    由 [(symbol, weight), ...] 构建一次，之后只读。

    - avg_len():   Σ weight × len(code)
    - tree_text(): 树形文本
    - display():   按输入顺序逐行列出 "symbol (weight) => code"
    """

    def __init__(self, symbols: Sequence[WeightedSymbol]):
        symbols = tuple((s, w) for s, w in symbols)
        if not symbols:
            raise EmptyInputError("symbol list is empty")
        seen = set()
        for s, _ in symbols:
            if s in seen:
                raise DuplicateSymbolError(f"duplicate symbol: {s!s}")
            seen.add(s)

        root = build_huffman_tree(symbols)
        self._symbols: Tuple[WeightedSymbol, ...] = symbols
        self._tree, self._book = build_codes(root)

    @property
    def symbols(self) -> Tuple[WeightedSymbol, ...]:
        return self._symbols

    @property
    def book(self) -> CodeBook:
        return self._book

    def codes(self) -> Dict[Hashable, str]:
        return self._book.as_dict()

    def total_weight(self) -> float:
        return sum(w for _, w in self._symbols)

    def avg_len(self) -> float:
        return sum(w * len(self._book.code_of(s)) for s, w in self._symbols)

    def tree_text(self) -> str:
        return self._tree

    def display(self) -> str:
        return "\n".join(
            f"{s} ({format_weight(w)}) => {self._book.code_of(s)}" for s, w in self._symbols
        )

    def __str__(self):
        return self.display()

    def __repr__(self):
        return f"HuffmanReport({len(self._symbols)} symbols, avg_len={self.avg_len():.4f})"


# ---------- 自检 ----------
if __name__ == "__main__":
    r = HuffmanReport([("A", 0.36), ("B", 0.21), ("C", 0.17), ("D", 0.13), ("E", 0.09), ("F", 0.04)])
    print(r.tree_text())
    print(r)
    print(f"avg_len: {r.avg_len():.4f}")
