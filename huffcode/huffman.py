# huffcode/huffman.py
# Huffman 树构建 + 码表推导 + 树形文本渲染
# 提供：build_huffman_tree(), build_codes(), CodeBook, Leaf, Internal

from __future__ import annotations
import heapq
import logging
from itertools import count
from typing import Dict, Hashable, Iterator, List, Sequence, Tuple, Union

logger = logging.getLogger("HUFFCODE")

WeightedSymbol = Tuple[Hashable, float]


# ---------- 异常 ----------
class HuffmanError(ValueError):
    pass

class EmptyInputError(HuffmanError):
    """输入符号表为空，无法构建根节点。"""

class DuplicateSymbolError(HuffmanError):
    """同一符号（或同一码字）出现两次，码表无法保持一一对应。"""


# ---------- 节点 ----------
class Leaf:
    __slots__ = ("weight", "symbol", "seq")

    def __init__(self, weight: float, symbol: Hashable, seq: int = 0):
        self.weight = weight
        self.symbol = symbol
        self.seq = seq

    def __lt__(self, other):
        return _node_lt(self, other)

    def __repr__(self):
        return f"{self.weight:.3f} {self.symbol}"


class Internal:
    __slots__ = ("weight", "left", "right", "seq")

    def __init__(self, left: "Node", right: "Node", seq: int = 0):
        self.weight = left.weight + right.weight
        self.left = left
        self.right = right
        self.seq = seq

    def __lt__(self, other):
        return _node_lt(self, other)

    def __repr__(self):
        return f"{self.weight:.3f} {{{self.left!r}, {self.right!r}}}"


Node = Union[Leaf, Internal]


def _node_lt(a: Node, b: Node) -> bool:
    """
    按权重比较；NaN 等无法比较的情况视为相等，退回到入队序号。
    """
    if a.weight < b.weight:
        return True
    if b.weight < a.weight:
        return False
    return a.seq < b.seq


# ---------- 码表（双向） ----------
class CodeBook:
    """
    符号 <-> 码字 的双向映射。两个 dict 同步维护，任一方向重复即报错。
    """

    def __init__(self):
        self._by_symbol: Dict[Hashable, str] = {}
        self._by_code: Dict[str, Hashable] = {}

    def insert(self, symbol: Hashable, code: str) -> None:
        if symbol in self._by_symbol:
            raise DuplicateSymbolError(f"symbol {symbol!s} already has code {self._by_symbol[symbol]!r}")
        if code in self._by_code:
            raise DuplicateSymbolError(f"code {code!r} already assigned to {self._by_code[code]!s}")
        self._by_symbol[symbol] = code
        self._by_code[code] = symbol

    def code_of(self, symbol: Hashable) -> str:
        return self._by_symbol[symbol]

    def symbol_of(self, code: str) -> Hashable:
        return self._by_code[code]

    def as_dict(self) -> Dict[Hashable, str]:
        return dict(self._by_symbol)

    def __contains__(self, symbol) -> bool:
        return symbol in self._by_symbol

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._by_symbol)

    def __len__(self) -> int:
        return len(self._by_symbol)

    def items(self):
        return self._by_symbol.items()

    def __repr__(self):
        return f"CodeBook({self._by_symbol!r})"


# ---------- 建树 ----------
def build_huffman_tree(symbols: Sequence[WeightedSymbol]) -> Node:
    """
    构建 Huffman 编码树

    参数:
    - symbols: [(symbol, weight), ...]，symbol 需唯一，weight 非负

    返回:
    - Huffman 树的根节点；只有一个符号时根就是该 Leaf

    每轮取出权重最小的两个节点，先取出的作为左子树，后取出的作为右子树。
    权重相同时按入队顺序（输入顺序 / 合并顺序）出队，保证结果可复现。
    """
    if not symbols:
        raise EmptyInputError("symbol list is empty")

    seq = count()
    heap: List[Node] = [Leaf(w, s, next(seq)) for s, w in symbols]
    heapq.heapify(heap)

    while len(heap) > 1:
        left = heapq.heappop(heap)
        right = heapq.heappop(heap)
        merged = Internal(left, right, next(seq))
        logger.debug("merge %.4f + %.4f -> %.4f", left.weight, right.weight, merged.weight)
        heapq.heappush(heap, merged)

    return heap[0]


# ---------- 码表 + 树形文本 ----------
def build_codes(root: Node) -> Tuple[str, CodeBook]:
    """
    从根节点递归遍历，构建码表与树形文本。

    返回:
    - tree: str，形如
        . (1.00)
        ├── A (0.40) 0
        └── 1 (0.60)
            ├── ...
    - book: CodeBook，左边为 '0'，右边为 '1'，码字即根到叶子的路径
    """
    parts: List[str] = ["."]
    book = CodeBook()

    def walk(node: Node, indent: str, code: str) -> None:
        if isinstance(node, Leaf):
            book.insert(node.symbol, code)
            parts.append(f"{node.symbol} ({node.weight:.2f}) {code}\n")
            return
        parts.append(f"{code} ({node.weight:.2f})\n{indent}├── ")
        walk(node.left, indent + "|   ", code + "0")
        parts.append(f"{indent}└── ")
        walk(node.right, indent + "    ", code + "1")

    walk(root, "", "")
    return "".join(parts), book


def huffman_codes(symbols: Sequence[WeightedSymbol]) -> Dict[Hashable, str]:
    """建树 + 推导码表的便捷函数，返回 {symbol: code}。"""
    _, book = build_codes(build_huffman_tree(symbols))
    return book.as_dict()
