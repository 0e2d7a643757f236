# 负责 "symbol,weight" 频率表的读取
# 提供：parse_freq_lines(), parse_weight(), read_freq_file()
# huffcode/freqlist.py

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

logger = logging.getLogger("HUFFCODE")

DEFAULT_DELIMITER = ","
DEFAULT_ENCODING = "utf-8"

# ---- 行级解析 ----
def parse_freq_lines(
    lines: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
) -> List[Tuple[str, float]]:
    """
    每行 "symbol<delimiter>weight"：
      - symbol 取第一个分隔符之前的文本（不做 strip）
      - weight 取第一个与第二个分隔符之间的文本；缺失或非法 -> 0.0
        （带空白或下划线的数字也算非法）
      - 去掉行尾换行后为空的行直接跳过
    """
    if not delimiter:
        raise ValueError("parse_freq_lines: delimiter must not be empty")
    out: List[Tuple[str, float]] = []
    for lineno, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line:
            continue
        parts = line.split(delimiter)
        symbol = parts[0]
        raw = parts[1] if len(parts) > 1 else ""
        weight = parse_weight(raw)
        if weight is None:
            logger.debug("line %d: weight %r not parsed, using 0", lineno, raw)
            weight = 0.0
        out.append((symbol, weight))
    return out

def parse_weight(raw: str) -> Optional[float]:
    """严格解析：float() 会容忍的首尾空白和 "1_0" 这类下划线写法在这里返回 None。"""
    if raw != raw.strip() or "_" in raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None

# ---- 文件读取 ----
def read_freq_file(
    path: Union[str, Path],
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> List[Tuple[str, float]]:
    path = Path(path)
    with path.open("r", encoding=encoding) as f:
        return parse_freq_lines(f, delimiter=delimiter)
