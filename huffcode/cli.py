# huffcode/cli.py
# 命令行入口：读取 "symbol,weight" 频率表 -> 信息熵 / Huffman 树 / 码表 / 平均码长
#
# 用法:
#   huffcode freq.txt
#   huffcode freq.tsv --delimiter "\t" --raw-entropy -v

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from huffcode.entropy import calculate_entropy_from_symbols, compare_entropy
from huffcode.freqlist import DEFAULT_DELIMITER, DEFAULT_ENCODING, read_freq_file
from huffcode.huffman import HuffmanError
from huffcode.report import HuffmanReport

logger = logging.getLogger("HUFFCODE")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffcode",
        description="Build a Huffman code from a symbol,weight list.",
    )
    parser.add_argument("file", help="text file, one symbol,weight pair per line")
    parser.add_argument("-d", "--delimiter", default=DEFAULT_DELIMITER,
                        help="field delimiter (default: %(default)r)")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING)
    parser.add_argument("--raw-entropy", action="store_true",
                        help="use raw weights for entropy and avg_len, do not normalize")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logger.setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    # shell 里传进来的 "\t" 是两个字符
    delimiter = "\t" if args.delimiter in ("\\t", "tab") else args.delimiter
    if not delimiter:
        parser.error("delimiter must not be empty")

    try:
        symbols = read_freq_file(args.file, delimiter=delimiter, encoding=args.encoding)
    except OSError as e:
        print(f"[ERROR] cannot read {args.file}: {e}", file=sys.stderr)
        return 1
    logger.debug("read %d symbols from %s", len(symbols), args.file)

    try:
        report = HuffmanReport(symbols)
    except HuffmanError as e:
        print(f"[ERROR] {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    # 默认都按总权重归一化；--raw-entropy 时都用原始权重
    if args.raw_entropy:
        entropy = calculate_entropy_from_symbols(symbols, normalize=False)
        avg_len = report.avg_len()
    else:
        stats = compare_entropy(report)
        entropy, avg_len = stats["entropy"], stats["avg_len"]

    print(f"entropy: {entropy}")
    print(report.tree_text())
    print(report.display())
    print(f"avg_len: {avg_len}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
