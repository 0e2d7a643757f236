# tests/test_freqlist.py

import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from huffcode.freqlist import parse_freq_lines, parse_weight, read_freq_file


def test_parse_basic_lines():
    assert parse_freq_lines(["a,0.5\n", "b,0.25\n", "c,0.25"]) == [
        ("a", 0.5), ("b", 0.25), ("c", 0.25),
    ]


def test_malformed_and_missing_weights_default_to_zero():
    assert parse_freq_lines(["a,abc\n", "b\n", "c,\n"]) == [
        ("a", 0.0), ("b", 0.0), ("c", 0.0),
    ]


def test_blank_lines_skipped_and_extra_fields_ignored():
    lines = ["a,1\n", "\n", "b,2,comment\n", "\r\n"]
    assert parse_freq_lines(lines) == [("a", 1.0), ("b", 2.0)]


def test_padded_or_underscored_weights_default_to_zero():
    # 符号原样保留；权重必须是紧凑的数字写法
    assert parse_freq_lines([" a , 3 \n", "b,1_0\n", "c,3\n"]) == [
        (" a ", 0.0), ("b", 0.0), ("c", 3.0),
    ]


def test_parse_weight():
    assert parse_weight("0.25") == 0.25
    assert parse_weight("1e-3") == 0.001
    assert parse_weight("-2") == -2.0
    assert parse_weight(" 3") is None
    assert parse_weight("3\t") is None
    assert parse_weight("1_000") is None
    assert parse_weight("") is None
    assert parse_weight("abc") is None


def test_empty_delimiter_rejected():
    with pytest.raises(ValueError, match="delimiter"):
        parse_freq_lines(["a,1\n"], delimiter="")


def test_custom_delimiter():
    assert parse_freq_lines(["x\t4\n", "y,z\t1\n"], delimiter="\t") == [
        ("x", 4.0), ("y,z", 1.0),
    ]


def test_read_freq_file(tmp_path):
    path = tmp_path / "freq.txt"
    path.write_text("A,0.36\nB,0.21\n中,0.43\n", encoding="utf-8")
    assert read_freq_file(path) == [("A", 0.36), ("B", 0.21), ("中", 0.43)]
    assert read_freq_file(str(path)) == read_freq_file(path)
