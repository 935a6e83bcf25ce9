import io
import os
import sys

import pytest
import zstandard

from xqcore.misc import (
    PRNG,
    engine_info,
    engine_version_info,
    get_binary_directory,
    get_working_directory,
    is_whitespace,
    move_to_front,
    mul_hi64,
    now,
    read_compressed_nnue,
    read_file_to_string,
    remove_whitespace,
    split,
    start_logger,
    str_to_size_t,
)


def test_version_format():
    fields = engine_version_info().split(" ")
    assert len(fields) == 2
    tag, date, suffix = fields[1].split("-")
    assert tag == "dev"
    assert suffix == "nogit"
    assert len(date) == 8
    assert date.isdigit()
    assert 1 <= int(date[4:6]) <= 12
    assert 1 <= int(date[6:8]) <= 31


def test_engine_info_forms():
    v = engine_version_info()
    assert engine_info().startswith(v + " by ")
    assert engine_info(True).startswith(v + "\nid author ")


def test_now_monotonic():
    a = now()
    b = now()
    assert b >= a


def test_split():
    assert split("a,b,,c", ",") == ["a", "b", "", "c"]
    assert split("", ",") == []
    assert split("abc", ",") == ["abc"]
    assert split("x::y", "::") == ["x", "y"]


def test_split_empty_delimiter():
    with pytest.raises(ValueError):
        split("abc", "")


def test_remove_whitespace():
    assert remove_whitespace(" a\tb\nc \r\v\f") == "abc"


def test_is_whitespace():
    assert is_whitespace(" \t\n")
    assert is_whitespace("")
    assert not is_whitespace(" a ")


def test_str_to_size_t():
    assert str_to_size_t("42") == 42
    assert str_to_size_t("  17abc") == 17
    assert str_to_size_t("+5") == 5


def test_str_to_size_t_negative_wraps():
    assert str_to_size_t("-1") == 2**64 - 1


def test_str_to_size_t_errors():
    with pytest.raises(ValueError):
        str_to_size_t("abc")
    with pytest.raises(OverflowError):
        str_to_size_t(str(2**64))


def test_read_file_to_string(tmp_path):
    p = tmp_path / "f.bin"
    p.write_bytes(b"\x00\x01data")
    assert read_file_to_string(str(p)) == b"\x00\x01data"
    assert read_file_to_string(str(tmp_path / "missing")) is None


def test_read_compressed_round_trip(tmp_path):
    data = bytes(range(256)) * 1000
    p = tmp_path / "net.zst"
    p.write_bytes(zstandard.ZstdCompressor().compress(data))
    assert read_compressed_nnue(str(p)).getvalue() == data


def test_read_compressed_multiple_frames(tmp_path):
    c = zstandard.ZstdCompressor()
    p = tmp_path / "net.zst"
    p.write_bytes(c.compress(b"first") + c.compress(b"second"))
    assert read_compressed_nnue(str(p)).getvalue() == b"firstsecond"


def test_read_compressed_missing_and_garbage(tmp_path):
    assert read_compressed_nnue(str(tmp_path / "none")).getvalue() == b""
    p = tmp_path / "bad.zst"
    p.write_bytes(b"this is not zstd data at all")
    assert read_compressed_nnue(str(p)).getvalue() == b""


def test_working_directory():
    assert get_working_directory() == os.getcwd()


def test_binary_directory_with_path():
    assert get_binary_directory("/usr/bin/engine") == "/usr/bin/"


def test_binary_directory_relative():
    sep = "\\" if os.name == "nt" else "/"
    assert get_binary_directory("engine") == os.getcwd() + sep
    assert get_binary_directory("." + sep + "engine") == os.getcwd() + sep


def test_mul_hi64():
    a = 0xDEADBEEFCAFEBABE
    assert mul_hi64(a, 1) == 0
    for k in (1, 8, 32, 63):
        assert mul_hi64(a, 1 << k) == a >> (64 - k)
    assert mul_hi64(a, 7) == mul_hi64(7, a)


def test_move_to_front():
    items = [1, 2, 3, 4, 5]
    move_to_front(items, lambda x: x == 4)
    assert items == [4, 1, 2, 3, 5]
    move_to_front(items, lambda x: x > 100)
    assert items == [4, 1, 2, 3, 5]


def test_prng_deterministic_and_in_range():
    a, b = PRNG(1070372), PRNG(1070372)
    xs = [a.rand64() for _ in range(100)]
    assert xs == [b.rand64() for _ in range(100)]
    assert all(0 <= x < 2**64 for x in xs)
    assert len(set(xs)) == 100


def test_prng_sparse():
    g = PRNG(12345)
    bits = sum(g.sparse_rand().bit_count() for _ in range(500))
    dense = sum(PRNG(12345).rand64().bit_count() for _ in range(1))
    assert bits / 500 < 16
    assert dense > 0


def test_prng_zero_seed():
    with pytest.raises(ValueError):
        PRNG(0)


def test_logger_records_io(tmp_path, monkeypatch):
    log = tmp_path / "io.log"
    monkeypatch.setattr(sys, "stdin", io.StringIO("go\n"))
    original_out = sys.stdout
    start_logger(str(log))
    try:
        print("hello")
        line = sys.stdin.readline()
    finally:
        start_logger("")
    assert line == "go\n"
    assert sys.stdout is original_out
    assert log.read_text(encoding="utf-8") == "<< hello\n>> go\n"


def test_logger_bad_path(tmp_path):
    with pytest.raises(OSError):
        start_logger(str(tmp_path / "no_dir" / "x.log"))
    start_logger("")
    assert not isinstance(sys.stdout, type(None))
    assert hasattr(sys.stdout, "write")