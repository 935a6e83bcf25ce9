"""Assorted helpers: version strings, string utilities, files, I/O logging, PRNG."""

from __future__ import annotations

import io
import os
import sys
import threading
import time
from collections.abc import Callable, MutableSequence
from datetime import date
from typing import Any, TextIO, TypeVar

import zstandard

ENGINE_NAME = "xqcore"
VERSION = "dev"
AUTHOR = f"the {ENGINE_NAME} developers"

_MASK64 = (1 << 64) - 1
_SIZE_T_MAX = _MASK64
_C_SPACE = frozenset(" \t\n\v\f\r")

T = TypeVar("T")


def engine_version_info() -> str:
    """Name and version; development versions carry the date and a source tag."""
    info = f"{ENGINE_NAME} {VERSION}"
    if VERSION == "dev":
        info += f"-{date.today():%Y%m%d}-nogit"
    return info


def engine_info(to_uci: bool = False) -> str:
    """Version line followed by the authors, in UCI form when ``to_uci`` is set."""
    return engine_version_info() + ("\nid author " if to_uci else " by ") + AUTHOR


def now() -> int:
    """Milliseconds on a monotonic clock."""
    return time.monotonic_ns() // 1_000_000


def split(s: str, delimiter: str) -> list[str]:
    """Split ``s`` on ``delimiter``; an empty string gives an empty list."""
    if not delimiter:
        raise ValueError("empty delimiter")
    if not s:
        return []
    return s.split(delimiter)


def remove_whitespace(s: str) -> str:
    """Return ``s`` with every whitespace character removed."""
    return "".join(c for c in s if c not in _C_SPACE)


def is_whitespace(s: str) -> bool:
    """True if ``s`` holds only whitespace (or nothing)."""
    return all(c in _C_SPACE for c in s)


def str_to_size_t(s: str) -> int:
    """Parse the leading unsigned decimal number of ``s``.

    Leading whitespace and a sign are accepted, trailing text is ignored; a
    minus sign wraps the value modulo 2**64. Raises ``ValueError`` when there
    are no digits and ``OverflowError`` when the value does not fit.
    """
    text = s.lstrip("".join(_C_SPACE))
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    digits = ""
    for c in text:
        if not ("0" <= c <= "9"):
            break
        digits += c
    if not digits:
        raise ValueError(f"no number in {s!r}")
    value = int(digits)
    if value > _MASK64:
        raise OverflowError(f"number out of range: {s!r}")
    if negative:
        value = (-value) & _MASK64
    if value > _SIZE_T_MAX:
        raise OverflowError(f"number out of range: {s!r}")
    return value


def read_file_to_string(path: str | os.PathLike[str]) -> bytes | None:
    """Return the file's bytes, or ``None`` if it cannot be opened."""
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError:
        return None


def read_compressed_nnue(path: str | os.PathLike[str]) -> io.BytesIO:
    """Decompress a zstd file into memory.

    A missing file gives an empty buffer; on corrupt data the buffer holds
    whatever was decompressed before the error.
    """
    out = io.BytesIO()
    try:
        fh = open(path, "rb")
    except OSError:
        return out
    with fh:
        reader = zstandard.ZstdDecompressor().stream_reader(
            fh, read_across_frames=True, closefd=False
        )
        try:
            while chunk := reader.read(1 << 17):
                out.write(chunk)
        except zstandard.ZstdError:
            pass
    out.seek(0)
    return out


def get_working_directory() -> str:
    """The current directory, or an empty string if it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        return ""


def get_binary_directory(argv0: str) -> str:
    """The directory part of ``argv0``, with a leading ``./`` made absolute."""
    sep = "\\" if os.name == "nt" else "/"
    pos = max(argv0.rfind("\\"), argv0.rfind("/"))
    directory = "." + sep if pos < 0 else argv0[: pos + 1]
    if directory.startswith("." + sep):
        directory = get_working_directory() + directory[1:]
    return directory


def mul_hi64(a: int, b: int) -> int:
    """High 64 bits of the 128-bit product of two 64-bit values."""
    return ((a & _MASK64) * (b & _MASK64)) >> 64


def move_to_front(items: MutableSequence[T], pred: Callable[[T], bool]) -> None:
    """Move the first item matching ``pred`` to the front, keeping the rest in order."""
    for i, item in enumerate(items):
        if pred(item):
            del items[i]
            items.insert(0, item)
            return


class PRNG:
    """xorshift64* pseudo-random generator with a 64-bit state."""

    def __init__(self, seed: int) -> None:
        seed &= _MASK64
        if not seed:
            raise ValueError("seed must be non-zero")
        self._s = seed

    def rand64(self) -> int:
        s = self._s
        s ^= s >> 12
        s ^= (s << 25) & _MASK64
        s ^= s >> 27
        self._s = s
        return (s * 2685821657736338717) & _MASK64

    def sparse_rand(self) -> int:
        """A value with about one bit in eight set."""
        return self.rand64() & self.rand64() & self.rand64()


class _LogState:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.last = "\n"
        self.file: TextIO | None = None
        self.orig_in: Any = None
        self.orig_out: Any = None

    def log(self, text: str, prefix: str) -> None:
        if self.file is None:
            return
        with self.lock:
            for c in text:
                if self.last == "\n":
                    self.file.write(prefix)
                self.file.write(c)
                self.last = c


_state = _LogState()


class _Tie:
    """Stream wrapper that copies everything passing through it to the log."""

    def __init__(self, stream: Any, prefix: str) -> None:
        self._stream = stream
        self._prefix = prefix

    def write(self, s: str) -> int:
        n = self._stream.write(s)
        _state.log(s, self._prefix)
        return n

    def writelines(self, lines: Any) -> None:
        for line in lines:
            self.write(line)

    def read(self, size: int = -1) -> str:
        data = self._stream.read(size)
        _state.log(data, self._prefix)
        return data

    def readline(self, size: int = -1) -> str:
        line = self._stream.readline(size)
        _state.log(line, self._prefix)
        return line

    def __iter__(self) -> _Tie:
        return self

    def __next__(self) -> str:
        line = self.readline()
        if not line:
            raise StopIteration
        return line

    def flush(self) -> None:
        if _state.file is not None:
            _state.file.flush()
        self._stream.flush()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._stream, name)


def start_logger(fname: str) -> None:
    """Copy standard input and output to ``fname``; an empty name stops logging.

    Output lines are prefixed ``<< `` and input lines ``>> ``.
    """
    if _state.file is not None:
        sys.stdout = _state.orig_out
        sys.stdin = _state.orig_in
        _state.file.close()
        _state.file = None

    if fname:
        _state.file = open(fname, "w", encoding="utf-8")
        _state.orig_in = sys.stdin
        _state.orig_out = sys.stdout
        sys.stdin = _Tie(sys.stdin, ">> ")
        sys.stdout = _Tie(sys.stdout, "<< ")