"""Run-time statistics collected into numbered slots, for debugging."""

from __future__ import annotations

import math
import sys
import threading
from typing import TextIO

MAX_DEBUG_SLOTS = 32
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _fmt(x: float) -> str:
    return format(x, "g")


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _div(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a)


class DebugStats:
    """Hit rates, means, deviations, extremes and correlations per slot."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.clear()

    def clear(self) -> None:
        with self._lock:
            self._hit = [[0, 0] for _ in range(MAX_DEBUG_SLOTS)]
            self._mean = [[0, 0] for _ in range(MAX_DEBUG_SLOTS)]
            self._stdev = [[0, 0, 0] for _ in range(MAX_DEBUG_SLOTS)]
            self._correl = [[0] * 6 for _ in range(MAX_DEBUG_SLOTS)]
            self._extremes = [[0, _INT64_MIN, _INT64_MAX] for _ in range(MAX_DEBUG_SLOTS)]

    @staticmethod
    def _check(slot: int) -> None:
        if not 0 <= slot < MAX_DEBUG_SLOTS:
            raise IndexError(f"debug slot out of range: {slot}")

    def hit_on(self, cond: bool, slot: int = 0) -> None:
        self._check(slot)
        with self._lock:
            entry = self._hit[slot]
            entry[0] += 1
            if cond:
                entry[1] += 1

    def mean_of(self, value: int, slot: int = 0) -> None:
        self._check(slot)
        with self._lock:
            entry = self._mean[slot]
            entry[0] += 1
            entry[1] += value

    def stdev_of(self, value: int, slot: int = 0) -> None:
        self._check(slot)
        with self._lock:
            entry = self._stdev[slot]
            entry[0] += 1
            entry[1] += value
            entry[2] += value * value

    def extremes_of(self, value: int, slot: int = 0) -> None:
        self._check(slot)
        with self._lock:
            entry = self._extremes[slot]
            entry[0] += 1
            entry[1] = max(entry[1], value)
            entry[2] = min(entry[2], value)

    def correl_of(self, value1: int, value2: int, slot: int = 0) -> None:
        self._check(slot)
        with self._lock:
            entry = self._correl[slot]
            entry[0] += 1
            entry[1] += value1
            entry[2] += value1 * value1
            entry[3] += value2
            entry[4] += value2 * value2
            entry[5] += value1 * value2

    def report(self) -> list[str]:
        """Return one line per used slot, grouped by statistic."""
        lines: list[str] = []
        with self._lock:
            for i, (n, hits) in enumerate(self._hit):
                if n:
                    lines.append(
                        f"Hit #{i}: Total {n} Hits {hits} Hit Rate (%) {_fmt(100.0 * hits / n)}"
                    )
            for i, (n, total) in enumerate(self._mean):
                if n:
                    lines.append(f"Mean #{i}: Total {n} Mean {_fmt(total / n)}")
            for i, (n, s1, s2) in enumerate(self._stdev):
                if n:
                    r = _sqrt(s2 / n - (s1 / n) ** 2)
                    lines.append(f"Stdev #{i}: Total {n} Stdev {_fmt(r)}")
            for i, (n, hi, lo) in enumerate(self._extremes):
                if n:
                    lines.append(f"Extremity #{i}: Total {n} Min {lo} Max {hi}")
            for i, (n, x, xx, y, yy, xy) in enumerate(self._correl):
                if n:
                    ex, ey = x / n, y / n
                    num = xy / n - ex * ey
                    den = _sqrt(xx / n - ex * ex) * _sqrt(yy / n - ey * ey)
                    lines.append(f"Correl. #{i}: Total {n} Coefficient {_fmt(_div(num, den))}")
        return lines

    def print_report(self, stream: TextIO | None = None) -> None:
        out = sys.stderr if stream is None else stream
        for line in self.report():
            out.write(line + "\n")
        out.flush()