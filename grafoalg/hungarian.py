"""Minimum-sum perfect matching on a square cost matrix (Hungarian method)."""

from __future__ import annotations

import argparse
import io
import sys
from collections import deque
from pathlib import Path
from typing import Iterable, Sequence, TextIO

_THOUSANDS = ("", "M", "MM", "MMM")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_UNITS = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")

_UNLABELED = -1
_START = -2
_NO_CHANGE_LIMIT = 10**9


def int_to_roman(value: int) -> str:
    """Roman numeral for ``value`` in 0..3999 (0 gives the empty string)."""
    if not 0 <= value <= 3999:
        raise ValueError(f"{value} cannot be written as a roman numeral here")
    return (
        _THOUSANDS[value // 1000]
        + _HUNDREDS[value % 1000 // 100]
        + _TENS[value % 100 // 10]
        + _UNITS[value % 10]
    )


def _cell(text: str) -> str:
    """Centre ``text`` in a five character column."""
    pad = 5 - len(text)
    if pad <= 0:
        return text
    left = pad // 2
    return " " * left + text + " " * (pad - left)


def _row_name(index: int) -> str:
    return chr(ord("A") + index)


class Hungarian:
    """Solver that records each step of the method as a printable table."""

    def __init__(self, matrix: Iterable[Iterable[int]]) -> None:
        rows = [[int(value) for value in row] for row in matrix]
        size = len(rows)
        for number, row in enumerate(rows, start=1):
            if len(row) != size:
                raise ValueError(
                    f"row {number} has {len(row)} entries; the matrix must be {size}x{size}"
                )
        self.size = size
        self._original = rows
        self.matrix = [row[:] for row in rows]
        self.matching = 0
        self.assignment: list[int] = []
        self._reset_state()

    def _reset_state(self) -> None:
        n = self.size
        self._row_tag = [_UNLABELED] * n
        self._col_tag = [_UNLABELED] * n
        self._row_father = [_UNLABELED] * n
        self._col_father = [_UNLABELED] * n

    def solve(self, out: TextIO | None = None) -> int:
        """Return the minimum sum of a perfect matching, writing every step to ``out``."""
        out = out if out is not None else io.StringIO()
        n = self.size
        self.matrix = [row[:] for row in self._original]
        self.matching = 0
        self._reset_state()

        self._reduce()
        self._show(out)
        out.write("=" * 40 + "\n")

        self._first_matching()
        self._show(out)

        while self.matching != n:
            out.write("\n" + "=" * 40 + "\n")
            self._grow_matching(out)

        return self._finish(out)

    def _reduce(self) -> None:
        for row in self.matrix:
            if row:
                low = min(row)
                row[:] = [value - low for value in row]
        for j in range(self.size):
            low = min(row[j] for row in self.matrix)
            for row in self.matrix:
                row[j] -= low

    def _first_matching(self) -> None:
        for i, row in enumerate(self.matrix):
            for j, value in enumerate(row):
                if value == 0 and self._col_tag[j] == _UNLABELED:
                    self.matching += 1
                    self._col_tag[j] = i
                    self._row_tag[i] = j
                    break

    def _extend(self, column: int) -> None:
        """Flip the alternating path that ends at the free ``column``."""
        while True:
            row = self._col_father[column]
            self._col_tag[column] = row
            self.matching += 1
            previous = self._row_tag[row]
            self._row_tag[row] = column
            if previous == _UNLABELED:
                return
            self.matching -= 1
            column = previous

    def _scan(self, queue: deque[tuple[int, bool]]) -> None:
        while queue:
            x, is_column = queue.popleft()
            if not is_column:
                for j, value in enumerate(self.matrix[x]):
                    if (
                        value == 0
                        and j != self._row_tag[x]
                        and self._col_father[j] == _UNLABELED
                    ):
                        self._col_father[j] = x
                        queue.append((j, True))
            elif self._col_tag[x] == _UNLABELED:
                self._extend(x)
                break
            else:
                row = self._col_tag[x]
                if self._row_father[row] == _UNLABELED:
                    self._row_father[row] = x
                    queue.append((row, False))

    def _change_matrix(self, queue: deque[tuple[int, bool]], out: TextIO) -> None:
        out.write(
            "\nNO SE PUEDE EXTENDER EL MATCHING PARA LOGRAR UN MATCHING PERFECTO Y SE LLEGA A:\n"
        )
        self._show(out)

        queue.clear()
        labeled = set()
        gamma = set()
        for i, father in enumerate(self._row_father):
            if father != _UNLABELED:
                queue.append((i, False))
                labeled.add(i)
                gamma.add(father)

        low = min(
            (
                self.matrix[i][j]
                for i in labeled
                for j in range(self.size)
                if j not in gamma
            ),
            default=_NO_CHANGE_LIMIT,
        )
        for i, row in enumerate(self.matrix):
            for j in range(self.size):
                if i in labeled and j not in gamma:
                    row[j] -= low
                elif i not in labeled and j in gamma:
                    row[j] += low

        rows = "".join(f"{_row_name(i)} " for i in sorted(labeled))
        columns = "".join(f"{int_to_roman(j + 1)} " for j in sorted(gamma) if j != _START)
        out.write(f"\nTENEMOS QUE S = {{ {rows}}} Y Gamma(S) = {{ {columns}}}\n")
        out.write("\nSE HACE UN CAMBIO DE MATRIZ OBTENIENDO LA NUEVA:\n")
        self._show(out)

    def _grow_matching(self, out: TextIO) -> None:
        queue: deque[tuple[int, bool]] = deque()
        for i, tag in enumerate(self._row_tag):
            if tag == _UNLABELED:
                self._row_father[i] = _START
                queue.append((i, False))

        while True:
            before = self.matching
            self._scan(queue)
            if self.matching != before:
                break
            self._change_matrix(queue, out)

        self._show(out)
        self._row_father = [_UNLABELED] * self.size
        self._col_father = [_UNLABELED] * self.size

    def _finish(self, out: TextIO) -> int:
        self.matrix = [row[:] for row in self._original]
        total = sum(row[self._row_tag[i]] for i, row in enumerate(self.matrix))
        self.assignment = list(self._row_tag)

        out.write("_" * 60 + "\n")
        out.write("           LA RESPUESTA ES LA SIGUIENTE:\n")
        self._show(out)
        out.write(f"           CON UNA SUMA DE {total}\n\n")
        return total

    def _father_label(self, father: int) -> str:
        if father == _UNLABELED:
            return ""
        if father == _START:
            return "s"
        return int_to_roman(father + 1)

    def _show(self, out: TextIO) -> None:
        parts = ["\n", f"  Actual Matching = {self.matching}\n"]
        parts.append(
            _cell("") + "".join(_cell(int_to_roman(j)) for j in range(1, self.size + 1)) + "\n"
        )
        for i, row in enumerate(self.matrix):
            line = [_cell(_row_name(i))]
            for j, value in enumerate(row):
                text = str(value)
                if self._row_tag[i] == j:
                    text = f"[{text}]"
                line.append(_cell(text))
            line.append(_cell(self._father_label(self._row_father[i])))
            parts.append("".join(line) + "\n")
        parts.append(
            _cell("")
            + "".join(
                _cell("" if father == _UNLABELED else _row_name(father))
                for father in self._col_father
            )
            + "\n"
        )
        out.write("".join(parts))


def parse_matrix(text: str) -> list[list[int]]:
    """Read ``n`` followed by the ``n * n`` entries of the matrix, row by row."""
    tokens = text.split()
    if not tokens:
        raise ValueError("missing matrix size")
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"matrix input must be integers: {exc}") from None
    size, entries = values[0], values[1:]
    if size < 0:
        raise ValueError("matrix size must not be negative")
    if len(entries) < size * size:
        raise ValueError(f"expected {size * size} entries, found {len(entries)}")
    return [entries[i * size:(i + 1) * size] for i in range(size)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a square cost matrix and print the steps to its minimum-sum matching."""
    parser = argparse.ArgumentParser(
        prog="grafoalg-hungarian",
        description="Minimum-sum perfect matching. Input: n, then an n x n matrix.",
    )
    parser.add_argument("input", nargs="?", help="matrix file (default: standard input)")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        solver = Hungarian(parse_matrix(text))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    solver.solve(sys.stdout)
    return 0