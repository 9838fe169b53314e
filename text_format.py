# text_format.py
# "<row-name> <bitstring>" problem encoding

from __future__ import annotations

from typing import Iterable, List, Tuple

from dlx import Matrix, MalformedInput, build


def parse_problem(text: str) -> Tuple[int, List[Tuple[str, List[int]]]]:
    """
    Parse one row per line. The first line fixes the column count; a '1'
    at position i means the row covers column i.
    """
    width = -1
    rows: List[Tuple[str, List[int]]] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 2:
            raise MalformedInput(f"line {line_no}: expected '<name> <bits>', got {line!r}")
        name, bits = parts
        if set(bits) - {"0", "1"}:
            raise MalformedInput(f"line {line_no}: row {name!r} has non-binary bits {bits!r}")
        if width < 0:
            width = len(bits)
        elif len(bits) != width:
            raise MalformedInput(
                f"line {line_no}: row {name!r} has {len(bits)} columns, expected {width}"
            )
        rows.append((name, [i for i, bit in enumerate(bits) if bit == "1"]))

    if not rows:
        raise MalformedInput("problem has no rows")
    return width, rows


def load_problem(text: str) -> Matrix:
    width, rows = parse_problem(text)
    return build(width, rows)


def encode_row(name: str, columns: int | Iterable[int], width: int) -> str:
    if isinstance(columns, int):
        if columns < 0 or columns >> width:
            raise MalformedInput(f"row {name!r} does not fit {width} columns")
        picked = {i for i in range(width) if columns >> i & 1}
    else:
        picked = set(columns)
    if any(not 0 <= c < width for c in picked):
        raise MalformedInput(f"row {name!r} does not fit {width} columns")
    bits = "".join("1" if i in picked else "0" for i in range(width))
    return f"{name} {bits}"
