"""Tokenizer and coordinate-list parser for the per-map source files.

The source files are comma-delimited, but one kind of cell holds a whole
list of coordinates, e.g.

    Metal Node,"[(10.5,20.1),(30.0,40.2)]",...

so a plain csv reader would split inside the list. split_line() tracks
quote state and bracket depth, and parse_coordinates() turns one list cell
into (lat, lon) pairs.
"""

import math
import re
from typing import Optional

# Pair delimiter inside a coordinate list: a closing paren followed by a comma
_PAIR_DELIMITER = "),"
_LIST_PUNCTUATION = re.compile(r"[()\[\]]")


def _clean_field(raw: str) -> str:
    field = raw.strip()
    if field.startswith('"'):
        field = field[1:]
    if field.endswith('"'):
        field = field[:-1]
    return field


def split_line(line: str) -> list[str]:
    """Split one source line into raw field strings.

    Commas separate fields only outside quotes and at bracket depth 0.
    Quote characters toggle quoting and are dropped. Unbalanced brackets are
    accepted as they come: depth may go negative or never return to zero,
    in which case the rest of the line stays in one field.
    """
    fields: list[str] = []
    current: list[str] = []
    depth = 0
    in_quotes = False

    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
            continue

        if not in_quotes:
            if ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1

            if ch == "," and depth == 0:
                fields.append(_clean_field("".join(current)))
                current = []
                continue

        current.append(ch)

    # The last field has no trailing separator; always keep it
    fields.append(_clean_field("".join(current)))
    return fields


def _to_number(token: Optional[str]) -> float:
    # Non-numeric or missing tokens become NaN; callers decide what to do with them
    if token is None:
        return math.nan
    try:
        return float(token.strip())
    except ValueError:
        return math.nan


def parse_coordinates(raw: Optional[str]) -> list[tuple[float, float]]:
    """Parse a "[(lat,lon),(lat,lon),...]" cell into ordered (lat, lon) pairs.

    Absent, empty, or non-list cells yield an empty list. Malformed pairs are
    not rejected here: missing or non-numeric values come back as NaN and
    tokens past the second are ignored.
    """
    if raw is None:
        return []
    text = raw.strip()
    if not text.startswith("["):
        return []
    text = text[1:-1]
    if not text:
        return []

    pairs: list[tuple[float, float]] = []
    for chunk in text.split(_PAIR_DELIMITER):
        tokens = _LIST_PUNCTUATION.sub("", chunk).strip().split(",")
        lat = _to_number(tokens[0])
        lon = _to_number(tokens[1] if len(tokens) > 1 else None)
        pairs.append((lat, lon))
    return pairs


def is_valid_pair(pair: tuple[float, float]) -> bool:
    return math.isfinite(pair[0]) and math.isfinite(pair[1])
