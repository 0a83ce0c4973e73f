"""
Scene text parser — reads Godot 3 .tscn files into a flat list of Records.

Only the constructs levels actually use are understood: `[kind key=value ...]`
section headers and `key = value` body lines. Values are kept as raw strings;
the literal helpers below turn them into numbers when the resolver needs them.
"""
import re
from typing import List, Tuple

import numpy as np

from tscn_level.data_model import Record
from tscn_level.errors import SceneParseError, MalformedLiteralError


_QUOTES_RE = re.compile(r'^"|"$')
# a bare word, or key=value where a quoted value may contain spaces
_HEADER_TOKEN_RE = re.compile(r'[^\s=]+(?:=(?:"[^"]*"|\S*))?')


def _unquote(value):
    return _QUOTES_RE.sub('', value)


def _normalize(line):
    """Collapse padding inside parens and around the first assignment."""
    return (line.replace('( ', '(')
                .replace(' )', ')')
                .replace(' = ', '=', 1)
                .strip())


# ── Record parser ─────────────────────────────────────────────────────

def _parse_header(content, line_no):
    """Parse '[kind key=value ...]' into (kind, properties)."""
    inner = content[1:]
    if inner.endswith(']'):
        inner = inner[:-1]
    tokens = _HEADER_TOKEN_RE.findall(inner)
    if not tokens:
        raise SceneParseError(f"Empty section header: {content!r}", line_no)
    kind = tokens[0]
    properties = {}
    for token in tokens[1:]:
        key, _, value = token.partition('=')
        properties[key] = _unquote(value)
    return kind, properties


def parse_scene_text(text) -> List[Record]:
    """
    Parse scene text into Records, in document order.

    Body lines attach to the most recent section header; body lines without
    an '=' are ignored.
    """
    records = []
    kind, properties = None, None

    for line_no, line in enumerate(text.split('\n'), start=1):
        content = _normalize(line)
        if not content:
            continue

        if content.startswith('['):
            if kind is not None:
                records.append(Record(kind, properties))
            kind, properties = _parse_header(content, line_no)
            continue

        if kind is None:
            raise SceneParseError(
                f"Property line outside any section: {content!r}", line_no)
        key, sep, value = content.partition('=')
        if sep:
            properties[key] = _unquote(value)

    if kind is not None:
        records.append(Record(kind, properties))
    return records


def parse_scene(scene_file):
    """
    Parse a .tscn scene file into Records.

    Args:
        scene_file: path to the scene file (read wholly, UTF-8)

    Returns:
        List[Record]
    """
    with open(scene_file, encoding='utf-8') as f:
        scene_text = f.read()
    return parse_scene_text(scene_text)


# ── Literal parsers ───────────────────────────────────────────────────

_VECTOR2_RE = re.compile(r'Vector2\((-?\d+\.?\d*), ?(-?\d+\.?\d*)\)')
_CALL_RE = re.compile(r'^\s*\w*\((.*)\)\s*$')
_NUMBER_RE = re.compile(r'^-?\d+\.?\d*$')


def parse_vector2(value) -> Tuple[float, float]:
    """'Vector2(x, y)' → (x, y) as floats."""
    m = _VECTOR2_RE.search(value or '')
    if m is None:
        raise MalformedLiteralError('Vector2', value)
    return float(m.group(1)), float(m.group(2))


def _call_args(value, expected):
    """Split the comma-separated arguments of 'Label(a, b, ...)'."""
    m = _CALL_RE.match(value or '')
    if m is None:
        raise MalformedLiteralError(expected, value)
    inner = m.group(1).strip()
    if not inner:
        return []
    return [part.strip() for part in inner.split(',')]


def parse_color(value) -> Tuple[float, float, float, float]:
    """'Color(r, g, b, a)' → (r, g, b, a) as floats."""
    parts = _call_args(value, 'Color')
    if len(parts) != 4 or not all(_NUMBER_RE.match(p) for p in parts):
        raise MalformedLiteralError('Color', value)
    r, g, b, a = (float(p) for p in parts)
    return r, g, b, a


def parse_int(value, expected='integer') -> int:
    try:
        return int(value.strip())
    except (AttributeError, ValueError):
        raise MalformedLiteralError(expected, value) from None


def parse_int_array(value) -> np.ndarray:
    """'PoolIntArray(n1, n2, ...)' → int32 array [n]."""
    parts = _call_args(value, 'PoolIntArray')
    try:
        return np.array([int(p) for p in parts], dtype=np.int32)
    except (ValueError, OverflowError):
        raise MalformedLiteralError('PoolIntArray', value) from None
