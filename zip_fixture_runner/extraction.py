"""Path expressions over decoded JSON, e.g. ``places[0].'place name'``.

A path is a dot-separated list of segments. A segment is a bare name or a
quoted name (quotes allow spaces), optionally followed by ``[n]`` indices.
Negative indices count from the end of the array.
"""
import re
from typing import Any

from .errors import ConfigurationError, ExtractionError

Step = str | int

_TOKEN = re.compile(
    r"""
      (?P<name>[A-Za-z_][\w-]*)
    | '(?P<single>[^']*)'
    | "(?P<double>[^"]*)"
    | \[(?P<index>-?\d+)\]
    | (?P<dot>\.)
    """,
    re.VERBOSE,
)


def parse_path(expr: str) -> list[Step]:
    steps: list[Step] = []
    expect_segment = True
    pos = 0
    while pos < len(expr):
        match = _TOKEN.match(expr, pos)
        if match is None:
            raise ConfigurationError(f"Malformed path {expr!r}: unexpected {expr[pos]!r} at offset {pos}")
        kind = match.lastgroup
        if kind == "dot":
            if expect_segment:
                raise ConfigurationError(f"Malformed path {expr!r}: empty segment at offset {pos}")
            expect_segment = True
        elif kind == "index":
            if expect_segment:
                raise ConfigurationError(f"Malformed path {expr!r}: index without a segment at offset {pos}")
            steps.append(int(match.group("index")))
        else:
            if not expect_segment:
                raise ConfigurationError(f"Malformed path {expr!r}: missing '.' at offset {pos}")
            steps.append(match.group(kind))
            expect_segment = False
        pos = match.end()

    if expect_segment:
        raise ConfigurationError(f"Malformed path {expr!r}: expected a segment at the end")
    return steps


def _render(steps: list[Step]) -> str:
    out = ""
    for step in steps:
        if isinstance(step, int):
            out += f"[{step}]"
        else:
            name = step if re.fullmatch(r"[A-Za-z_][\w-]*", step) else f"'{step}'"
            out += f".{name}" if out else name
    return out or "<root>"


def extract_path(document: Any, expr: str) -> Any:
    """Return the value at ``expr`` inside ``document``.

    Raises ExtractionError naming the step that could not be followed.
    """
    steps = parse_path(expr)
    node = document
    for i, step in enumerate(steps):
        where = _render(steps[:i])
        if isinstance(step, int):
            if not isinstance(node, list):
                raise ExtractionError(expr, f"{where} is not an array")
            try:
                node = node[step]
            except IndexError:
                raise ExtractionError(
                    expr, f"index [{step}] out of range for {where} of length {len(node)}"
                ) from None
        else:
            if not isinstance(node, dict):
                raise ExtractionError(expr, f"{where} is not an object")
            if step not in node:
                raise ExtractionError(expr, f"{where} has no field {step!r}")
            node = node[step]
    return node


def extract_string(document: Any, expr: str) -> str:
    value = extract_path(document, expr)
    if not isinstance(value, str):
        raise ExtractionError(expr, f"expected a string, got {type(value).__name__}")
    return value
