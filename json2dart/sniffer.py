"""Numeric type sniffer: recover int/double from the raw JSON text.

A parsed number no longer says whether the sample wrote ``5`` or ``5.0``,
but Dart needs that to choose between ``int`` and ``double``. The sniffer
re-scans the source text for ``"key": <number>`` pairs instead.

Known limitations:
  - exponent notation is not recognized: ``1e10`` only matches ``1`` and is
    classified ``int``;
  - keys are not qualified by path, so when a key repeats the last
    occurrence in the text wins;
  - numbers inside arrays are never preceded by a key and get no hint.
"""

from __future__ import annotations

import re

import structlog

from json2dart.models.types import NumberKind

log = structlog.get_logger("json2dart.sniffer")

# "key": 123 | "key": -1.5 | "key": 3.
_NUMBER_PAIR_RE = re.compile(r'"([^"]+)"\s*:\s*(-?\d+\.?\d*)')


def detect_number_types(text: str) -> dict[str, NumberKind]:
    """Map every key directly followed by a numeric literal to int or double."""
    number_types: dict[str, NumberKind] = {}
    for m in _NUMBER_PAIR_RE.finditer(text):
        key, literal = m.group(1), m.group(2)
        kind = NumberKind.DOUBLE if "." in literal else NumberKind.INT
        prev = number_types.get(key)
        if prev is not None and prev is not kind:
            log.debug("sniffer.hint_overwritten", key=key, old=prev.value, new=kind.value)
        number_types[key] = kind
    return number_types
