from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Tuple

from svgtransform.TransformCommand import TransformCommand, check_arity
from svgtransform.TransformErrors import UnparseableInput
from svgtransform.TransformType import TransformType

logger = logging.getLogger(__name__)

# One command group: name ( numbers ) plus an optional comma-wsp separator.
#   rotate(45, 10 20) , scale(2)
COMMAND_RE = re.compile(
    r"(\w+)\s*\(\s*([-0-9.,eE\s]*?)\s*\)(?:\s+,?\s*|,\s*)?")

# Separators inside a numbers region: comma, whitespace, or a '-' that does
# not belong to an exponent ("4-7" -> 4, -7 but "1e-5" stays whole).
SPLIT_RE = re.compile(r",|\s+|(?<![eE])(?=-)")


class TransformParser:
    """Parser for the SVG transform attribute (SVG 1.1, section 7.6)."""

    @staticmethod
    def parse(raw: Optional[str]) -> List[TransformCommand]:
        """Parse `raw` into commands in source order.

        An empty or blank string yields an empty list. rotate(a cx cy) is
        expanded into translate(cx cy) rotate(a) translate(-cx -cy).
        Raises a TransformError subclass on malformed input.
        """
        text = (raw or "").strip()
        if not text:
            return []

        commands: List[TransformCommand] = []
        for name, blob in TransformParser._scan(text):
            commands.extend(TransformParser._build(name, blob))
        return commands

    @staticmethod
    def split_numbers(blob: str) -> List[str]:
        return [tok for tok in SPLIT_RE.split(blob) if tok]

    @staticmethod
    def _scan(text: str) -> List[Tuple[str, str]]:
        groups: List[Tuple[str, str]] = []
        pos = 0
        while pos < len(text):
            m = COMMAND_RE.match(text, pos)
            if m is None:
                break
            groups.append((m.group(1), m.group(2)))
            pos = m.end()

        if not groups:
            raise UnparseableInput(text)
        if pos < len(text):
            # Unmatched text between or after commands is rejected outright.
            raise UnparseableInput(text[pos:])
        return groups

    @staticmethod
    def _build(name: str, blob: str) -> List[TransformCommand]:
        kind = TransformType.from_name(name)
        tokens = TransformParser.split_numbers(blob)
        check_arity(kind, len(tokens))
        params = [TransformParser._to_float(tok) for tok in tokens]
        return TransformCommand.of(kind, params).expand()

    @staticmethod
    def _to_float(token: str) -> float:
        try:
            value = float(token)
        except ValueError:
            logger.debug("Rejecting numeric token %r", token)
            raise UnparseableInput(token) from None
        if not math.isfinite(value):
            logger.debug("Rejecting out-of-range token %r", token)
            raise UnparseableInput(token)
        return value
