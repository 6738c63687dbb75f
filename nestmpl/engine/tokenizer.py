"""Tokenizer - splits a template body into literal and placeholder segments.

Syntax:
  - {name}   placeholder, surrounding whitespace inside the braces is ignored
  - {{ / }}  escaped braces, rendered as a single literal brace

Escaped open braces are resolved first, then escaped close braces, then
placeholders. There is no nesting: `{ {inner} }` is malformed.
"""

from __future__ import annotations

import enum
import logging

import msgspec

from nestmpl.exceptions import MissingCloseBraceError, MissingOpenBraceError

log = logging.getLogger(__name__)

OPEN_BRACE = "{"
CLOSE_BRACE = "}"
ESCAPED_OPEN = OPEN_BRACE * 2
ESCAPED_CLOSE = CLOSE_BRACE * 2


class SegmentKind(str, enum.Enum):
    """What a segment turns into at render time."""

    LITERAL = "literal"
    PLACEHOLDER = "placeholder"


class Segment(msgspec.Struct, frozen=True):
    """One unit of a tokenized body.

    For a literal, `text` is emitted verbatim. For a placeholder, `text` is
    the (stripped) sub-template name to resolve.
    """

    kind: SegmentKind
    text: str

    @classmethod
    def literal(cls, text: str) -> "Segment":
        return cls(SegmentKind.LITERAL, text)

    @classmethod
    def placeholder(cls, name: str) -> "Segment":
        return cls(SegmentKind.PLACEHOLDER, name)

    @property
    def is_placeholder(self) -> bool:
        return self.kind is SegmentKind.PLACEHOLDER


def tokenize(body: str) -> list[Segment]:
    """Tokenize a template body into an ordered list of segments.

    Args:
        body: Complete template body.

    Returns:
        Segments in render order. Every placeholder is surrounded by literal
        segments, which may be empty.

    Raises:
        MissingCloseBraceError: An open brace is never closed.
        MissingOpenBraceError: A close brace has no open brace before it.

    Example:
        >>> [s.text for s in tokenize("a{{b}}c")]
        ['a', '{', 'b', '}', 'c']
    """
    segments: list[Segment] = []

    for i, piece in enumerate(body.split(ESCAPED_OPEN)):
        if i:
            segments.append(Segment.literal(OPEN_BRACE))

        for j, part in enumerate(piece.split(ESCAPED_CLOSE)):
            if j:
                segments.append(Segment.literal(CLOSE_BRACE))
            _scan_placeholders(part, segments)

    log.debug("Tokenized %d chars into %d segments", len(body), len(segments))
    return segments


def _scan_placeholders(text: str, segments: list[Segment]) -> None:
    """Append the segments of a piece that holds no escaped braces.

    Error positions are character offsets into the text still left to scan,
    i.e. relative to `pos`.
    """
    pos = 0

    while True:
        open_at = text.find(OPEN_BRACE, pos)
        close_at = text.find(CLOSE_BRACE, pos)

        if open_at == -1 and close_at == -1:
            segments.append(Segment.literal(text[pos:]))
            return

        if close_at == -1:
            raise MissingCloseBraceError(open_at - pos)

        # A close brace ahead of any opener is stray, even if an opener follows
        if open_at == -1 or close_at < open_at:
            raise MissingOpenBraceError(close_at - pos)

        segments.append(Segment.literal(text[pos:open_at]))
        segments.append(Segment.placeholder(text[open_at + 1 : close_at].strip()))
        pos = close_at + 1
