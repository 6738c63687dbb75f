"""nestmpl Exceptions

Custom exceptions for the nested template renderer.
"""

from __future__ import annotations


class NestmplError(Exception):
    """Base exception for all nestmpl errors."""

    pass


class ParseError(NestmplError):
    """Base for errors raised while tokenizing or rendering a template tree."""

    pass


class MissingOpenBraceError(ParseError):
    """Raised when a close brace has no open brace before it.

    `position` is a character (code point) offset relative to the sub-body
    being scanned, not the full body.
    """

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"Close brace at {position} does not have a corresponding open brace"
        )


class MissingCloseBraceError(ParseError):
    """Raised when an open brace is never closed.

    `position` is a character (code point) offset relative to the sub-body
    being scanned, not the full body.
    """

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"Open brace at {position} does not have a corresponding close brace"
        )


class MissingTemplateError(ParseError):
    """Raised when a placeholder names a sub-template that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No sub-template registered under: {name!r}")


class DepthExceededError(NestmplError):
    """Raised when a template tree nests deeper than the allowed render depth."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Template tree exceeds maximum render depth of {max_depth}")


class TemplateOwnershipError(NestmplError):
    """Raised when attaching a template would share it or create a cycle."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot attach sub-template {name!r}: {reason}")


class TemplateSpecError(NestmplError):
    """Raised when template data does not describe a valid template tree."""

    pass
