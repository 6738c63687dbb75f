"""nestmpl - nested string templates

Single-brace placeholders resolved against named sub-templates, recursively.

    {name}   replaced by the rendered sub-template registered as "name"
    {{ }}    literal braces
"""

from nestmpl._version import __version__
from nestmpl.config import RenderOptions
from nestmpl.engine import (
    Segment,
    SegmentKind,
    Template,
    TemplateSpec,
    template,
    tokenize,
)
from nestmpl.exceptions import (
    DepthExceededError,
    MissingCloseBraceError,
    MissingOpenBraceError,
    MissingTemplateError,
    NestmplError,
    ParseError,
    TemplateOwnershipError,
    TemplateSpecError,
)
from nestmpl.log import setup_logging

__all__ = [
    "__version__",
    # Core
    "Template",
    "template",
    "tokenize",
    "Segment",
    "SegmentKind",
    "TemplateSpec",
    "RenderOptions",
    "setup_logging",
    # Errors
    "NestmplError",
    "ParseError",
    "MissingOpenBraceError",
    "MissingCloseBraceError",
    "MissingTemplateError",
    "DepthExceededError",
    "TemplateOwnershipError",
    "TemplateSpecError",
]
