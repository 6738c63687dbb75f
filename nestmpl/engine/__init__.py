"""nestmpl.engine - tokenizer and template tree."""

from nestmpl.engine.template import Template, template
from nestmpl.engine.tokenizer import Segment, SegmentKind, tokenize
from nestmpl.engine.spec import TemplateSpec

__all__ = ["Template", "template", "Segment", "SegmentKind", "tokenize", "TemplateSpec"]
