"""Template - a body plus the named sub-templates it owns.

A template tree is rendered depth-first: every placeholder in a body is
replaced by the rendered output of the sub-template registered under that
name on the same template.

Usage:
    page = template("<body>{content}</body>", {"content": Template("hi")})
    page.render()  # "<body>hi</body>"
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from nestmpl.config import RenderOptions
from nestmpl.engine.tokenizer import tokenize
from nestmpl.exceptions import (
    DepthExceededError,
    MissingTemplateError,
    TemplateOwnershipError,
)

log = logging.getLogger(__name__)


class Template:
    """A node in a template tree.

    Each sub-template is owned by exactly one parent. Attaching a template
    that already has a parent, or one that is an ancestor of the target,
    raises TemplateOwnershipError, so a tree can never contain a cycle.
    """

    def __init__(self, body: str):
        if not isinstance(body, str):
            raise TypeError(
                f"Template body must be a string, got {type(body).__name__}"
            )
        self._body = body
        self._children: dict[str, Template] = {}
        self._parent: Template | None = None

    @property
    def body(self) -> str:
        return self._body

    @property
    def children(self) -> Mapping[str, "Template"]:
        """Read-only view of the sub-templates, keyed by name."""
        return MappingProxyType(self._children)

    def add_sub_template(self, name: str, template: "Template") -> None:
        """Attach `template` under `name`, replacing any previous sub-template.

        The replaced sub-template is detached and may be attached elsewhere.
        """
        current = self._children.get(name)
        if current is template:
            return

        if template._parent is not None:
            raise TemplateOwnershipError(name, "template already has a parent")
        # Only a template with children can be an ancestor of another
        if template is self or (
            template._children and any(node is template for node in self._lineage())
        ):
            raise TemplateOwnershipError(name, "template would contain itself")

        if current is not None:
            current._parent = None
        template._parent = self
        self._children[name] = template
        log.debug("Attached sub-template %r", name)

    def get_sub_template(self, name: str) -> "Template | None":
        return self._children.get(name)

    def placeholders(self) -> list[str]:
        """Names referenced by this body, in order of appearance."""
        return [s.text for s in tokenize(self._body) if s.is_placeholder]

    def render(self, options: RenderOptions | None = None) -> str:
        """Render this template and every sub-template it references.

        Args:
            options: Render limits. Defaults to RenderOptions().

        Returns:
            The fully substituted text.

        Raises:
            MissingOpenBraceError: A body has a stray close brace.
            MissingCloseBraceError: A body has an unterminated open brace.
            MissingTemplateError: A placeholder names an unknown sub-template.
            DepthExceededError: The tree nests deeper than options.max_depth.
        """
        options = options or RenderOptions()
        max_depth = options.max_depth
        parts: list[str] = []

        # One (template, remaining segments) frame per level of the current path
        log.debug("Rendering template tree")
        stack = [(self, iter(tokenize(self._body)))]

        while stack:
            node, segments = stack[-1]
            segment = next(segments, None)
            if segment is None:
                stack.pop()
                continue

            if not segment.is_placeholder:
                parts.append(segment.text)
                continue

            child = node._children.get(segment.text)
            if child is None:
                raise MissingTemplateError(segment.text)
            if len(stack) > max_depth:
                raise DepthExceededError(max_depth)

            log.debug("Resolving placeholder %r at depth %d", segment.text, len(stack))
            stack.append((child, iter(tokenize(child._body))))

        return "".join(parts)

    @classmethod
    def from_dict(cls, data: Any) -> "Template":
        """Build a template tree from a string or a nested mapping.

        Mappings look like {"body": "...", "children": {"name": ...}}; a bare
        string is a template with no sub-templates.
        """
        from nestmpl.engine.spec import build_template

        return build_template(data)

    def to_dict(self) -> dict[str, Any]:
        from nestmpl.engine.spec import dump_tree

        return dump_tree(self)

    def _lineage(self) -> Iterator["Template"]:
        node: Template | None = self
        while node is not None:
            yield node
            node = node._parent

    def _detach_children(self) -> None:
        for child in self._children.values():
            child._parent = None
        self._children.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def __repr__(self) -> str:
        return f"Template(body={self._body!r}, children={list(self._children)!r})"


def template(body: str, children: Mapping[str, Template] | None = None) -> Template:
    """Create a template and attach `children` in mapping order.

    Either every child is attached or none is: on failure the children
    attached so far are released before the error propagates.

    Examples:
        template("Hello {name}", {"name": Template("world")}).render()
    """
    node = Template(body)
    try:
        for name, child in (children or {}).items():
            node.add_sub_template(name, child)
    except Exception:
        node._detach_children()
        raise
    return node
