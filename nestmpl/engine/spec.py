"""Plain-data description of a template tree.

    {
      "body": "<body>{header}{content}</body>",
      "children": {
        "header": "<h1>Title</h1>",
        "content": {"body": "<p>{text}</p>", "children": {"text": "hi"}}
      }
    }

A bare string stands for a template with no sub-templates.

Data is validated one node at a time and trees are walked with an explicit
stack, so nesting depth is bounded by memory rather than the call stack.
"""

from __future__ import annotations

from typing import Any

import msgspec

from nestmpl.engine.template import Template
from nestmpl.exceptions import TemplateSpecError


class TemplateSpec(msgspec.Struct, omit_defaults=True, forbid_unknown_fields=True):
    """One node of template data; children stay raw until they are loaded."""

    body: str
    children: dict[str, str | dict[str, Any]] = msgspec.field(default_factory=dict)


def load_spec(data: Any) -> TemplateSpec:
    """Validate one node of builtin data and return a `TemplateSpec`."""

    if isinstance(data, TemplateSpec):
        return data
    if isinstance(data, str):
        return TemplateSpec(body=data)

    try:
        return msgspec.convert(data, type=TemplateSpec)
    except msgspec.ValidationError as exc:
        raise TemplateSpecError(f"Invalid template data: {exc}") from exc


def build_template(data: Any) -> Template:
    """Build an owned template tree from a string, a mapping or a `TemplateSpec`.

    Raises:
        TemplateSpecError: Some node does not have the expected shape.
    """
    spec = load_spec(data)
    root = Template(spec.body)
    stack = [(root, spec)]

    while stack:
        node, spec = stack.pop()
        for name, child_data in spec.children.items():
            child_spec = load_spec(child_data)
            child = Template(child_spec.body)
            node.add_sub_template(name, child)
            stack.append((child, child_spec))

    return root


def dump_tree(template: Template) -> dict[str, Any]:
    """Turn a template tree into nested builtin dicts accepted by `build_template`.

    `children` is left out for templates without sub-templates.
    """
    root: dict[str, Any] = {"body": template.body}
    stack = [(template, root)]

    while stack:
        node, out = stack.pop()
        if not node.children:
            continue
        children = out["children"] = {}
        for name, child in node.children.items():
            children[name] = {"body": child.body}
            stack.append((child, children[name]))

    return root
