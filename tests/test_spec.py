"""Tests for building template trees from plain data."""

import pytest

from nestmpl import (
    RenderOptions,
    Template,
    TemplateOwnershipError,
    TemplateSpec,
    TemplateSpecError,
    template,
)
from nestmpl.engine.spec import build_template, dump_tree, load_spec

PAGE = {
    "body": "<body>{header}{content}</body>",
    "children": {
        "header": "<h1>Title</h1>",
        "content": {
            "body": "<p>{ text }</p>",
            "children": {"text": "hello"},
        },
    },
}


def test_from_dict_renders():
    page = Template.from_dict(PAGE)
    assert page.render() == "<body><h1>Title</h1><p>hello</p></body>"


def test_from_string_shorthand():
    assert Template.from_dict("just text").render() == "just text"


def test_load_spec_types():
    spec = load_spec(PAGE)
    assert isinstance(spec, TemplateSpec)
    assert spec.children["header"] == "<h1>Title</h1>"
    assert spec.children["content"]["children"] == {"text": "hello"}
    assert load_spec(spec) is spec


def test_to_dict_rebuilds_same_output():
    page = Template.from_dict(PAGE)
    data = page.to_dict()
    assert data["body"] == PAGE["body"]
    assert data["children"]["content"]["children"]["text"]["body"] == "hello"
    assert Template.from_dict(data).render() == page.render()


def test_dump_tree_keeps_structure():
    data = dump_tree(Template.from_dict(PAGE))
    assert set(data["children"]) == {"header", "content"}
    assert data["children"]["header"] == {"body": "<h1>Title</h1>"}


def test_build_template_creates_owned_nodes():
    page = build_template(PAGE)
    header = page.get_sub_template("header")
    with pytest.raises(TemplateOwnershipError):
        Template("{h}").add_sub_template("h", header)


@pytest.mark.parametrize(
    "data",
    [
        42,
        {"children": {}},
        {"body": 1},
        {"body": "x", "children": {"a": 3}},
        {"body": "x", "extra": True},
    ],
)
def test_invalid_data(data):
    with pytest.raises(TemplateSpecError) as exc_info:
        Template.from_dict(data)
    assert exc_info.value.__cause__ is not None


def _deep_chain(depth: int) -> Template:
    node = Template("end")
    for _ in range(depth):
        node = template("({next})", {"next": node})
    return node


def test_very_deep_tree_converts_both_ways():
    depth = 1500
    data = _deep_chain(depth).to_dict()

    leaf = data
    for _ in range(depth):
        leaf = leaf["children"]["next"]
    assert leaf == {"body": "end"}

    rebuilt = Template.from_dict(data)
    expected = "(" * depth + "end" + ")" * depth
    assert rebuilt.render(RenderOptions(max_depth=depth)) == expected
