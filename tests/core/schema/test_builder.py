#!/usr/bin/env python3
from types import SimpleNamespace

from proseschema.core.extension.attribute import Attribute
from proseschema.core.extension.extension import MarkExtension, NodeExtension
from proseschema.core.extension.registry import get_attributes_from_extensions
from proseschema.core.schema.builder import build_mark_spec, build_node_spec, clean_up_schema_item


class FakeElement:
    def __init__(self, **attrs):
        self._attrs = attrs

    def get(self, name, default=None):
        return self._attrs.get(name, default)


def _node_spec(ext: NodeExtension, *others):
    return build_node_spec(ext, get_attributes_from_extensions([ext, *others]))


# --- clean_up_schema_item --- #

def test_cleanup_drops_none_and_empty_attrs():
    spec = {"content": "inline*", "group": None, "attrs": {}, "selectable": False, "marks": ""}
    assert clean_up_schema_item(spec) == {"content": "inline*", "selectable": False, "marks": ""}


def test_cleanup_keeps_non_empty_attrs_and_is_idempotent():
    spec = {"attrs": {"level": {"default": 1}}, "code": None}
    once = clean_up_schema_item(spec)
    assert once == {"attrs": {"level": {"default": 1}}}
    assert clean_up_schema_item(once) == once
    assert spec == {"attrs": {"level": {"default": 1}}, "code": None}  # input untouched


def test_cleanup_only_treats_attrs_specially():
    assert clean_up_schema_item({"excludes": {}}) == {"excludes": {}}


# --- Node specs --- #

def test_node_without_attributes_has_no_attrs():
    spec = _node_spec(NodeExtension(name="paragraph", content="inline*", group="block"))
    assert spec == {"content": "inline*", "group": "block"}


def test_node_attrs_one_entry_per_attribute_with_default():
    ext = NodeExtension(name="heading", attributes={"level": Attribute(default=1), "id": Attribute()})
    spec = _node_spec(ext)
    assert spec["attrs"] == {"level": {"default": 1}, "id": {"default": None}}


def test_node_only_receives_its_own_attributes():
    heading = NodeExtension(name="heading", attributes={"level": Attribute(default=1)})
    paragraph = NodeExtension(name="paragraph", attributes={"align": Attribute(default="left")})
    spec = build_node_spec(heading, get_attributes_from_extensions([heading, paragraph]))
    assert spec["attrs"] == {"level": {"default": 1}}


def test_parse_rules_are_injected():
    ext = NodeExtension(
        name="heading",
        options={"levels": [1, 2]},
        attributes={"id": Attribute()},
        parse_html=lambda options: [{"tag": f"h{lvl}", "getAttrs": (lambda el, lvl=lvl: {"level": lvl})}
                                    for lvl in options["levels"]],
    )
    spec = _node_spec(ext)
    rules = spec["parseDOM"]
    assert [r["tag"] for r in rules] == ["h1", "h2"]
    assert rules[1]["getAttrs"](FakeElement(id="intro")) == {"level": 2, "id": "intro"}


def test_empty_parse_rules_omit_field():
    assert "parseDOM" not in _node_spec(NodeExtension(name="p", parse_html=lambda options: []))
    assert "parseDOM" not in _node_spec(NodeExtension(name="p", parse_html=lambda options: None))
    assert "parseDOM" not in _node_spec(NodeExtension(name="p"))


def test_parse_html_invoked_on_every_build():
    calls = []
    ext = NodeExtension(name="p", parse_html=lambda options: calls.append(1) or [{"tag": "p"}])
    _node_spec(ext)
    _node_spec(ext)
    assert len(calls) == 2


def test_node_render_hook_receives_rendered_attributes():
    def render_html(options, *, element, attributes):
        return [options["tag"], attributes, 0]

    ext = NodeExtension(
        name="paragraph",
        options={"tag": "p"},
        attributes={"align": Attribute(render_html=lambda attrs: {"style": f"text-align: {attrs['align']}"}),
                    "hidden": Attribute(rendered=False)},
        render_html=render_html,
    )
    spec = _node_spec(ext)
    node = SimpleNamespace(attrs={"align": "right", "hidden": True})
    assert spec["toDOM"](node) == ["p", {"style": "text-align: right"}, 0]


def test_no_render_hook_without_render_html():
    assert "toDOM" not in _node_spec(NodeExtension(name="text"))


# --- Mark specs --- #

def test_mark_spec_fields_and_render_hook():
    ext = MarkExtension(
        name="link",
        inclusive=False,
        attributes={"href": Attribute(), "target": Attribute(default="_blank")},
        parse_html=lambda options: [{"tag": "a[href]"}],
        render_html=lambda options, *, element, attributes: ["a", attributes, 0],
    )
    spec = build_mark_spec(ext, get_attributes_from_extensions([ext]))
    assert spec["inclusive"] is False
    assert spec["attrs"] == {"href": {"default": None}, "target": {"default": "_blank"}}
    assert spec["parseDOM"][0]["getAttrs"](FakeElement(href="/x")) == {"href": "/x", "target": None}

    mark = SimpleNamespace(attrs={"href": "/x", "target": "_self"})
    assert spec["toDOM"](mark, True) == ["a", {"href": "/x", "target": "_self"}, 0]
    assert spec["toDOM"](mark) == ["a", {"href": "/x", "target": "_self"}, 0]


def test_mark_without_fields_is_empty_spec():
    ext = MarkExtension(name="bold")
    assert build_mark_spec(ext, get_attributes_from_extensions([ext])) == {}
