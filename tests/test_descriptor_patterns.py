from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from indexing.implicit_elements import on_property_visited
from indexing.keys import IndexKey
from parse.source_file import FileType, SourceFile, source_file_from_bytes
from parse.treesitter_js import iter_nodes, object_properties
from patterns.descriptors import descriptor_object, match_descriptor

if TYPE_CHECKING:
    from tree_sitter import Node


def _script(source: str, path: str = "main.js") -> SourceFile:
    return source_file_from_bytes(path, source.encode("utf-8"), FileType.SCRIPT)


def _component(script: str, path: str = "components/TodoItem.vue") -> SourceFile:
    source = f"<template>\n  <div></div>\n</template>\n<script>\n{script}\n</script>\n"
    return source_file_from_bytes(path, source.encode("utf-8"), FileType.SFC)


def _outer_properties(source_file: SourceFile) -> list[Node]:
    first_object = next(iter_nodes(source_file.root_node, "object"))
    return object_properties(first_object)


def _all_properties(source_file: SourceFile) -> list[Node]:
    return [
        prop
        for obj in iter_nodes(source_file.root_node, "object")
        for prop in object_properties(obj)
    ]


def test_component_registration_first_property() -> None:
    source_file = _script('Vue.component("foo", {a: 1, b: 2});')
    first, second = _outer_properties(source_file)

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == "foo"
    assert element.index_key is IndexKey.COMPONENTS
    assert element.declaring_node == first
    assert on_property_visited(second, source_file) is None


def test_component_registration_single_quotes() -> None:
    source_file = _script("Vue.component('todo-item', { props: ['todo'] })")
    (first,) = _outer_properties(source_file)

    match = match_descriptor(first, source_file)

    assert match is not None
    assert match.name == "todo-item"


@pytest.mark.parametrize(
    "source",
    [
        'Vue.component(name, {a: 1});',
        'Vue.component("foo");',
        'Vue.component({a: 1}, "foo");',
        'Vue.components("foo", {a: 1});',
        'My.Vue.component("foo", {a: 1});',
        'vue.component("foo", {a: 1});',
        'Vue.component(`foo`, {a: 1});',
    ],
)
def test_component_registration_rejects_other_shapes(source: str) -> None:
    source_file = _script(source)

    for prop in _all_properties(source_file):
        match = match_descriptor(prop, source_file)
        assert match is None or match.index_key is not IndexKey.COMPONENTS


def test_component_export_uses_name_property() -> None:
    source_file = _component('export default {\n  name: "bar",\n  data() {}\n}')
    first, second = _outer_properties(source_file)

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == "bar"
    assert element.index_key is IndexKey.COMPONENTS
    assert on_property_visited(second, source_file) is None


def test_component_export_name_found_after_first_property() -> None:
    source_file = _component('export default { data() {}, name: "bar" }')
    first, _ = _outer_properties(source_file)

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == "bar"


def test_component_export_falls_back_to_file_name() -> None:
    source_file = _component("export default { data() { return {} } }")
    first = _outer_properties(source_file)[0]

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == "TodoItem"


def test_component_export_non_string_name_falls_back_to_file_name() -> None:
    source_file = _component("export default { name: NAME, props: [] }")
    first = _outer_properties(source_file)[0]

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == "TodoItem"


def test_default_export_in_plain_script_is_not_a_component() -> None:
    source_file = _script('export default { name: "bar" }')
    first = _outer_properties(source_file)[0]

    assert on_property_visited(first, source_file) is None


def test_linked_instance_uses_el_binding() -> None:
    source_file = _script('new Vue({el: "#app", data(){}})')
    first, second = _outer_properties(source_file)

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == "#app"
    assert element.index_key is IndexKey.OPTIONS
    assert on_property_visited(second, source_file) is None


def test_linked_instance_without_el_has_empty_name() -> None:
    source_file = _script("new Vue({data(){}})")
    (first,) = _outer_properties(source_file)

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == ""
    assert element.index_key is IndexKey.OPTIONS


def test_linked_instance_from_extend_call() -> None:
    source_file = _script('const Base = Vue.extend({ el: "#base", props: {} })')
    first = _outer_properties(source_file)[0]

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == "#base"
    assert element.index_key is IndexKey.OPTIONS


def test_linked_instance_non_string_el_has_empty_name() -> None:
    source_file = _script("new Vue({ el: document.body })")
    (first,) = _outer_properties(source_file)

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == ""


@pytest.mark.parametrize(
    "source",
    [
        "new Vue(options, {el: '#app'})",
        "new Other({el: '#app'})",
        "Vue({el: '#app'})",
        "new window.Vue({el: '#app'})",
        "Vue.mixin({el: '#app'})",
    ],
)
def test_linked_instance_rejects_other_shapes(source: str) -> None:
    source_file = _script(source)

    for prop in _all_properties(source_file):
        assert match_descriptor(prop, source_file) is None


def test_nested_option_objects_are_never_descriptors() -> None:
    source_file = _script(
        'new Vue({ components: { inner: { el: "#x" } }, computed: { a() {} } })'
    )
    nested = [
        prop
        for prop in _all_properties(source_file)
        if descriptor_object(prop) is None
    ]

    assert nested
    for prop in nested:
        assert on_property_visited(prop, source_file) is None


def test_only_first_property_ever_produces_an_element() -> None:
    source_file = _script(
        """
Vue.component("a", { x: 1, y: 2, z: 3 });
new Vue({ el: "#app", router, ...mixins });
const Base = Vue.extend({ props: ["p"], data() {} });
"""
    )

    elements = []
    for obj in iter_nodes(source_file.root_node, "object"):
        props = object_properties(obj)
        for prop in props[1:]:
            assert on_property_visited(prop, source_file) is None
        if props:
            element = on_property_visited(props[0], source_file)
            if element is not None:
                elements.append(element)

    assert [(e.name, e.index_key) for e in elements] == [
        ("a", IndexKey.COMPONENTS),
        ("#app", IndexKey.OPTIONS),
        ("", IndexKey.OPTIONS),
    ]


def test_empty_object_produces_nothing() -> None:
    source_file = _script("new Vue({})")

    assert _all_properties(source_file) == []


@pytest.mark.parametrize(
    ("literal", "expected"),
    [
        (r'"#app"', "#app"),
        (r'"\u0023app"', "#app"),
        (r'"\x23app"', "#app"),
        (r'"\u{23}app"', "#app"),
        (r'"\043app"', "#app"),
        ('"#a\\\npp"', "#app"),
        (r"'#\'app\''", "#'app'"),
    ],
)
def test_linked_instance_el_escapes_are_decoded(literal: str, expected: str) -> None:
    source_file = _script(f"new Vue({{el: {literal}}})")
    (first,) = _outer_properties(source_file)

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == expected


@pytest.mark.parametrize(
    ("literal", "expected"),
    [
        (r'"my\x2Dbutton"', "my-button"),
        (r'"my\u002Dbutton"', "my-button"),
        (r'"caf\u00e9-card"', "caf\u00e9-card"),
        (r'"emoji-\uD83D\uDE00"', "emoji-\U0001F600"),
    ],
)
def test_component_export_name_escapes_are_decoded(
    literal: str, expected: str
) -> None:
    source_file = _component(f"export default {{ name: {literal} }}")
    (first,) = _outer_properties(source_file)

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == expected
    assert element.index_key is IndexKey.COMPONENTS


def test_spread_elements_are_not_properties() -> None:
    source_file = _script('new Vue({ ...base, el: "#app", data() {} })')
    props = _outer_properties(source_file)

    assert [prop.type for prop in props] == ["pair", "method_definition"]

    element = on_property_visited(props[0], source_file)

    assert element is not None
    assert element.name == "#app"
    assert element.index_key is IndexKey.OPTIONS


def test_component_export_in_dot_vue_file_has_empty_name() -> None:
    source_file = _component("export default { props: [] }", path="components/.vue")
    (first,) = _outer_properties(source_file)

    element = on_property_visited(first, source_file)

    assert element is not None
    assert element.name == ""
