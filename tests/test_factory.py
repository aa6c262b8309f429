"""Tests for element creation and definition mappings."""

import pytest

from etiqueta import (
    AbstractInstantiationError,
    BaseBlock,
    BaseInline,
    Div,
    Span,
    configure,
    create,
)


class WithStringMethod(Div):
    def label(self, value: str) -> str:
        return value


class TestCreate:
    def test_creates_bare_element(self) -> None:
        element = create(Div)
        assert isinstance(element, Div)
        assert element.get_attributes() == {}

    @pytest.mark.parametrize("element_type", [BaseBlock, BaseInline])
    def test_refuses_unbound_classes(self, element_type: type) -> None:
        with pytest.raises(AbstractInstantiationError) as exc_info:
            create(element_type)
        assert exc_info.value.element_type is element_type


class TestConfigure:
    def test_setter_keys(self) -> None:
        element = configure(Div.tag(), {"class": "a", "id": "x", "content": "<b>"})
        assert element.render() == '<div class="a" id="x">\n&lt;b&gt;\n</div>'

    def test_list_values_spread_as_arguments(self) -> None:
        element = configure(Div.tag().class_("old"), {"class": ["new", True]})
        assert element.get_attribute("class") == "new"

    def test_trailing_parentheses_ignored(self) -> None:
        assert configure(Span.tag(), {"template()": "{tag}"}).get_template() == "{tag}"

    def test_mapping_value_passed_whole(self) -> None:
        element = configure(Div.tag(), {"data": {"role": "x"}})
        assert element.get_attribute("data-role") == "x"

    def test_unknown_keys_become_attributes(self) -> None:
        element = configure(Div.tag(), {"data-role": "main", "tabindex": 0})
        assert element.render() == '<div data-role="main" tabindex="0">\n</div>'

    @pytest.mark.parametrize("key", ["render", "begin", "get_content", "_with", "tag"])
    def test_reserved_names_become_attributes(self, key: str) -> None:
        element = configure(Div.tag(), {key: "x"})
        assert element.get_attribute(key) == "x"

    @pytest.mark.parametrize(
        "key", ["before_run", "after_run", "load_default", "run", "apply", "end"]
    )
    def test_lifecycle_hooks_never_called(self, key: str) -> None:
        element = configure(Div.tag(), {key: "x"})
        assert element.get_attribute(key) == "x"

    def test_build_element_not_called_on_inline(self) -> None:
        element = configure(Span.tag(), {"build_element": "x"})
        assert element.get_attribute("build_element") == "x"

    def test_setter_must_return_element(self) -> None:
        with pytest.raises(TypeError, match="did not return an element"):
            configure(WithStringMethod.tag(), {"label": "x"})

    def test_receiver_unchanged(self) -> None:
        element = Div.tag()
        configure(element, {"id": "x"})
        assert element.get_attributes() == {}
