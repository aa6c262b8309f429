"""Tests for fluent element objects."""

import dataclasses
from collections.abc import Mapping

import pytest

from etiqueta import (
    AbstractInstantiationError,
    BaseBlock,
    BaseInline,
    BaseTag,
    BlockTag,
    Body,
    Div,
    Html,
    Img,
    InlineTag,
    Input,
    InvalidAttributeValueError,
    InvalidTagError,
    Li,
    P,
    Span,
    Table,
    Td,
    Tr,
    Ul,
)
from etiqueta.values import Aria, ContentEditable, Event, Role


class Badge(Span):
    def get_token_values(self) -> Mapping[str, str]:
        return {"{icon}": "<i></i>"}


class Hidden(Div):
    def before_run(self) -> bool:
        return False


class Shouting(Div):
    def after_run(self, result: str) -> str:
        return super().after_run(result).upper()


class WithDefaults(BaseBlock):
    tag_name = BlockTag.DIV

    def load_default(self) -> Mapping[str, object]:
        return {"class": "default-class", "title": "default"}


class TestLifecycle:
    def test_empty_block(self) -> None:
        assert Div.tag().render() == "<div>\n</div>"

    def test_str_renders(self) -> None:
        assert str(P.tag().content("x")) == "<p>\nx\n</p>"

    def test_before_run_false_renders_nothing(self) -> None:
        assert Hidden.tag().content("x").render() == ""

    def test_after_run_post_processes(self) -> None:
        assert Shouting.tag().content("x").render() == "<DIV>\nX\n</DIV>"

    def test_load_default(self) -> None:
        assert WithDefaults.tag().render() == '<div class="default-class" title="default">\n</div>'

    def test_definitions_override_defaults(self) -> None:
        element = WithDefaults.tag({"title": "mine", "class": "extra"})
        assert element.render() == '<div class="default-class extra" title="mine">\n</div>'

    def test_abstract_bases_refused(self) -> None:
        message = "Cannot instantiate abstract class 'BaseBlock' via 'tag\\(\\)' method."
        with pytest.raises(AbstractInstantiationError, match=message):
            BaseBlock.tag()
        with pytest.raises(AbstractInstantiationError):
            BaseTag.tag()

    def test_kind_checked_at_class_creation(self) -> None:
        with pytest.raises(InvalidTagError, match="accepts only block tags"):

            class Wrong(BaseBlock):
                tag_name = InlineTag.SPAN

        with pytest.raises(InvalidTagError, match="accepts only inline tags"):

            class AlsoWrong(BaseInline):
                tag_name = "div"


class TestImmutability:
    def test_setters_return_new_instances(self) -> None:
        original = Div.tag()
        changed = original.id("x").content("y")
        assert changed is not original
        assert original.render() == "<div>\n</div>"
        assert changed.render() == '<div id="x">\ny\n</div>'

    def test_frozen(self) -> None:
        element = Div.tag()
        with pytest.raises(dataclasses.FrozenInstanceError):
            element._content = "x"  # type: ignore[misc]

    def test_get_attributes_returns_copy(self) -> None:
        element = Div.tag().id("a")
        element.get_attributes()["id"] = "b"
        assert element.get_attribute("id") == "a"


class TestContent:
    def test_content_is_escaped(self) -> None:
        assert Div.tag().content("<b>x</b>").render() == "<div>\n&lt;b&gt;x&lt;/b&gt;\n</div>"

    def test_html_is_raw(self) -> None:
        assert Div.tag().html("<b>x</b>").render() == "<div>\n<b>x</b>\n</div>"

    def test_accumulates_in_call_order(self) -> None:
        element = Div.tag().content("a", "<").html("<i>b</i>").content("c")
        assert element.get_content() == "a&lt;<i>b</i>c"

    def test_blank_lines_collapsed(self) -> None:
        assert Div.tag().html("a\n\n\nb").render() == "<div>\na\nb\n</div>"

    def test_nested_elements(self) -> None:
        inner = P.tag().content("x")
        assert Div.tag().html(inner).render() == "<div>\n<p>\nx\n</p>\n</div>"


class TestAttributes:
    def test_add_and_remove(self) -> None:
        element = Div.tag().add_attribute("data-x", "1")
        assert element.render() == '<div data-x="1">\n</div>'
        assert element.remove_attribute("data-x").render() == "<div>\n</div>"

    def test_none_unsets(self) -> None:
        assert Div.tag().title("t").title(None).render() == "<div>\n</div>"
        assert Div.tag().id("a").attributes({"id": None}).render() == "<div>\n</div>"

    def test_attributes_merge(self) -> None:
        element = Div.tag().attributes({"id": "a", "title": "t"}).attributes({"title": "u"})
        assert element.render() == '<div id="a" title="u">\n</div>'

    def test_invalid_value_rejected_at_set_time(self) -> None:
        with pytest.raises(InvalidAttributeValueError):
            Div.tag().add_attribute("x", object())

    def test_class_appends_and_overrides(self) -> None:
        assert Div.tag().class_("a").class_("b a").render() == '<div class="a b">\n</div>'
        assert Div.tag().class_("a").class_("b", True).render() == '<div class="b">\n</div>'
        assert Div.tag().class_("a").class_(None).render() == "<div>\n</div>"

    def test_global_attributes(self) -> None:
        element = Div.tag().id("main").lang("en").dir("rtl").hidden().title("T")
        assert element.render() == '<div id="main" lang="en" dir="rtl" hidden title="T">\n</div>'

    def test_style(self) -> None:
        assert Div.tag().style("color: red;").render() == '<div style="color: red;">\n</div>'
        assert Div.tag().style({"color": "red"}).render() == "<div style='color: red;'>\n</div>"

    def test_enumerated_setters(self) -> None:
        element = (
            Div.tag()
            .translate(False)
            .draggable(True)
            .content_editable(ContentEditable.PLAINTEXT_ONLY)
            .spellcheck(False)
            .role(Role.BUTTON)
        )
        assert element.get_attributes() == {
            "translate": "no",
            "draggable": "true",
            "contenteditable": "plaintext-only",
            "spellcheck": "false",
            "role": "button",
        }

    @pytest.mark.parametrize(
        ("setter", "value"),
        [("dir", "sideways"), ("role", "nope"), ("lang", "english!"), ("translate", "maybe")],
    )
    def test_enumerated_setters_validate(self, setter: str, value: str) -> None:
        with pytest.raises(InvalidAttributeValueError) as exc_info:
            getattr(Div.tag(), setter)(value)
        assert exc_info.value.value == value

    def test_tab_index(self) -> None:
        assert Div.tag().tab_index(0).render() == '<div tabindex="0">\n</div>'
        assert Div.tag().tab_index(-1).get_attribute("tabindex") == -1
        with pytest.raises(InvalidAttributeValueError, match="greater than or equal to -1"):
            Div.tag().tab_index(-2)

    def test_data_aria_events(self) -> None:
        element = (
            Div.tag()
            .add_data_attribute("toggle", "modal")
            .add_aria_attribute(Aria.LABEL, "Close")
            .add_event(Event.CLICK, "go()")
        )
        assert element.render() == (
            '<div data-toggle="modal" aria-label="Close" onclick="go()">\n</div>'
        )
        stripped = (
            element.remove_data_attribute("data-toggle")
            .remove_aria_attribute("label")
            .remove_event("click")
        )
        assert stripped.render() == "<div>\n</div>"

    def test_bulk_data_aria_events(self) -> None:
        element = (
            Div.tag()
            .data({"id": 1})
            .aria({"hidden": False})
            .events({"mouseover": "hover()"})
        )
        assert element.render() == (
            '<div data-id="1" aria-hidden="false" onmouseover="hover()">\n</div>'
        )

    def test_microdata(self) -> None:
        element = Div.tag().item_scope().item_type("https://schema.org/Person")
        assert element.render() == (
            '<div itemscope itemtype="https://schema.org/Person">\n</div>'
        )

    def test_boolean_setters_turn_off(self) -> None:
        assert Div.tag().hidden().hidden(False).render() == "<div>\n</div>"
        assert Div.tag().autofocus().autofocus(False).render() == "<div>\n</div>"


class TestBlockFamilies:
    def test_lists(self) -> None:
        items = Li.tag().content("one").render() + "\n" + Li.tag().content("two").render()
        assert Ul.tag().html(items).render() == (
            "<ul>\n<li>\none\n</li>\n<li>\ntwo\n</li>\n</ul>"
        )

    def test_table(self) -> None:
        row = Tr.tag().html(Td.tag().content("1"))
        assert Table.tag().html(row).render() == (
            "<table>\n<tr>\n<td>\n1\n</td>\n</tr>\n</table>"
        )

    def test_root(self) -> None:
        assert Html.tag().lang("en").html(Body.tag()).render() == (
            '<html lang="en">\n<body>\n</body>\n</html>'
        )


class TestInline:
    def test_renders_on_one_line(self) -> None:
        assert Span.tag().content("x").render() == "<span>x</span>"

    def test_bare_prefix_and_suffix(self) -> None:
        element = Span.tag().content("x").prefix("Hi").suffix("!")
        assert element.render() == "Hi\n<span>x</span>\n!"

    def test_wrapped_prefix(self) -> None:
        element = (
            Span.tag()
            .content("x")
            .prefix("Hi")
            .prefix_tag(InlineTag.STRONG)
            .prefix_class("p")
        )
        assert element.render() == '<strong class="p">Hi</strong>\n<span>x</span>'

    def test_wrapped_suffix(self) -> None:
        element = (
            Span.tag()
            .content("x")
            .suffix("s")
            .suffix_tag(InlineTag.SMALL)
            .suffix_attributes({"id": "n"})
        )
        assert element.render() == '<span>x</span>\n<small id="n">s</small>'

    def test_prefix_tag_rendered_without_prefix(self) -> None:
        element = Span.tag().content("x").prefix_tag(InlineTag.EM)
        assert element.render() == "<em></em>\n<span>x</span>"

    def test_template(self) -> None:
        element = Span.tag().content("x").suffix("!").template("{tag}{suffix}")
        assert element.render() == "<span>x</span>!"

    def test_custom_tokens(self) -> None:
        element = Badge.tag().content("x").template("{icon}\\n{tag}")
        assert element.render() == "<i></i>\n<span>x</span>"

    def test_getters(self) -> None:
        element = (
            Span.tag()
            .prefix("a", "b")
            .prefix_tag(InlineTag.B)
            .suffix("c")
            .suffix_class("s")
            .template("{tag}")
        )
        assert element.get_prefix() == "ab"
        assert element.get_prefix_tag() is InlineTag.B
        assert element.get_suffix() == "c"
        assert element.get_suffix_attributes() == {"class": "s"}
        assert element.get_template() == "{tag}"


class TestVoid:
    def test_void(self) -> None:
        element = Img.tag().add_attribute("src", "a.png").add_attribute("alt", "A")
        assert element.render() == '<img src="a.png" alt="A">'

    def test_void_has_no_content_setter(self) -> None:
        assert not hasattr(Img.tag(), "content")


class TestInput:
    def test_generated_id(self) -> None:
        first = Input.tag().get_attribute("id")
        second = Input.tag().get_attribute("id")
        assert first.startswith("input-")
        assert first != second

    def test_form_control_attributes(self) -> None:
        element = Input.tag().id("email").name("email").type("email").required()
        assert element.render() == '<input id="email" name="email" type="email" required>'

    def test_aria_describedby_true(self) -> None:
        element = Input.tag().id("email").add_aria_attribute("describedby", True)
        assert element.render() == '<input id="email" aria-describedby="email-help">'

    def test_aria_describedby_without_id(self) -> None:
        element = Input.tag().id(None).add_aria_attribute("describedby", "true")
        assert element.render() == "<input>"

    def test_label_prefix(self) -> None:
        element = (
            Input.tag()
            .id("e")
            .prefix("Email")
            .prefix_tag(InlineTag.LABEL)
            .prefix_attributes({"for": "e"})
        )
        assert element.render() == '<label for="e">Email</label>\n<input id="e">'

    def test_block_suffix(self) -> None:
        element = (
            Input.tag()
            .id("e")
            .suffix("Help")
            .suffix_tag(BlockTag.DIV)
            .suffix_attributes({"id": "e-help"})
        )
        assert element.render() == '<input id="e">\n<div id="e-help">\nHelp\n</div>'
