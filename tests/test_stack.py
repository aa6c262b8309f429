"""Tests for begin/end pairing and the tag stack."""

import re

import pytest

from etiqueta import (
    Div,
    Img,
    Input,
    Section,
    Span,
    TagClassMismatchError,
    TagDoesNotSupportBeginError,
    TagStack,
    UnexpectedEndCallError,
    get_tag_stack,
    reset_tag_stack,
    set_tag_stack,
    tag_stack_context,
)


class FancyDiv(Div):
    pass


class TestBeginEnd:
    """Element begin()/end() through the context stack."""

    def test_begin_and_end_markup(self) -> None:
        assert Div.tag().begin() == "<div>\n"
        assert Div.end() == "\n</div>"

    def test_begin_with_attributes(self) -> None:
        assert Div.tag().class_("card").id("c1").begin() == '<div class="card" id="c1">\n'
        Div.end()

    def test_concatenation_matches_render(self) -> None:
        element = Div.tag().class_("x")
        assembled = element.begin() + "Hi" + Div.end()
        assert assembled == element.content("Hi").render()

    def test_nested_same_type(self) -> None:
        html = Div.tag().begin()
        html += Div.tag().begin()
        html += "Nested Content"
        html += Div.end()
        html += Div.end()
        assert html == "<div>\n<div>\nNested Content\n</div>\n</div>"

    def test_nested_different_types(self) -> None:
        html = Section.tag().begin() + Div.tag().begin() + "x" + Div.end() + Section.end()
        assert html == "<section>\n<div>\nx\n</div>\n</section>"

    def test_end_without_begin(self) -> None:
        message = re.escape("Unexpected 'Div.end()' call, a matching 'begin()' is not found.")
        with pytest.raises(UnexpectedEndCallError, match=message) as exc_info:
            Div.end()
        assert exc_info.value.element_type is Div

    def test_end_after_stack_is_drained(self) -> None:
        Div.tag().begin()
        Div.end()
        with pytest.raises(UnexpectedEndCallError):
            Div.end()

    def test_mismatched_end_leaves_stack_intact(self) -> None:
        Div.tag().begin()
        message = re.escape("Mismatched 'Div.end()' call, got 'Section'.")
        with pytest.raises(TagClassMismatchError, match=message) as exc_info:
            Section.end()
        assert exc_info.value.open_type is Div
        assert exc_info.value.expected_type is Section
        assert get_tag_stack().open_types == (Div,)
        assert Div.end() == "\n</div>"

    def test_subclass_does_not_match_parent(self) -> None:
        FancyDiv.tag().begin()
        with pytest.raises(TagClassMismatchError):
            Div.end()
        assert FancyDiv.end() == "\n</div>"

    @pytest.mark.parametrize("element_type", [Span, Img, Input])
    def test_begin_not_supported(self, element_type: type) -> None:
        name = element_type.__qualname__
        message = re.escape(f"Tag '{name}' does not support 'begin()' method.")
        with pytest.raises(TagDoesNotSupportBeginError, match=message):
            element_type.tag().begin()
        assert len(get_tag_stack()) == 0

    def test_begin_does_not_change_receiver(self) -> None:
        element = Div.tag().id("a")
        element.begin()
        assert element.is_begun() is False
        assert element.render() == '<div id="a">\n</div>'
        Div.end()


class TestTagStack:
    """TagStack object behaviour."""

    def test_explicit_stack(self) -> None:
        stack = TagStack()
        assert Div.tag().begin(stack=stack) == "<div>\n"
        assert len(stack) == 1
        assert len(get_tag_stack()) == 0
        assert Div.end(stack=stack) == "\n</div>"
        assert not stack

    def test_inspection(self) -> None:
        stack = TagStack()
        Section.tag().begin(stack=stack)
        Div.tag().begin(stack=stack)
        assert stack.depth == 2
        assert stack.open_types == (Section, Div)
        assert stack.is_open(Section)
        assert not stack.is_open(Span)
        assert repr(stack) == "TagStack([Section, Div])"

    def test_clear(self) -> None:
        stack = TagStack()
        Div.tag().begin(stack=stack)
        stack.clear()
        with pytest.raises(UnexpectedEndCallError):
            Div.end(stack=stack)

    def test_direct_begin_end(self) -> None:
        stack = TagStack()
        assert stack.begin(Div.tag()) == "<div>\n"
        assert stack.end(Div) == "\n</div>"


class TestContextHelpers:
    """Context binding of the current stack."""

    def test_context_restores_previous_entries(self) -> None:
        Div.tag().begin()
        with tag_stack_context() as inner:
            assert len(inner) == 0
            Section.tag().begin()
            assert Section.end() == "\n</section>"
        assert get_tag_stack().open_types == (Div,)
        Div.end()

    def test_context_with_explicit_stack(self) -> None:
        stack = TagStack()
        with tag_stack_context(stack) as installed:
            assert installed is stack
            assert get_tag_stack() is stack
            Div.tag().begin()
        assert stack.open_types == (Div,)
        assert get_tag_stack() is not stack

    def test_context_restores_on_error(self) -> None:
        stack = TagStack()
        with pytest.raises(UnexpectedEndCallError), tag_stack_context(stack):
            Div.end()
        assert get_tag_stack() is not stack

    def test_set_and_reset(self) -> None:
        stack = TagStack()
        set_tag_stack(stack)
        assert get_tag_stack() is stack
        reset_tag_stack()
        assert get_tag_stack() is not stack
        assert len(get_tag_stack()) == 0
