"""Error hierarchy and message formatting."""

import pytest

from etiqueta import (
    AbstractInstantiationError,
    Div,
    EtiquetaError,
    InvalidAttributeKeyError,
    InvalidAttributeValueError,
    InvalidTagError,
    Message,
    Section,
    TagClassMismatchError,
    TagDoesNotSupportBeginError,
    UnexpectedEndCallError,
)

# =========================================================================
# Hierarchy
# =========================================================================


class TestHierarchy:
    """Every error is an EtiquetaError and the natural builtin."""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (InvalidTagError("x"), ValueError),
            (UnexpectedEndCallError(Div), LookupError),
            (TagClassMismatchError(Div, Section), RuntimeError),
            (TagDoesNotSupportBeginError(Div), TypeError),
            (InvalidAttributeValueError("x"), ValueError),
            (InvalidAttributeKeyError(""), ValueError),
            (AbstractInstantiationError(Div), TypeError),
        ],
    )
    def test_bases(self, error: Exception, builtin: type) -> None:
        assert isinstance(error, EtiquetaError)
        assert isinstance(error, builtin)


# =========================================================================
# Messages
# =========================================================================


class TestMessages:
    def test_format(self) -> None:
        assert Message.TAG_DOES_NOT_SUPPORT_BEGIN.format("Span") == (
            "Tag 'Span' does not support 'begin()' method."
        )

    def test_unexpected_end(self) -> None:
        assert str(UnexpectedEndCallError(Div)) == (
            "Unexpected 'Div.end()' call, a matching 'begin()' is not found."
        )

    def test_mismatch_names_both_classes(self) -> None:
        err = TagClassMismatchError(Div, Section)
        assert str(err) == "Mismatched 'Div.end()' call, got 'Section'."
        assert err.open_type is Div
        assert err.expected_type is Section

    def test_abstract(self) -> None:
        assert str(AbstractInstantiationError(Div)) == (
            "Cannot instantiate abstract class 'Div' via 'tag()' method."
        )

    def test_attribute_value_error_fields(self) -> None:
        err = InvalidAttributeValueError("bad", key="dir", value="up")
        assert str(err) == "bad"
        assert err.key == "dir"
        assert err.value == "up"

    def test_key_error_message(self) -> None:
        assert "non-empty string" in str(InvalidAttributeKeyError(3))

    def test_catch_all(self) -> None:
        with pytest.raises(EtiquetaError):
            Div.end()
