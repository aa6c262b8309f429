"""Exception classes for etiqueta.

Every error derives from :class:`EtiquetaError` and from the builtin a caller
would naturally catch (``ValueError`` for bad input, ``TypeError`` for misuse
of a class, and so on). Message templates live in :class:`Message` so the
wording stays consistent wherever an error is raised.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Message(Enum):
    """Error message templates.

    Use :meth:`format` to fill the positional placeholders.
    """

    CANNOT_INSTANTIATE_ABSTRACT_CLASS = "Cannot instantiate abstract class '{}' via 'tag()' method."
    TAG_CLASS_MISMATCH_ON_END = "Mismatched '{}.end()' call, got '{}'."
    TAG_DOES_NOT_SUPPORT_BEGIN = "Tag '{}' does not support 'begin()' method."
    UNEXPECTED_END_CALL_NO_BEGIN = "Unexpected '{}.end()' call, a matching 'begin()' is not found."
    EMPTY_TAG_NAME = "Tag name cannot be empty."
    INVALID_TAG_NAME = "Invalid tag name '{}'."
    INLINE_BEGIN_END = "Inline elements cannot be used with begin/end syntax."
    TAG_KIND_NOT_ACCEPTED = "Tag '{}' is a {} tag; '{}' accepts only {} tags."
    KEY_MUST_BE_NON_EMPTY_STRING = "Attribute key must be a non-empty string, got {!r}."
    INVALID_ATTRIBUTE_KEY = "Invalid attribute key {!r}."
    VALUE_KIND_NOT_PERMITTED = "Attribute '{}' has a value of unsupported type '{}'."
    VALUE_NOT_IN_LIST = "Invalid value {!r} for attribute '{}'. Allowed values: {}."
    TAB_INDEX_OUT_OF_RANGE = "Tab index must be an integer greater than or equal to -1, got {!r}."

    def format(self, *args: Any) -> str:
        """Return the message with placeholders filled in order."""
        return self.value.format(*args)


def type_name(element_type: type) -> str:
    """Return the qualified class name used in error messages."""
    return element_type.__qualname__


class EtiquetaError(Exception):
    """Base exception for all etiqueta errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidTagError(EtiquetaError, ValueError):
    """A tag name is empty, malformed, or used where its kind is not allowed."""

    def __init__(self, message: str, tag_name: str | None = None) -> None:
        self.message = message
        self.tag_name = tag_name
        super().__init__(message)


class UnexpectedEndCallError(EtiquetaError, LookupError):
    """``end()`` was called while no ``begin()`` session is open."""

    def __init__(self, element_type: type) -> None:
        self.element_type = element_type
        super().__init__(Message.UNEXPECTED_END_CALL_NO_BEGIN.format(type_name(element_type)))


class TagClassMismatchError(EtiquetaError, RuntimeError):
    """``end()`` was called for a class other than the innermost open one.

    Attributes:
        open_type: Class of the innermost open ``begin()`` session
        expected_type: Class ``end()`` was called on
    """

    def __init__(self, open_type: type, expected_type: type) -> None:
        self.open_type = open_type
        self.expected_type = expected_type
        super().__init__(
            Message.TAG_CLASS_MISMATCH_ON_END.format(
                type_name(open_type), type_name(expected_type)
            )
        )


class TagDoesNotSupportBeginError(EtiquetaError, TypeError):
    """``begin()`` was called on an element that cannot be opened and closed separately."""

    def __init__(self, element_type: type) -> None:
        self.element_type = element_type
        super().__init__(Message.TAG_DOES_NOT_SUPPORT_BEGIN.format(type_name(element_type)))


class InvalidAttributeValueError(EtiquetaError, ValueError):
    """An attribute value has an unsupported type or is outside its allowed set."""

    def __init__(self, message: str, key: str | None = None, value: Any = None) -> None:
        self.message = message
        self.key = key
        self.value = value
        super().__init__(message)


class InvalidAttributeKeyError(EtiquetaError, ValueError):
    """An attribute key is empty, not a string, or not a valid attribute name."""

    def __init__(self, key: Any) -> None:
        self.key = key
        if isinstance(key, str) and key:
            message = Message.INVALID_ATTRIBUTE_KEY.format(key)
        else:
            message = Message.KEY_MUST_BE_NON_EMPTY_STRING.format(key)
        super().__init__(message)


class AbstractInstantiationError(EtiquetaError, TypeError):
    """``tag()`` was called on a class that has no concrete tag bound."""

    def __init__(self, element_type: type) -> None:
        self.element_type = element_type
        super().__init__(
            Message.CANNOT_INSTANTIATE_ABSTRACT_CLASS.format(type_name(element_type))
        )


__all__ = [
    "AbstractInstantiationError",
    "EtiquetaError",
    "InvalidAttributeKeyError",
    "InvalidAttributeValueError",
    "InvalidTagError",
    "Message",
    "TagClassMismatchError",
    "TagDoesNotSupportBeginError",
    "UnexpectedEndCallError",
    "type_name",
]
