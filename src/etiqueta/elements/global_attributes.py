"""Setters for HTML global attributes.

These mixins carry no state of their own; they read and write the attribute
mapping of :class:`~etiqueta.elements.mixins.HasAttributes`. Passing ``None``
to any setter removes the attribute.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Self

from etiqueta.attributes import add_class, normalize_key
from etiqueta.errors import InvalidAttributeValueError, Message
from etiqueta.values import (
    ContentEditable,
    Direction,
    Draggable,
    Role,
    Translate,
    validate_choice,
)

_LANGUAGE_TAG = re.compile(r"^[A-Za-z]{2,3}(?:-[A-Za-z0-9]{1,8})*$")


def _value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class HasClass:
    def class_(self, value: Any, override: bool = False) -> Self:
        """Add CSS classes, or replace them with ``override=True``."""
        return self._with(_attributes=add_class(self._attributes, value, override))


class HasId:
    def id(self, value: str | None) -> Self:
        return self.add_attribute("id", value)


class HasTitle:
    def title(self, value: str | None) -> Self:
        return self.add_attribute("title", value)


class HasStyle:
    def style(self, value: str | Mapping[str, Any] | None) -> Self:
        """Set inline CSS as a string or a property mapping."""
        return self.add_attribute("style", value)


class HasLang:
    def lang(self, value: Any) -> Self:
        """Set the language, validated as a BCP 47 style tag (``en``, ``pt-BR``)."""
        value = _value(value)
        if value is not None and not (isinstance(value, str) and _LANGUAGE_TAG.match(value)):
            raise InvalidAttributeValueError(
                Message.VALUE_NOT_IN_LIST.format(value, "lang", "a language tag such as 'en-US'"),
                key="lang",
                value=value,
            )
        return self.add_attribute("lang", value)


class HasDir:
    def dir(self, value: Any) -> Self:
        if value is None:
            return self.remove_attribute("dir")
        return self.add_attribute("dir", validate_choice("dir", value, Direction))


class HasDraggable:
    def draggable(self, value: Any) -> Self:
        """Accepts ``True``/``False`` or a :class:`Draggable` value."""
        if value is None:
            return self.remove_attribute("draggable")
        if isinstance(value, bool):
            value = "true" if value else "false"
        return self.add_attribute("draggable", validate_choice("draggable", value, Draggable))


class HasContentEditable:
    def content_editable(self, value: Any) -> Self:
        if value is None:
            return self.remove_attribute("contenteditable")
        if isinstance(value, bool):
            value = "true" if value else "false"
        return self.add_attribute(
            "contenteditable", validate_choice("contenteditable", value, ContentEditable)
        )


class HasSpellcheck:
    def spellcheck(self, value: bool | None) -> Self:
        if value is None:
            return self.remove_attribute("spellcheck")
        return self.add_attribute("spellcheck", "true" if value else "false")


class HasTranslate:
    def translate(self, value: Any) -> Self:
        """Accepts ``True``/``False`` (rendered ``yes``/``no``) or a :class:`Translate`."""
        if value is None:
            return self.remove_attribute("translate")
        if isinstance(value, bool):
            value = "yes" if value else "no"
        return self.add_attribute("translate", validate_choice("translate", value, Translate))


class HasRole:
    def role(self, value: Any) -> Self:
        if value is None:
            return self.remove_attribute("role")
        return self.add_attribute("role", validate_choice("role", value, Role))


class HasTabindex:
    def tab_index(self, value: int | None) -> Self:
        """Set ``tabindex``; must be an integer of at least -1."""
        if value is None:
            return self.remove_attribute("tabindex")
        if isinstance(value, bool) or not isinstance(value, int) or value < -1:
            raise InvalidAttributeValueError(
                Message.TAB_INDEX_OUT_OF_RANGE.format(value), key="tabindex", value=value
            )
        return self.add_attribute("tabindex", value)


class HasAccesskey:
    def accesskey(self, value: str | None) -> Self:
        return self.add_attribute("accesskey", value)


class CanBeHidden:
    def hidden(self, value: bool = True) -> Self:
        return self.add_attribute("hidden", value or None)


class CanBeAutofocus:
    def autofocus(self, value: bool = True) -> Self:
        return self.add_attribute("autofocus", value or None)


class HasData:
    """``data-*`` attributes. Keys may be given with or without the prefix."""

    def add_data_attribute(self, key: Any, value: Any) -> Self:
        return self.add_attribute(normalize_key(key, "data-"), value)

    def data(self, values: Mapping[Any, Any]) -> Self:
        return self.attributes({normalize_key(k, "data-"): v for k, v in values.items()})

    def remove_data_attribute(self, key: Any) -> Self:
        return self.remove_attribute(normalize_key(key, "data-"))


class HasAria:
    """``aria-*`` attributes. Booleans render as ``"true"``/``"false"``."""

    def add_aria_attribute(self, key: Any, value: Any) -> Self:
        return self.add_attribute(normalize_key(key, "aria-"), value)

    def aria(self, values: Mapping[Any, Any]) -> Self:
        return self.attributes({normalize_key(k, "aria-"): v for k, v in values.items()})

    def remove_aria_attribute(self, key: Any) -> Self:
        return self.remove_attribute(normalize_key(key, "aria-"))


class HasEvents:
    """Event handler attributes. ``"click"`` and ``Event.CLICK`` both give ``onclick``."""

    def add_event(self, event: Any, handler: Any) -> Self:
        return self.add_attribute(normalize_key(event, "on"), handler)

    def events(self, values: Mapping[Any, Any]) -> Self:
        return self.attributes({normalize_key(k, "on"): v for k, v in values.items()})

    def remove_event(self, event: Any) -> Self:
        return self.remove_attribute(normalize_key(event, "on"))


class HasMicroData:
    """Microdata attributes (``itemid``, ``itemprop``, ``itemref``, ``itemscope``, ``itemtype``)."""

    def item_id(self, value: str | None) -> Self:
        return self.add_attribute("itemid", value)

    def item_prop(self, value: str | None) -> Self:
        return self.add_attribute("itemprop", value)

    def item_ref(self, value: str | None) -> Self:
        return self.add_attribute("itemref", value)

    def item_scope(self, value: bool = True) -> Self:
        return self.add_attribute("itemscope", value or None)

    def item_type(self, value: str | None) -> Self:
        return self.add_attribute("itemtype", value)


__all__ = [
    "CanBeAutofocus",
    "CanBeHidden",
    "HasAccesskey",
    "HasAria",
    "HasClass",
    "HasContentEditable",
    "HasData",
    "HasDir",
    "HasDraggable",
    "HasEvents",
    "HasId",
    "HasLang",
    "HasMicroData",
    "HasRole",
    "HasSpellcheck",
    "HasStyle",
    "HasTabindex",
    "HasTitle",
    "HasTranslate",
]
