"""State-carrying mixins for elements.

Each mixin is a frozen dataclass contributing fields and the setters that
replace them. They are combined with :class:`~etiqueta.elements.base.BaseTag`,
which provides ``_with()``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from etiqueta.attributes import add_class, normalize_key, validate_value
from etiqueta.tags import TagName
from etiqueta.template import DEFAULT_TEMPLATE
from etiqueta.utils.text import escape_html


@dataclass(frozen=True, eq=False)
class HasAttributes:
    """Arbitrary HTML attributes, kept in insertion order."""

    _attributes: Mapping[str, Any] = field(default_factory=dict, repr=False)

    def add_attribute(self, key: Any, value: Any) -> Self:
        """Set one attribute. ``None`` removes it."""
        key = normalize_key(key)
        attributes = dict(self._attributes)
        if value is None:
            attributes.pop(key, None)
        else:
            attributes[key] = validate_value(key, value)
        return self._with(_attributes=attributes)

    def attributes(self, values: Mapping[Any, Any]) -> Self:
        """Merge ``values`` into the attributes. ``None`` values remove keys."""
        attributes = dict(self._attributes)
        for key, value in values.items():
            key = normalize_key(key)
            if value is None:
                attributes.pop(key, None)
            else:
                attributes[key] = validate_value(key, value)
        return self._with(_attributes=attributes)

    def remove_attribute(self, key: Any) -> Self:
        attributes = dict(self._attributes)
        attributes.pop(normalize_key(key), None)
        return self._with(_attributes=attributes)

    def get_attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    def get_attribute(self, key: Any, default: Any = None) -> Any:
        return self._attributes.get(normalize_key(key), default)


@dataclass(frozen=True, eq=False)
class HasContent:
    """Inner content. ``content()`` escapes text, ``html()`` does not."""

    _content: str = ""

    def content(self, *values: Any) -> Self:
        """Append escaped text."""
        text = "".join(escape_html(str(value)) for value in values)
        return self._with(_content=self._content + text)

    def html(self, *values: Any) -> Self:
        """Append raw markup."""
        text = "".join(str(value) for value in values)
        return self._with(_content=self._content + text)

    def get_content(self) -> str:
        return self._content


@dataclass(frozen=True, eq=False)
class HasPrefixCollection:
    """Content rendered before the element, optionally wrapped in its own tag."""

    _prefix: str = ""
    _prefix_attributes: Mapping[str, Any] = field(default_factory=dict, repr=False)
    _prefix_tag: TagName | None = None

    def prefix(self, *values: Any) -> Self:
        """Replace the prefix content with the concatenated values."""
        return self._with(_prefix="".join(str(value) for value in values))

    def prefix_attributes(self, values: Mapping[str, Any]) -> Self:
        return self._with(_prefix_attributes=dict(values))

    def prefix_class(self, value: Any, override: bool = False) -> Self:
        return self._with(_prefix_attributes=add_class(self._prefix_attributes, value, override))

    def prefix_tag(self, tag: TagName | None = None) -> Self:
        """Wrap the prefix in ``tag``; ``None`` renders it bare."""
        return self._with(_prefix_tag=tag)

    def get_prefix(self) -> str:
        return self._prefix

    def get_prefix_attributes(self) -> dict[str, Any]:
        return dict(self._prefix_attributes)

    def get_prefix_tag(self) -> TagName | None:
        return self._prefix_tag


@dataclass(frozen=True, eq=False)
class HasSuffixCollection:
    """Content rendered after the element, optionally wrapped in its own tag."""

    _suffix: str = ""
    _suffix_attributes: Mapping[str, Any] = field(default_factory=dict, repr=False)
    _suffix_tag: TagName | None = None

    def suffix(self, *values: Any) -> Self:
        return self._with(_suffix="".join(str(value) for value in values))

    def suffix_attributes(self, values: Mapping[str, Any]) -> Self:
        return self._with(_suffix_attributes=dict(values))

    def suffix_class(self, value: Any, override: bool = False) -> Self:
        return self._with(_suffix_attributes=add_class(self._suffix_attributes, value, override))

    def suffix_tag(self, tag: TagName | None = None) -> Self:
        return self._with(_suffix_tag=tag)

    def get_suffix(self) -> str:
        return self._suffix

    def get_suffix_attributes(self) -> dict[str, Any]:
        return dict(self._suffix_attributes)

    def get_suffix_tag(self) -> TagName | None:
        return self._suffix_tag


@dataclass(frozen=True, eq=False)
class HasTemplate:
    """Line template controlling where prefix, tag and suffix are placed."""

    _template: str = DEFAULT_TEMPLATE

    def template(self, value: str) -> Self:
        return self._with(_template=value)

    def get_template(self) -> str:
        return self._template


__all__ = [
    "HasAttributes",
    "HasContent",
    "HasPrefixCollection",
    "HasSuffixCollection",
    "HasTemplate",
]
