"""Attribute encoding for HTML tags.

Turns an ordered attribute mapping into the string placed after the tag name.
Each rendered attribute carries its own leading space, so the result can be
appended directly: ``f"<{name}{render_attributes(attrs)}>"``.

Rendering rules:
    - ``None``, ``False`` and ``""`` are omitted.
    - ``True`` renders the bare attribute name, except under ``data-*`` and
      ``aria-*`` keys where booleans render as ``"true"`` / ``"false"``.
    - Enum members render by value; numbers render with ``str()``.
    - Zero-argument callables are evaluated at render time.
    - ``class`` accepts a list of tokens, joined by spaces.
    - ``style`` accepts a mapping, rendered as ``'prop: value;'`` pairs.
    - Any other mapping flattens into hyphenated keys (``data={"id": 1}``
      renders ``data-id="1"``); mappings and lists nested below that level
      render as single-quoted JSON.

Example:
    >>> render_attributes({"id": "main", "class": ["a", "b"], "hidden": True})
    ' id="main" class="a b" hidden'
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from etiqueta.errors import (
    InvalidAttributeKeyError,
    InvalidAttributeValueError,
    Message,
)
from etiqueta.utils.text import escape_html

_STRING_FLAGS = ("data-", "aria-")

# HTML attribute names exclude whitespace, controls, quotes, '<', '>', '/' and '='
_ATTRIBUTE_NAME = re.compile(r"""[^\s"'<>/=\x00-\x1f\x7f]+""")

_JSON_SCALARS = (type(None), bool, int, float, str, Enum)


def normalize_key(key: Any, prefix: str = "") -> str:
    """Validate an attribute key and apply an optional prefix.

    Enum members are replaced by their value. A key that already starts with
    ``prefix`` is returned unchanged.

    Raises:
        InvalidAttributeKeyError: If the key is not a non-empty string or
            contains characters not allowed in an attribute name.
    """
    if isinstance(key, Enum):
        key = key.value
    if not isinstance(key, str) or not _ATTRIBUTE_NAME.fullmatch(key):
        raise InvalidAttributeKeyError(key)
    if prefix and not key.startswith(prefix):
        key = f"{prefix}{key}"
    return key


def _unsupported(key: str, value: Any) -> InvalidAttributeValueError:
    return InvalidAttributeValueError(
        Message.VALUE_KIND_NOT_PERMITTED.format(key, type(value).__name__),
        key=key,
        value=value,
    )


def _validate_nested(key: str, value: Any) -> None:
    # Nested containers are encoded as JSON
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            if not isinstance(sub_key, str):
                raise InvalidAttributeKeyError(sub_key)
            _validate_nested(key, sub_value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _validate_nested(key, item)
    elif not isinstance(value, _JSON_SCALARS):
        raise _unsupported(key, value)


def _check_resolved(name: str, value: Any) -> Any:
    if isinstance(value, (Mapping, list, tuple)):
        _validate_nested(name, value)
        return value
    return validate_value(name, value)


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _is_stringable(value: Any) -> bool:
    if hasattr(value, "__html__"):
        return True
    return type(value).__str__ is not object.__str__


def validate_value(key: str, value: Any) -> Any:
    """Check that ``value`` is a kind of attribute value the encoder accepts.

    Returns the value unchanged so the call can be used inline.

    Raises:
        InvalidAttributeValueError: For unsupported value types.
    """
    if value is None or isinstance(value, (bool, int, float, str, Enum)):
        return value
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            sub_name = f"{key}-{normalize_key(sub_key)}"
            if isinstance(sub_value, (Mapping, list, tuple)):
                _validate_nested(sub_name, sub_value)
            else:
                validate_value(sub_name, sub_value)
        return value
    if isinstance(value, (list, tuple)):
        _validate_nested(key, value)
        return value
    if callable(value) or _is_stringable(value):
        return value
    raise _unsupported(key, value)


def add_class(
    attributes: Mapping[str, Any],
    value: Any,
    override: bool = False,
) -> dict[str, Any]:
    """Return a copy of ``attributes`` with CSS class tokens merged in.

    Tokens already present are not repeated. With ``override=True`` the
    existing classes are replaced. A ``None`` value removes the attribute.

    >>> add_class({"class": "btn"}, "btn-primary btn")
    {'class': 'btn btn-primary'}
    """
    result = dict(attributes)
    if value is None:
        result.pop("class", None)
        return result

    if isinstance(value, Enum):
        value = value.value
    new_tokens = _class_tokens(value)
    if not new_tokens and not override:
        return result

    tokens = [] if override else list(dict.fromkeys(_class_tokens(result.get("class"))))
    for token in new_tokens:
        if token not in tokens:
            tokens.append(token)
    if tokens:
        result["class"] = " ".join(tokens)
    else:
        result.pop("class", None)
    return result


def _class_tokens(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        tokens: list[str] = []
        for item in value:
            tokens.extend(_class_tokens(item))
        return tokens
    if isinstance(value, Enum):
        value = value.value
    return str(value).split()


def _resolve(value: Any) -> Any:
    # Deferred values may themselves return deferred values.
    while callable(value) and not isinstance(value, (Enum, type)):
        value = value()
    if isinstance(value, Enum):
        return value.value
    return value


def _render_scalar(key: str, value: Any) -> str:
    if value is None or value is False:
        if value is False and key.startswith(_STRING_FLAGS):
            return f' {key}="false"'
        return ""
    if value is True:
        if key.startswith(_STRING_FLAGS):
            return f' {key}="true"'
        return f" {key}"
    if isinstance(value, (Mapping, list, tuple)):
        encoded = json.dumps(
            value, ensure_ascii=False, separators=(",", ":"), default=_json_default
        )
        return f" {key}='{escape_html(encoded)}'"
    if hasattr(value, "__html__"):
        # Already escaped markup
        text = str(value.__html__())
        return f' {key}="{text}"' if text else ""
    text = str(value)
    if text == "":
        return ""
    return f' {key}="{escape_html(text)}"'


def _render_style(value: Mapping[str, Any]) -> str:
    parts = []
    for prop, prop_value in value.items():
        prop_value = validate_value("style", _resolve(prop_value))
        if prop_value is None or prop_value == "":
            continue
        parts.append(f"{normalize_key(prop)}: {prop_value};")
    if not parts:
        return ""
    return f" style='{escape_html(' '.join(parts))}'"


def render_attribute(key: Any, value: Any) -> str:
    """Render a single attribute, including its leading space.

    Returns an empty string when the value is omitted.
    """
    key = normalize_key(key)
    # Deferred values are checked again once resolved
    value = validate_value(key, _resolve(validate_value(key, value)))

    if key == "class" and isinstance(value, (list, tuple)):
        value = " ".join(_class_tokens(value))
        return _render_scalar(key, value)

    if isinstance(value, Mapping):
        if key == "style":
            return _render_style(value)
        parts = []
        for sub_key, sub_value in value.items():
            sub_name = f"{key}-{normalize_key(sub_key)}"
            parts.append(_render_scalar(sub_name, _check_resolved(sub_name, _resolve(sub_value))))
        return "".join(parts)

    return _render_scalar(key, value)


def render_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Render an attribute mapping in insertion order.

    Args:
        attributes: Attribute names mapped to values (see module docstring)

    Returns:
        The rendered attributes, each prefixed by a space, or ``""``

    Raises:
        InvalidAttributeKeyError: For empty, non-string or malformed keys.
        InvalidAttributeValueError: For unsupported value types.
    """
    if not attributes:
        return ""
    return "".join(render_attribute(key, value) for key, value in attributes.items())


AttributeValue = str | int | float | bool | Enum | Mapping[str, Any] | Callable[[], Any] | None

__all__ = [
    "AttributeValue",
    "add_class",
    "normalize_key",
    "render_attribute",
    "render_attributes",
    "validate_value",
]
