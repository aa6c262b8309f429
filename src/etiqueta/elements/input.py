"""Form input elements.

``BaseInput`` renders a void ``<input>`` through the same prefix/suffix
template as inline elements, so labels and help text can be attached:

    >>> Input.tag().id("email").prefix("Email").prefix_tag(InlineTag.LABEL).render()
    '<label>Email</label>\\n<input id="email">'

Each instance gets a generated ``id`` by default. Setting
``aria-describedby`` to ``True`` points it at ``"{id}-help"``.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self

from etiqueta.elements.base import BaseTag
from etiqueta.elements.global_attributes import (
    CanBeAutofocus,
    CanBeHidden,
    HasAccesskey,
    HasAria,
    HasClass,
    HasData,
    HasDir,
    HasEvents,
    HasId,
    HasLang,
    HasRole,
    HasStyle,
    HasTabindex,
    HasTitle,
    HasTranslate,
)
from etiqueta.elements.mixins import (
    HasAttributes,
    HasPrefixCollection,
    HasSuffixCollection,
    HasTemplate,
)
from etiqueta.renderer import render_full
from etiqueta.tags import TagKind, TagName
from etiqueta.template import DEFAULT_TEMPLATE, render_template


def generate_id(prefix: str) -> str:
    """Return a unique element id such as ``input-3f2a9c1b7d4e``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class HasFormControl:
    def name(self, value: str | None) -> Self:
        return self.add_attribute("name", value)

    def type(self, value: str | None) -> Self:
        return self.add_attribute("type", value)

    def value(self, value: Any) -> Self:
        return self.add_attribute("value", value)

    def form(self, value: str | None) -> Self:
        return self.add_attribute("form", value)

    def placeholder(self, value: str | None) -> Self:
        return self.add_attribute("placeholder", value)

    def disabled(self, value: bool = True) -> Self:
        return self.add_attribute("disabled", value or None)

    def readonly(self, value: bool = True) -> Self:
        return self.add_attribute("readonly", value or None)

    def required(self, value: bool = True) -> Self:
        return self.add_attribute("required", value or None)


@dataclass(frozen=True, eq=False)
class BaseInput(
    HasAttributes,
    HasPrefixCollection,
    HasSuffixCollection,
    HasTemplate,
    HasFormControl,
    CanBeAutofocus,
    CanBeHidden,
    HasAccesskey,
    HasAria,
    HasClass,
    HasData,
    HasDir,
    HasEvents,
    HasId,
    HasLang,
    HasRole,
    HasStyle,
    HasTabindex,
    HasTitle,
    HasTranslate,
    BaseTag,
):
    accepted_kinds = frozenset({TagKind.VOID})

    def load_default(self) -> Mapping[str, Any]:
        return {
            "id": generate_id(type(self).__name__.lower()),
            "template": DEFAULT_TEMPLATE,
        }

    def run(self) -> str:
        return self.build_element(token_values=self.get_token_values())

    def get_token_values(self) -> Mapping[str, str]:
        """Extra template tokens, keyed with their braces."""
        return {}

    def build_element(self, content: str = "", token_values: Mapping[str, str] | None = None) -> str:
        attributes = dict(self._attributes)
        described_by = attributes.get("aria-describedby")
        if described_by is True or described_by == "true":
            element_id = attributes.get("id")
            if element_id is None:
                attributes.pop("aria-describedby")
            else:
                attributes["aria-describedby"] = f"{element_id}-help"

        tokens: dict[str, Any] = {
            "{prefix}": _wrap(self._prefix_tag, self._prefix, self._prefix_attributes),
            "{tag}": render_full(self.get_tag(), content, attributes),
            "{suffix}": _wrap(self._suffix_tag, self._suffix, self._suffix_attributes),
        }
        tokens.update(token_values or {})
        return render_template(self._template or DEFAULT_TEMPLATE, tokens)


def _wrap(tag: TagName | None, content: str, attributes: Mapping[str, Any]) -> str:
    if tag is None:
        return content
    return render_full(tag, content, attributes)


__all__ = ["BaseInput", "HasFormControl", "generate_id"]
