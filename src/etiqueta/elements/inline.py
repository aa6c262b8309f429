"""Inline elements with prefix, suffix and template composition."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from etiqueta.elements.base import BaseTag
from etiqueta.elements.global_attributes import (
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
    HasTitle,
    HasTranslate,
)
from etiqueta.elements.mixins import (
    HasAttributes,
    HasContent,
    HasPrefixCollection,
    HasSuffixCollection,
    HasTemplate,
)
from etiqueta.renderer import render_inline
from etiqueta.tags import TagKind, TagName
from etiqueta.template import DEFAULT_TEMPLATE, render_template


@dataclass(frozen=True, eq=False)
class BaseInline(
    HasAttributes,
    HasContent,
    HasPrefixCollection,
    HasSuffixCollection,
    HasTemplate,
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
    HasTitle,
    HasTranslate,
    BaseTag,
):
    """Base for inline elements.

    The element renders through its template. ``{prefix}`` and ``{suffix}``
    are wrapped in their own inline tags when one is set; ``{tag}`` is the
    element itself. Subclasses add tokens by overriding ``get_token_values()``.
    """

    accepted_kinds = frozenset({TagKind.INLINE})

    def run(self) -> str:
        return self.build_element(self._content, self.get_token_values())

    def get_token_values(self) -> Mapping[str, str]:
        """Extra template tokens, keyed with their braces (``{label}``)."""
        return {}

    def build_element(self, content: str = "", token_values: Mapping[str, str] | None = None) -> str:
        tokens: dict[str, Any] = {
            "{prefix}": _wrap(self._prefix_tag, self._prefix, self._prefix_attributes),
            "{tag}": render_inline(self.get_tag(), content, self._attributes),
            "{suffix}": _wrap(self._suffix_tag, self._suffix, self._suffix_attributes),
        }
        tokens.update(token_values or {})
        return render_template(self._template or DEFAULT_TEMPLATE, tokens)


def _wrap(tag: TagName | None, content: str, attributes: Mapping[str, Any]) -> str:
    if tag is None:
        return content
    return render_inline(tag, content, attributes)


__all__ = ["BaseInline"]
