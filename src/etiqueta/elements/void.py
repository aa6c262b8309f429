"""Void elements: no content, no closing tag."""

from __future__ import annotations

from dataclasses import dataclass

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
from etiqueta.elements.mixins import HasAttributes
from etiqueta.renderer import render_void
from etiqueta.tags import TagKind


@dataclass(frozen=True, eq=False)
class BaseVoid(
    HasAttributes,
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

    def run(self) -> str:
        return render_void(self.get_tag(), self._attributes)


__all__ = ["BaseVoid"]
