"""Block-level elements.

Block elements render their content on its own line and can be opened with
``begin()`` and closed later with ``ElementClass.end()``. List, table and
root tags are block tags too.
"""

from __future__ import annotations

from dataclasses import dataclass

from etiqueta.elements.base import BaseTag
from etiqueta.elements.global_attributes import (
    CanBeAutofocus,
    CanBeHidden,
    HasAccesskey,
    HasAria,
    HasClass,
    HasContentEditable,
    HasData,
    HasDir,
    HasDraggable,
    HasEvents,
    HasId,
    HasLang,
    HasMicroData,
    HasRole,
    HasSpellcheck,
    HasStyle,
    HasTabindex,
    HasTitle,
    HasTranslate,
)
from etiqueta.elements.mixins import HasAttributes, HasContent
from etiqueta.renderer import render_begin, render_end, render_full
from etiqueta.tags import TagKind
from etiqueta.utils.text import collapse_blank_lines


@dataclass(frozen=True, eq=False)
class BaseBlock(
    HasAttributes,
    HasContent,
    CanBeAutofocus,
    CanBeHidden,
    HasAccesskey,
    HasAria,
    HasClass,
    HasContentEditable,
    HasData,
    HasDir,
    HasDraggable,
    HasEvents,
    HasId,
    HasLang,
    HasMicroData,
    HasRole,
    HasSpellcheck,
    HasStyle,
    HasTabindex,
    HasTitle,
    HasTranslate,
    BaseTag,
):
    """Base for block, list, table and root elements.

    Example:
        >>> class Card(BaseBlock):
        ...     tag_name = BlockTag.DIV
        >>> Card.tag().class_("card").content("Hi").render()
        '<div class="card">\\nHi\\n</div>'
    """

    accepted_kinds = frozenset({TagKind.BLOCK})

    def run(self) -> str:
        if self._begun:
            return render_end(self.get_tag())
        return render_full(self.get_tag(), self._content, self._attributes)

    def after_run(self, result: str) -> str:
        return collapse_blank_lines(result)

    def _run_begin(self) -> str:
        return render_begin(self.get_tag(), self._attributes)


__all__ = ["BaseBlock"]
