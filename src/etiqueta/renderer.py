"""Stateless tag rendering.

The functions here are pure: they take a tag name, optional content and an
attribute mapping, and return markup. Element objects in
:mod:`etiqueta.elements` render through the same functions.

Two layers are provided:

- ``render_open`` / ``render_close`` produce bare tags (``<div>``, ``</div>``).
  ``begin_tag``/``end_tag``/``create_tag`` are the public one-shot names.
- ``render_begin`` / ``render_end`` add the newline separators used by
  element ``begin()``/``end()`` so that, for block tags and non-empty
  content, ``render_begin(t, a) + content + render_end(t)`` equals
  ``render_full(t, content, a)``.

Example:
    >>> create_tag("div", "Hi", {"class": "c"})
    '<div class="c">\\nHi\\n</div>'
    >>> begin_tag("section") + end_tag("section")
    '<section></section>'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from etiqueta.attributes import render_attributes
from etiqueta.errors import InvalidTagError, Message
from etiqueta.tags import TagKind, TagName, normalize_tag_name, tag_kind
from etiqueta.utils.text import escape_html


def _pairable(tag: TagName) -> str:
    name = normalize_tag_name(tag)
    if tag_kind(name) is not TagKind.BLOCK:
        raise InvalidTagError(Message.INLINE_BEGIN_END.format(), tag_name=name)
    return name


def render_void(tag: TagName, attributes: Mapping[str, Any] | None = None) -> str:
    """Render a tag with no content and no closing tag: ``<name attrs>``."""
    name = normalize_tag_name(tag)
    return f"<{name}{render_attributes(attributes)}>"


def render_open(tag: TagName, attributes: Mapping[str, Any] | None = None) -> str:
    """Render an opening tag without its closing counterpart.

    Raises:
        InvalidTagError: If the name is empty, or the tag is inline or void.
    """
    name = _pairable(tag)
    return f"<{name}{render_attributes(attributes)}>"


def render_close(tag: TagName) -> str:
    """Render a closing tag.

    Raises:
        InvalidTagError: If the name is empty, or the tag is inline or void.
    """
    return f"</{_pairable(tag)}>"


def render_full(
    tag: TagName,
    content: str = "",
    attributes: Mapping[str, Any] | None = None,
    encode: bool = False,
) -> str:
    """Render a complete element according to its tag kind.

    Void tags ignore content. Inline tags render on a single line. Block tags
    place content on its own line between the opening and closing tags; empty
    content collapses to ``<name>\\n</name>``.

    Args:
        tag: Tag name or catalog member
        content: Inner content
        attributes: Attribute mapping
        encode: Escape ``content`` before inserting it

    Returns:
        The rendered element
    """
    name = normalize_tag_name(tag)
    kind = tag_kind(name)
    if kind is TagKind.VOID:
        return render_void(name, attributes)

    if encode:
        content = escape_html(content)
    attrs = render_attributes(attributes)
    if kind is TagKind.INLINE:
        return f"<{name}{attrs}>{content}</{name}>"
    if content == "":
        return f"<{name}{attrs}>\n</{name}>"
    return f"<{name}{attrs}>\n{content}\n</{name}>"


def render_inline(
    tag: TagName,
    content: str = "",
    attributes: Mapping[str, Any] | None = None,
    encode: bool = False,
) -> str:
    """Render an inline element on one line.

    Raises:
        InvalidTagError: If the tag is not an inline tag.
    """
    name = normalize_tag_name(tag)
    if tag_kind(name) is not TagKind.INLINE:
        raise InvalidTagError(
            Message.TAG_KIND_NOT_ACCEPTED.format(
                name, tag_kind(name).value, "render_inline", TagKind.INLINE.value
            ),
            tag_name=name,
        )
    return render_full(name, content, attributes, encode)


def render_begin(tag: TagName, attributes: Mapping[str, Any] | None = None) -> str:
    """Opening tag followed by the newline that precedes element content."""
    return render_open(tag, attributes) + "\n"


def render_end(tag: TagName) -> str:
    """Newline that follows element content, then the closing tag."""
    return "\n" + render_close(tag)


render_element = render_full


def create_tag(
    tag: TagName,
    content: str = "",
    attributes: Mapping[str, Any] | None = None,
    encode: bool = False,
) -> str:
    """Render a complete tag. See :func:`render_full`."""
    return render_full(tag, content, attributes, encode)


def begin_tag(tag: TagName, attributes: Mapping[str, Any] | None = None) -> str:
    """Render a bare opening tag. See :func:`render_open`."""
    return render_open(tag, attributes)


def end_tag(tag: TagName) -> str:
    """Render a bare closing tag. See :func:`render_close`."""
    return render_close(tag)


__all__ = [
    "begin_tag",
    "create_tag",
    "end_tag",
    "render_begin",
    "render_close",
    "render_element",
    "render_end",
    "render_full",
    "render_inline",
    "render_open",
    "render_void",
]
