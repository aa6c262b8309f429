"""Tag-name catalogs and tag-kind classification.

Each catalog is a ``StrEnum`` so its members can be passed anywhere a tag name
string is accepted. :func:`tag_kind` maps a name to its :class:`TagKind`;
names no catalog knows (custom elements such as ``my-widget``) are block tags.

Example:
    >>> tag_kind("img")
    <TagKind.VOID: 'void'>
    >>> tag_kind(BlockTag.DIV)
    <TagKind.BLOCK: 'block'>
"""

from __future__ import annotations

import re
from enum import Enum, StrEnum
from typing import TypeAlias

from etiqueta.errors import InvalidTagError, Message


class TagKind(Enum):
    """How a tag renders.

    VOID tags have no content and no closing tag. INLINE tags render in one
    piece and cannot be opened and closed separately. BLOCK tags support both
    full rendering and begin/end pairing.
    """

    VOID = "void"
    INLINE = "inline"
    BLOCK = "block"


class BlockTag(StrEnum):
    """Block-level content tags."""

    ADDRESS = "address"
    ARTICLE = "article"
    ASIDE = "aside"
    AUDIO = "audio"
    BLOCKQUOTE = "blockquote"
    CANVAS = "canvas"
    DEL = "del"
    DETAILS = "details"
    DIALOG = "dialog"
    DIV = "div"
    FIELDSET = "fieldset"
    FIGCAPTION = "figcaption"
    FIGURE = "figure"
    FOOTER = "footer"
    FORM = "form"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    HEADER = "header"
    HGROUP = "hgroup"
    IFRAME = "iframe"
    INS = "ins"
    LEGEND = "legend"
    MAIN = "main"
    MENU = "menu"
    NAV = "nav"
    OBJECT = "object"
    P = "p"
    PRE = "pre"
    SEARCH = "search"
    SECTION = "section"
    SUMMARY = "summary"
    VIDEO = "video"


class InlineTag(StrEnum):
    """Phrasing (inline) tags."""

    A = "a"
    ABBR = "abbr"
    B = "b"
    BDI = "bdi"
    BDO = "bdo"
    BUTTON = "button"
    CITE = "cite"
    CODE = "code"
    DATA = "data"
    DFN = "dfn"
    EM = "em"
    I = "i"
    KBD = "kbd"
    LABEL = "label"
    MAP = "map"
    MARK = "mark"
    METER = "meter"
    OUTPUT = "output"
    PICTURE = "picture"
    PROGRESS = "progress"
    Q = "q"
    RP = "rp"
    RT = "rt"
    RUBY = "ruby"
    S = "s"
    SAMP = "samp"
    SMALL = "small"
    SPAN = "span"
    STRONG = "strong"
    SUB = "sub"
    SUP = "sup"
    TIME = "time"
    U = "u"
    VAR = "var"


class ListTag(StrEnum):
    """List tags."""

    DD = "dd"
    DL = "dl"
    DT = "dt"
    LI = "li"
    OL = "ol"
    UL = "ul"


class RootTag(StrEnum):
    """Document root tags."""

    BODY = "body"
    HEAD = "head"
    HTML = "html"


class TableTag(StrEnum):
    """Table tags."""

    CAPTION = "caption"
    COLGROUP = "colgroup"
    TABLE = "table"
    TBODY = "tbody"
    TD = "td"
    TFOOT = "tfoot"
    TH = "th"
    THEAD = "thead"
    TR = "tr"


class VoidTag(StrEnum):
    """Void tags, which never have content or a closing tag."""

    AREA = "area"
    BASE = "base"
    BR = "br"
    COL = "col"
    EMBED = "embed"
    HR = "hr"
    IMG = "img"
    INPUT = "input"
    LINK = "link"
    META = "meta"
    SOURCE = "source"
    TRACK = "track"
    WBR = "wbr"


TagName: TypeAlias = "str | BlockTag | InlineTag | ListTag | RootTag | TableTag | VoidTag"

_VALID_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9:._-]*$")

_KINDS: dict[str, TagKind] = {
    **{member.value: TagKind.BLOCK for member in BlockTag},
    **{member.value: TagKind.BLOCK for member in ListTag},
    **{member.value: TagKind.BLOCK for member in RootTag},
    **{member.value: TagKind.BLOCK for member in TableTag},
    **{member.value: TagKind.INLINE for member in InlineTag},
    **{member.value: TagKind.VOID for member in VoidTag},
}


def normalize_tag_name(tag: TagName) -> str:
    """Validate a tag name and return it as a plain string.

    Raises:
        InvalidTagError: If the name is empty or not a well-formed tag name.
    """
    name = str(tag.value if isinstance(tag, Enum) else tag)
    if not name:
        raise InvalidTagError(Message.EMPTY_TAG_NAME.format(), tag_name=name)
    if not _VALID_NAME.match(name):
        raise InvalidTagError(Message.INVALID_TAG_NAME.format(name), tag_name=name)
    return name


def tag_kind(tag: TagName) -> TagKind:
    """Classify a tag name. Lookup is case-insensitive."""
    return _KINDS.get(normalize_tag_name(tag).lower(), TagKind.BLOCK)


__all__ = [
    "BlockTag",
    "InlineTag",
    "ListTag",
    "RootTag",
    "TableTag",
    "TagKind",
    "TagName",
    "VoidTag",
    "normalize_tag_name",
    "tag_kind",
]
