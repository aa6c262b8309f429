"""Concrete elements for common HTML tags.

Each class only binds a tag; behaviour comes from its base.

Example:
    >>> Ul.tag().html(Li.tag().content("one").render()).render()
    '<ul>\\n<li>\\none\\n</li>\\n</ul>'
"""

from __future__ import annotations

from etiqueta.elements.block import BaseBlock
from etiqueta.elements.inline import BaseInline
from etiqueta.elements.input import BaseInput
from etiqueta.elements.void import BaseVoid
from etiqueta.tags import BlockTag, InlineTag, ListTag, RootTag, TableTag, VoidTag


# Block
class Div(BaseBlock):
    tag_name = BlockTag.DIV


class Section(BaseBlock):
    tag_name = BlockTag.SECTION


class Article(BaseBlock):
    tag_name = BlockTag.ARTICLE


class Aside(BaseBlock):
    tag_name = BlockTag.ASIDE


class Header(BaseBlock):
    tag_name = BlockTag.HEADER


class Footer(BaseBlock):
    tag_name = BlockTag.FOOTER


class Main(BaseBlock):
    tag_name = BlockTag.MAIN


class Nav(BaseBlock):
    tag_name = BlockTag.NAV


class P(BaseBlock):
    tag_name = BlockTag.P


class H1(BaseBlock):
    tag_name = BlockTag.H1


class H2(BaseBlock):
    tag_name = BlockTag.H2


class H3(BaseBlock):
    tag_name = BlockTag.H3


class H4(BaseBlock):
    tag_name = BlockTag.H4


class H5(BaseBlock):
    tag_name = BlockTag.H5


class H6(BaseBlock):
    tag_name = BlockTag.H6


class Pre(BaseBlock):
    tag_name = BlockTag.PRE


class Form(BaseBlock):
    tag_name = BlockTag.FORM


class Fieldset(BaseBlock):
    tag_name = BlockTag.FIELDSET


class Figure(BaseBlock):
    tag_name = BlockTag.FIGURE


# Lists
class Ul(BaseBlock):
    tag_name = ListTag.UL


class Ol(BaseBlock):
    tag_name = ListTag.OL


class Li(BaseBlock):
    tag_name = ListTag.LI


class Dl(BaseBlock):
    tag_name = ListTag.DL


class Dt(BaseBlock):
    tag_name = ListTag.DT


class Dd(BaseBlock):
    tag_name = ListTag.DD


# Document root
class Html(BaseBlock):
    tag_name = RootTag.HTML


class Head(BaseBlock):
    tag_name = RootTag.HEAD


class Body(BaseBlock):
    tag_name = RootTag.BODY


# Tables
class Table(BaseBlock):
    tag_name = TableTag.TABLE


class Caption(BaseBlock):
    tag_name = TableTag.CAPTION


class Thead(BaseBlock):
    tag_name = TableTag.THEAD


class Tbody(BaseBlock):
    tag_name = TableTag.TBODY


class Tfoot(BaseBlock):
    tag_name = TableTag.TFOOT


class Tr(BaseBlock):
    tag_name = TableTag.TR


class Th(BaseBlock):
    tag_name = TableTag.TH


class Td(BaseBlock):
    tag_name = TableTag.TD


# Inline
class Span(BaseInline):
    tag_name = InlineTag.SPAN


class A(BaseInline):
    tag_name = InlineTag.A


class Strong(BaseInline):
    tag_name = InlineTag.STRONG


class Em(BaseInline):
    tag_name = InlineTag.EM


class Code(BaseInline):
    tag_name = InlineTag.CODE


class Small(BaseInline):
    tag_name = InlineTag.SMALL


class Label(BaseInline):
    tag_name = InlineTag.LABEL


class Button(BaseInline):
    tag_name = InlineTag.BUTTON


# Void
class Img(BaseVoid):
    tag_name = VoidTag.IMG


class Hr(BaseVoid):
    tag_name = VoidTag.HR


class Br(BaseVoid):
    tag_name = VoidTag.BR


class Meta(BaseVoid):
    tag_name = VoidTag.META


class Link(BaseVoid):
    tag_name = VoidTag.LINK


# Form controls
class Input(BaseInput):
    tag_name = VoidTag.INPUT


__all__ = [
    "A",
    "Article",
    "Aside",
    "Body",
    "Br",
    "Button",
    "Caption",
    "Code",
    "Dd",
    "Div",
    "Dl",
    "Dt",
    "Em",
    "Fieldset",
    "Figure",
    "Footer",
    "Form",
    "H1",
    "H2",
    "H3",
    "H4",
    "H5",
    "H6",
    "Head",
    "Header",
    "Hr",
    "Html",
    "Img",
    "Input",
    "Label",
    "Li",
    "Link",
    "Main",
    "Meta",
    "Nav",
    "Ol",
    "P",
    "Pre",
    "Section",
    "Small",
    "Span",
    "Strong",
    "Table",
    "Tbody",
    "Td",
    "Tfoot",
    "Th",
    "Thead",
    "Tr",
    "Ul",
]
