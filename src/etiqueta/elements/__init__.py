"""Immutable, fluent element builders.

Bases:
    BaseTag: lifecycle, providers and begin/end support
    BaseBlock: block, list, table and root tags
    BaseInline: inline tags with prefix/suffix/template composition
    BaseVoid: void tags
    BaseInput: ``<input>`` with prefix/suffix/template composition

Concrete elements such as ``Div``, ``Span`` and ``Img`` live in
:mod:`etiqueta.elements.standard` and are re-exported here.
"""

from etiqueta.elements.base import BaseTag
from etiqueta.elements.block import BaseBlock
from etiqueta.elements.inline import BaseInline
from etiqueta.elements.input import BaseInput
from etiqueta.elements.standard import *  # noqa: F403
from etiqueta.elements.standard import __all__ as _standard_all
from etiqueta.elements.void import BaseVoid

__all__ = [
    "BaseBlock",
    "BaseInline",
    "BaseInput",
    "BaseTag",
    "BaseVoid",
    *_standard_all,
]
