"""
etiqueta: HTML tag builder for Python

Builds standards-compliant HTML markup from Python code, either with the
stateless tag functions or with immutable, fluent element objects.

Quick Start:
    >>> from etiqueta import create_tag, begin_tag, end_tag
    >>> create_tag("div", "Hi", {"class": "c"})
    '<div class="c">\\nHi\\n</div>'
    >>> begin_tag("section", {"id": "main"}) + end_tag("section")
    '<section id="main"></section>'

Elements:
    >>> from etiqueta import Div, Span
    >>> Span.tag().class_("badge").content("<new>").render()
    '<span class="badge">&lt;new&gt;</span>'

Begin/End:
    >>> html = Div.tag().id("page").begin()
    >>> html += "Body"
    >>> html += Div.end()
    >>> html
    '<div id="page">\\nBody\\n</div>'

Themes and defaults:
    >>> from etiqueta import ProviderRegistryBuilder, MappingThemeProvider, RenderConfig
    >>> registry = ProviderRegistryBuilder().register_theme(
    ...     MappingThemeProvider({"dark": {"class": "bg-dark"}})
    ... ).build()
    >>> Div.tag(config=RenderConfig(providers=registry, theme="dark")).render()
    '<div class="bg-dark">\\n</div>'
"""

from etiqueta.attributes import add_class, render_attributes
from etiqueta.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from etiqueta.elements import *  # noqa: F403
from etiqueta.elements import __all__ as _elements_all
from etiqueta.errors import (
    AbstractInstantiationError,
    EtiquetaError,
    InvalidAttributeKeyError,
    InvalidAttributeValueError,
    InvalidTagError,
    Message,
    TagClassMismatchError,
    TagDoesNotSupportBeginError,
    UnexpectedEndCallError,
)
from etiqueta.factory import configure, create
from etiqueta.providers import (
    DefaultsProvider,
    MappingDefaultsProvider,
    MappingThemeProvider,
    ProviderRegistry,
    ProviderRegistryBuilder,
    ThemeProvider,
)
from etiqueta.renderer import (
    begin_tag,
    create_tag,
    end_tag,
    render_begin,
    render_close,
    render_element,
    render_end,
    render_full,
    render_inline,
    render_open,
    render_void,
)
from etiqueta.stack import (
    TagStack,
    get_tag_stack,
    reset_tag_stack,
    set_tag_stack,
    tag_stack_context,
)
from etiqueta.tags import (
    BlockTag,
    InlineTag,
    ListTag,
    RootTag,
    TableTag,
    TagKind,
    VoidTag,
    normalize_tag_name,
    tag_kind,
)
from etiqueta.template import render_template

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Tag functions
    "create_tag",
    "begin_tag",
    "end_tag",
    "render_void",
    "render_open",
    "render_close",
    "render_full",
    "render_inline",
    "render_begin",
    "render_end",
    "render_element",
    "render_attributes",
    "render_template",
    "add_class",
    # Tags
    "TagKind",
    "BlockTag",
    "InlineTag",
    "ListTag",
    "RootTag",
    "TableTag",
    "VoidTag",
    "tag_kind",
    "normalize_tag_name",
    # Begin/end stack
    "TagStack",
    "get_tag_stack",
    "set_tag_stack",
    "reset_tag_stack",
    "tag_stack_context",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Providers
    "DefaultsProvider",
    "ThemeProvider",
    "ProviderRegistry",
    "ProviderRegistryBuilder",
    "MappingDefaultsProvider",
    "MappingThemeProvider",
    # Factory
    "create",
    "configure",
    # Errors
    "EtiquetaError",
    "InvalidTagError",
    "UnexpectedEndCallError",
    "TagClassMismatchError",
    "TagDoesNotSupportBeginError",
    "InvalidAttributeValueError",
    "InvalidAttributeKeyError",
    "AbstractInstantiationError",
    "Message",
    # Elements
    *_elements_all,
]
