"""Base class for immutable, fluent element builders.

Elements are frozen dataclasses. Every setter returns a modified copy made
with :func:`dataclasses.replace`; the receiver is never changed, so partially
configured elements can be shared and reused freely.

Rendering runs through three hooks:

    render() -> before_run() ? after_run(run()) : ""

Subclasses bind a concrete tag with the ``tag_name`` class variable. The
element base declares which tag kinds it accepts and rejects other bindings
when the subclass is created.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Self

from etiqueta.config import get_render_config
from etiqueta.errors import InvalidTagError, Message, TagDoesNotSupportBeginError
from etiqueta.factory import configure, create
from etiqueta.stack import get_tag_stack
from etiqueta.tags import TagKind, TagName, normalize_tag_name, tag_kind
from etiqueta.utils.logger import get_logger

if TYPE_CHECKING:
    from etiqueta.config import RenderConfig
    from etiqueta.stack import TagStack

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class BaseTag(ABC):
    """Abstract element builder.

    Attributes:
        tag_name: Tag bound by a concrete subclass (class variable)
        accepted_kinds: Tag kinds a subclass may bind (class variable)
    """

    tag_name: ClassVar[TagName | None] = None
    accepted_kinds: ClassVar[frozenset[TagKind]] = frozenset(TagKind)

    _begun: bool = dataclasses.field(default=False, repr=False)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        tag = cls.__dict__.get("tag_name")
        if tag is None:
            return
        kind = tag_kind(tag)
        if kind not in cls.accepted_kinds:
            accepted = " or ".join(sorted(k.value for k in cls.accepted_kinds))
            raise InvalidTagError(
                Message.TAG_KIND_NOT_ACCEPTED.format(
                    normalize_tag_name(tag), kind.value, cls.__qualname__, accepted
                ),
                tag_name=normalize_tag_name(tag),
            )

    @classmethod
    def tag(cls, *definitions: Mapping[str, Any], config: RenderConfig | None = None) -> Self:
        """Build a configured element.

        Definitions apply weakest first: ``load_default()``, the config's
        per-class defaults, registered defaults providers, ``definitions`` in
        order, and finally theme providers for the config's theme.

        Args:
            *definitions: Definition mappings (see :func:`etiqueta.factory.configure`)
            config: Render configuration; the context's config if omitted

        Raises:
            AbstractInstantiationError: If the class binds no tag.
        """
        config = config if config is not None else get_render_config()
        element = create(cls)
        element = configure(element, element.load_default())
        element = configure(element, config.defaults_for(cls))

        if config.providers is not None:
            element = element.add_default_provider(*config.providers.defaults_for(cls))

        for definition in definitions:
            element = configure(element, definition)

        if config.providers is not None and config.theme is not None:
            element = element.add_theme_provider(config.theme, *config.providers.themes_for(cls))
        return element

    def load_default(self) -> Mapping[str, Any]:
        """Definitions every instance of this class starts from."""
        return {}

    def get_defaults(self, tag: BaseTag) -> Mapping[str, Any]:
        return {}

    def apply(self, tag: BaseTag, theme: str) -> Mapping[str, Any]:
        return {}

    def add_default_provider(self, *providers: Any) -> Self:
        """Apply defaults providers, given as instances or classes."""
        element = self
        for provider in providers:
            if isinstance(provider, type):
                provider = provider()
            definitions = provider.get_defaults(element)
            if definitions:
                logger.debug(
                    "%s: defaults from %s", type(self).__qualname__, type(provider).__qualname__
                )
                element = configure(element, definitions)
        return element

    def add_theme_provider(self, theme: str, *providers: Any) -> Self:
        """Apply theme providers for ``theme``, given as instances or classes."""
        element = self
        for provider in providers:
            if isinstance(provider, type):
                provider = provider()
            definitions = provider.apply(element, theme)
            if definitions:
                logger.debug(
                    "%s: theme %r from %s",
                    type(self).__qualname__,
                    theme,
                    type(provider).__qualname__,
                )
                element = configure(element, definitions)
        return element

    def get_tag(self) -> str:
        """The bound tag name as a string."""
        if self.tag_name is None:
            raise InvalidTagError(Message.EMPTY_TAG_NAME.format())
        return normalize_tag_name(self.tag_name)

    def is_begun(self) -> bool:
        """Whether this instance was captured by ``begin()``."""
        return self._begun

    def begin(self, *, stack: TagStack | None = None) -> str:
        """Open this element and return its opening markup.

        Close it with ``ElementClass.end()``.

        Raises:
            TagDoesNotSupportBeginError: If the element cannot be opened.
        """
        return (stack if stack is not None else get_tag_stack()).begin(self)

    @classmethod
    def end(cls, *, stack: TagStack | None = None) -> str:
        """Close the innermost element opened with ``begin()``.

        Raises:
            UnexpectedEndCallError: If nothing is open.
            TagClassMismatchError: If the innermost open element is not a ``cls``.
        """
        return (stack if stack is not None else get_tag_stack()).end(cls)

    def render(self) -> str:
        if not self.before_run():
            return ""
        return self.after_run(self.run())

    def before_run(self) -> bool:
        """Return False to render nothing."""
        return True

    def after_run(self, result: str) -> str:
        """Post-process the rendered markup."""
        return result

    @abstractmethod
    def run(self) -> str:
        """Produce the element's markup."""

    def _run_begin(self) -> str:
        raise TagDoesNotSupportBeginError(type(self))

    def _as_begun(self) -> Self:
        return dataclasses.replace(self, _begun=True)

    def _with(self, **changes: Any) -> Self:
        return dataclasses.replace(self, **changes)

    def __str__(self) -> str:
        return self.render()


__all__ = ["BaseTag"]
