"""Defaults and theme providers.

A provider returns a definitions mapping for an element; the mapping is
applied with :func:`etiqueta.factory.configure`, so its keys name setters
(``"class"``, ``"id"``, ``"template"``) or plain attributes.

Defaults providers run before user definitions. Theme providers run last,
for the theme named in the active :class:`~etiqueta.config.RenderConfig`.

Thread Safety:
    ProviderRegistry is immutable after creation. Safe to share.
    Use ProviderRegistryBuilder for mutable construction.

Example:
    >>> builder = ProviderRegistryBuilder()
    >>> builder.register_defaults(MappingDefaultsProvider({Div: {"class": "block"}}))
    >>> builder.register_theme(MappingThemeProvider({"dark": {"class": "bg-dark"}}))
    >>> registry = builder.build()
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from etiqueta.elements.base import BaseTag


@runtime_checkable
class DefaultsProvider(Protocol):
    """Supplies default definitions for an element."""

    def get_defaults(self, tag: BaseTag) -> Mapping[str, Any]:
        """Return definitions for ``tag``, or an empty mapping."""
        ...


@runtime_checkable
class ThemeProvider(Protocol):
    """Supplies theme-specific definitions for an element."""

    def apply(self, tag: BaseTag, theme: str) -> Mapping[str, Any]:
        """Return definitions for ``tag`` under ``theme``, or an empty mapping."""
        ...


@dataclass(frozen=True, slots=True)
class _Registration:
    provider: Any
    element_types: tuple[type, ...] = ()

    def matches(self, element_type: type) -> bool:
        return not self.element_types or issubclass(element_type, self.element_types)


class ProviderRegistry:
    """Immutable collection of defaults and theme providers.

    Each provider may be scoped to element types; an unscoped provider
    applies to every element.
    """

    __slots__ = ("_defaults", "_themes")

    def __init__(
        self,
        defaults: tuple[_Registration, ...] = (),
        themes: tuple[_Registration, ...] = (),
    ) -> None:
        """Initialize registry with registrations.

        Use ProviderRegistryBuilder to create instances.
        """
        self._defaults = defaults
        self._themes = themes

    def defaults_for(self, element_type: type) -> tuple[DefaultsProvider, ...]:
        """Defaults providers that apply to ``element_type``, in registration order."""
        return tuple(r.provider for r in self._defaults if r.matches(element_type))

    def themes_for(self, element_type: type) -> tuple[ThemeProvider, ...]:
        """Theme providers that apply to ``element_type``, in registration order."""
        return tuple(r.provider for r in self._themes if r.matches(element_type))

    def __len__(self) -> int:
        return len(self._defaults) + len(self._themes)

    def __bool__(self) -> bool:
        return bool(self._defaults or self._themes)


class ProviderRegistryBuilder:
    """Mutable builder for ProviderRegistry.

    Example:
        >>> builder = ProviderRegistryBuilder()
        >>> builder.register_defaults(MyDefaults(), element_types=(Div,))
        >>> registry = builder.build()
    """

    __slots__ = ("_defaults", "_themes")

    def __init__(self) -> None:
        self._defaults: list[_Registration] = []
        self._themes: list[_Registration] = []

    def register_defaults(
        self,
        provider: DefaultsProvider | type[DefaultsProvider],
        element_types: tuple[type, ...] = (),
    ) -> ProviderRegistryBuilder:
        """Register a defaults provider.

        Args:
            provider: Provider instance, or a class to instantiate
            element_types: Limit the provider to these element classes

        Returns:
            self, for chaining

        Raises:
            TypeError: If the provider lacks ``get_defaults``.
        """
        provider = _instantiate(provider)
        if not isinstance(provider, DefaultsProvider):
            raise TypeError(f"{type(provider).__name__} is not a DefaultsProvider")
        self._defaults.append(_Registration(provider, tuple(element_types)))
        return self

    def register_theme(
        self,
        provider: ThemeProvider | type[ThemeProvider],
        element_types: tuple[type, ...] = (),
    ) -> ProviderRegistryBuilder:
        """Register a theme provider. See :meth:`register_defaults`."""
        provider = _instantiate(provider)
        if not isinstance(provider, ThemeProvider):
            raise TypeError(f"{type(provider).__name__} is not a ThemeProvider")
        self._themes.append(_Registration(provider, tuple(element_types)))
        return self

    def build(self) -> ProviderRegistry:
        return ProviderRegistry(tuple(self._defaults), tuple(self._themes))


def _instantiate(provider: Any) -> Any:
    return provider() if isinstance(provider, type) else provider


class MappingDefaultsProvider:
    """Defaults provider backed by a mapping of element class to definitions.

    Lookup walks the element's MRO, so definitions registered for a base
    class apply to its subclasses unless a closer class is registered.
    """

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Mapping[type, Mapping[str, Any]]) -> None:
        self._definitions = dict(definitions)

    def get_defaults(self, tag: BaseTag) -> Mapping[str, Any]:
        for cls in type(tag).__mro__:
            if cls in self._definitions:
                return self._definitions[cls]
        return {}


class MappingThemeProvider:
    """Theme provider backed by a mapping of theme name to definitions."""

    __slots__ = ("_themes",)

    def __init__(self, themes: Mapping[str, Mapping[str, Any]]) -> None:
        self._themes = dict(themes)

    def apply(self, tag: BaseTag, theme: str) -> Mapping[str, Any]:
        return self._themes.get(theme, {})


__all__ = [
    "DefaultsProvider",
    "MappingDefaultsProvider",
    "MappingThemeProvider",
    "ProviderRegistry",
    "ProviderRegistryBuilder",
    "ThemeProvider",
]
