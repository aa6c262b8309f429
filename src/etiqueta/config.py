"""ContextVar-based render configuration for etiqueta.

Provides context-local configuration using Python's ContextVars (PEP 567).
The active config is read by ``tag()`` when it builds an element: per-class
defaults, the provider registry and the theme name all come from here.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from etiqueta.config import RenderConfig, render_config_context

    config = RenderConfig(theme="dark", providers=registry)
    with render_config_context(config):
        html = Div.tag().content("Hi").render()

    # Or pass it explicitly
    html = Div.tag(config=config).render()
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from etiqueta.providers import ProviderRegistry


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        defaults: Definitions applied to every element of a class, keyed by
            the exact class
        providers: Registry of defaults and theme providers
        theme: Name of the theme passed to theme providers; no theme
            providers run when None

    """

    defaults: Mapping[type, Mapping[str, Any]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    providers: ProviderRegistry | None = None
    theme: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> RenderConfig:
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"theme": "dark", "unknown_key": 1}).theme
            'dark'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "defaults" in filtered:
            filtered["defaults"] = MappingProxyType(dict(filtered["defaults"]))
        return cls(**filtered)

    def defaults_for(self, element_type: type) -> Mapping[str, Any]:
        """Definitions registered for exactly ``element_type``."""
        return self.defaults.get(element_type, {})

    def with_defaults(
        self, element_type: type, definitions: Mapping[str, Any]
    ) -> RenderConfig:
        """Return a copy with ``definitions`` registered for ``element_type``."""
        merged = dict(self.defaults)
        merged[element_type] = dict(definitions)
        return replace(self, defaults=MappingProxyType(merged))


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (context-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Properly restores the previous config even if an exception is raised.
    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
