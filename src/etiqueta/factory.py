"""Element construction and definition mappings.

``create()`` builds a bare element, refusing classes that have no concrete
tag bound. ``configure()`` applies a definitions mapping, the format shared by
class defaults, providers and ``tag()`` arguments:

    {"class": "btn", "id": "save", "content": "Save", "data-role": "button"}

A key that names a public setter calls it; any other key becomes an
attribute.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from etiqueta.errors import AbstractInstantiationError
from etiqueta.utils.logger import get_logger

if TYPE_CHECKING:
    from etiqueta.elements.base import BaseTag

logger = get_logger(__name__)

T = TypeVar("T", bound="BaseTag")

# Keys that are Python keywords
_ALIASES = {"class": "class_"}

# Never reachable through a definitions mapping
_RESERVED = frozenset(
    {
        "add_default_provider",
        "add_theme_provider",
        "after_run",
        "apply",
        "before_run",
        "begin",
        "build_element",
        "end",
        "load_default",
        "render",
        "run",
        "tag",
    }
)


def create(element_type: type[T]) -> T:
    """Instantiate ``element_type`` with no definitions applied.

    Raises:
        AbstractInstantiationError: If the class has abstract methods or no
            tag bound.
    """
    if inspect.isabstract(element_type) or getattr(element_type, "tag_name", None) is None:
        raise AbstractInstantiationError(element_type)
    return element_type()


def _setter_for(element: BaseTag, key: str) -> Any:
    name = key.removesuffix("()")
    name = _ALIASES.get(name, name)
    if (
        name.startswith("_")
        or name.startswith(("get_", "is_"))
        or name in _RESERVED
    ):
        return None
    setter = getattr(element, name, None)
    return setter if callable(setter) else None


def configure(element: T, definitions: Mapping[str, Any]) -> T:
    """Apply a definitions mapping to ``element`` and return the result.

    List and tuple values are spread as positional arguments to the setter;
    any other value is passed as a single argument. Keys that do not name a
    setter are merged into the element's attributes.

    Args:
        element: Element to configure
        definitions: Setter names or attribute names mapped to values

    Returns:
        A new element with the definitions applied

    Raises:
        TypeError: If a setter does not return an element.
    """
    from etiqueta.elements.base import BaseTag

    for key, value in definitions.items():
        setter = _setter_for(element, key)
        if setter is None:
            logger.debug("%s: merging %r as attribute", type(element).__qualname__, key)
            element = element.add_attribute(key, value)
            continue

        args = tuple(value) if isinstance(value, (list, tuple)) else (value,)
        result = setter(*args)
        if not isinstance(result, BaseTag):
            raise TypeError(
                f"{type(element).__qualname__}.{setter.__name__}() did not return an element"
            )
        element = result
    return element


__all__ = ["configure", "create"]
