"""Logger lookup for etiqueta modules.

All loggers hang under the ``etiqueta`` namespace so an application can turn
on tag stack and factory tracing with one call:

    >>> import logging
    >>> logging.getLogger("etiqueta").setLevel(logging.DEBUG)

No handlers are attached here.
"""

from __future__ import annotations

import logging

_ROOT = "etiqueta"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``etiqueta`` namespace.

    Module names already under the package (``etiqueta.stack``) are used
    as given; anything else is prefixed, so ``"themes"`` maps to
    ``etiqueta.themes``.
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
