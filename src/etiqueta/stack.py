"""Begin/end pairing for elements.

``TagStack`` records elements opened with ``begin()`` so that a later
``end()`` can emit the matching closing markup. Entries are matched by exact
element class, innermost first.

By default the open entries live in a ContextVar as an immutable tuple, so
every thread and every asyncio task sees its own stack: a task that opens an
element never affects its parent or its siblings. An explicit ``TagStack``
can be installed for a block of code with :func:`tag_stack_context`, or
passed directly as ``stack=`` to ``begin()``/``end()``.

Usage:
    >>> from etiqueta.elements import Div
    >>> with tag_stack_context():
    ...     html = Div.tag().class_("card").begin()
    ...     html += "Body"
    ...     html += Div.end()
    >>> html
    '<div class="card">\\nBody\\n</div>'
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from etiqueta.errors import TagClassMismatchError, UnexpectedEndCallError
from etiqueta.utils.logger import get_logger

if TYPE_CHECKING:
    from etiqueta.elements.base import BaseTag

logger = get_logger(__name__)


class TagStack:
    """LIFO stack of elements opened with ``begin()``.

    A failed ``begin()`` or ``end()`` never changes the stack.

    Thread Safety:
        A standalone TagStack is not synchronized; keep it to one thread or
        task. The context-bound stack from :func:`get_tag_stack` is isolated
        per context.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: tuple[BaseTag, ...] = ()

    def _load(self) -> tuple[BaseTag, ...]:
        return self._entries

    def _store(self, entries: tuple[BaseTag, ...]) -> None:
        self._entries = entries

    def begin(self, element: BaseTag) -> str:
        """Open ``element`` and return its opening markup.

        Raises:
            TagDoesNotSupportBeginError: If the element cannot be opened.
        """
        opening = element._run_begin()
        entries = (*self._load(), element._as_begun())
        self._store(entries)
        logger.debug("begin %s (depth=%d)", type(element).__qualname__, len(entries))
        return opening

    def end(self, element_type: type[BaseTag]) -> str:
        """Close the innermost open element, which must be of ``element_type``.

        Returns:
            The closing markup of the popped element

        Raises:
            UnexpectedEndCallError: If nothing is open.
            TagClassMismatchError: If the innermost element has another class.
        """
        entries = self._load()
        if not entries:
            logger.debug("end %s with empty stack", element_type.__qualname__)
            raise UnexpectedEndCallError(element_type)

        top = entries[-1]
        if type(top) is not element_type:
            logger.debug(
                "end %s while %s is open", element_type.__qualname__, type(top).__qualname__
            )
            raise TagClassMismatchError(type(top), element_type)

        self._store(entries[:-1])
        logger.debug("end %s (depth=%d)", element_type.__qualname__, len(entries) - 1)
        return top.render()

    @property
    def depth(self) -> int:
        return len(self._load())

    @property
    def open_types(self) -> tuple[type[BaseTag], ...]:
        """Classes of open elements, outermost first."""
        return tuple(type(entry) for entry in self._load())

    def is_open(self, element_type: type[BaseTag]) -> bool:
        return any(type(entry) is element_type for entry in self._load())

    def clear(self) -> None:
        self._store(())

    def __len__(self) -> int:
        return len(self._load())

    def __bool__(self) -> bool:
        return bool(self._load())

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self.open_types)
        return f"{type(self).__name__}([{names}])"


# Open entries of the context-bound stack
_context_entries: ContextVar[tuple[BaseTag, ...]] = ContextVar(
    "tag_stack_entries",
    default=(),
)

# Explicit stack installed with set_tag_stack() or tag_stack_context(stack)
_installed_stack: ContextVar[TagStack | None] = ContextVar("tag_stack", default=None)


class _ContextTagStack(TagStack):
    """TagStack view whose entries are stored in the current context."""

    __slots__ = ()

    def _load(self) -> tuple[BaseTag, ...]:
        return _context_entries.get()

    def _store(self, entries: tuple[BaseTag, ...]) -> None:
        _context_entries.set(entries)


_CONTEXT_STACK = _ContextTagStack()


def get_tag_stack() -> TagStack:
    """Get the tag stack for the current context.

    Returns the stack installed with :func:`set_tag_stack` or
    :func:`tag_stack_context` if there is one, else the context-bound stack.
    """
    installed = _installed_stack.get()
    return installed if installed is not None else _CONTEXT_STACK


def set_tag_stack(stack: TagStack | None) -> None:
    """Install ``stack`` for the current context; ``None`` uninstalls it."""
    _installed_stack.set(stack)


def reset_tag_stack() -> None:
    """Uninstall any explicit stack and empty the context-bound stack."""
    _installed_stack.set(None)
    _context_entries.set(())


@contextmanager
def tag_stack_context(stack: TagStack | None = None) -> Iterator[TagStack]:
    """Context manager that isolates begin/end pairing for a block of code.

    Args:
        stack: Explicit stack to install. If omitted, the context-bound stack
            is emptied for the duration of the block.

    Yields:
        The stack in effect inside the block

    The previous state is restored on exit, even if an exception is raised.
    """
    installed_token = _installed_stack.set(stack)
    entries_token = _context_entries.set(())
    try:
        yield get_tag_stack()
    finally:
        _context_entries.reset(entries_token)
        _installed_stack.reset(installed_token)


__all__ = [
    "TagStack",
    "get_tag_stack",
    "reset_tag_stack",
    "set_tag_stack",
    "tag_stack_context",
]
