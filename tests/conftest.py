"""Shared fixtures for etiqueta tests."""

from collections.abc import Iterator

import pytest

from etiqueta import TagStack, reset_render_config, tag_stack_context


@pytest.fixture(autouse=True)
def isolated_state() -> Iterator[TagStack]:
    """Give every test an empty tag stack and the default render config."""
    reset_render_config()
    with tag_stack_context() as stack:
        yield stack
    reset_render_config()
