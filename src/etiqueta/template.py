"""Line templates for composed elements.

A template is a sequence of lines separated by a newline, either a real one
or the two-character ``\\n`` sequence (so templates survive configuration files
unchanged). Tokens such as ``{prefix}``, ``{tag}`` and ``{suffix}`` are
substituted on each line and lines that end up empty are dropped.

Example:
    >>> render_template("{prefix}\\n{tag}\\n{suffix}", {"{prefix}": "", "{tag}": "<b>x</b>", "{suffix}": ""})
    '<b>x</b>'
"""

from __future__ import annotations

import re
from collections.abc import Mapping

DEFAULT_TEMPLATE = "{prefix}\\n{tag}\\n{suffix}"

_TOKEN = re.compile(r"\{[A-Za-z_][\w-]*\}")


def render_template(template: str, token_values: Mapping[str, str]) -> str:
    """Substitute tokens line by line and join the non-empty lines.

    Args:
        template: Template text; lines separated by ``\\n`` (literal or real)
        token_values: Token (including braces) mapped to its replacement

    Returns:
        The rendered text. Unknown tokens are left in place.
    """
    lines = template.replace("\\n", "\n").split("\n")
    rendered = []
    for line in lines:
        value = _TOKEN.sub(lambda match: token_values.get(match.group(0), match.group(0)), line)
        if value.strip():
            rendered.append(value)
    return "\n".join(rendered)


__all__ = ["DEFAULT_TEMPLATE", "render_template"]
