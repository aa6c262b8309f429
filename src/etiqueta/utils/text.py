"""Text escaping utilities for etiqueta.

Content and attribute values share one escaping rule: ``&``, ``<``, ``>``
and both quote characters become entities.

Example:
    >>> from etiqueta.utils.text import escape_html
    >>> escape_html('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
"""

from __future__ import annotations

import html as html_module
import re

_BLANK_LINES = re.compile(r"\n{2,}")


def escape_html(text: str) -> str:
    """Escape text for safe inclusion in HTML content or attribute values.

    Args:
        text: Raw text

    Returns:
        Text with ``& < > " '`` replaced by entities
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of consecutive newlines into a single newline.

    >>> collapse_blank_lines("<div>\\n\\n\\n</div>")
    '<div>\\n</div>'
    """
    return _BLANK_LINES.sub("\n", text)
