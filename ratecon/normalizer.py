"""
Text normalization applied before any pattern matching.
"""

import re

_LINE_ENDINGS = re.compile(r'\r\n?')
_HORIZONTAL_WS = re.compile(r'[ \t\f\v\u00a0]+')


def normalize_text(text: str) -> str:
    """Collapse line endings to \\n and horizontal whitespace runs to one space."""
    if not text:
        return ""
    text = _LINE_ENDINGS.sub("\n", text)
    return _HORIZONTAL_WS.sub(" ", text)
