"""Color & style helpers.

Decisions:
- Status glyphs are a single space on a colored background.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- With color off, glyphs fall back to the color's initial letter so the
  table stays readable in logs and pipes.
"""
from __future__ import annotations
import os, sys
from models import Color, Tag

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
ENABLED = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR


def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m"

RESET = _code('0')

BG_CODES = {
    Color.RED: _code('101'),
    Color.YELLOW: _code('103'),
    Color.GREEN: _code('102'),
    Color.BLUE: _code('104'),
}

MONO_GLYPHS = {
    Color.RED: 'R',
    Color.YELLOW: 'Y',
    Color.GREEN: 'G',
    Color.BLUE: 'B',
}


def glyph(tag: Tag) -> str:
    """Render a priority/overdue tag as one visible cell.

    Tags that are not a known Color (opaque values read from disk) are
    emitted unchanged.
    """
    if not isinstance(tag, Color):
        return str(tag)
    if not ENABLED:
        return MONO_GLYPHS[tag]
    return BG_CODES[tag] + ' ' + RESET


__all__ = ['glyph', 'RESET', 'BG_CODES', 'MONO_GLYPHS', 'ENABLED']
