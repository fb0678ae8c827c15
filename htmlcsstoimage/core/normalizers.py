"""
Value Normalizers
=================

Pure functions turning ergonomic request values into their wire strings.
"""

from typing import Iterable, Optional, Union

from htmlcsstoimage.models.requests import PdfValueInput, PdfValueWithUnits


def format_number(value: Union[int, float]) -> str:
    """Render a number the way the service expects it: ``10``, ``10.5``, never ``10.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_measurement(value: PdfValueInput) -> str:
    """
    Convert a physical measurement into its wire string.

    Args:
        value: Bare number (pixels) or a value with an explicit unit

    Returns:
        ``"<value><unit>"``, e.g. ``"10px"`` or ``"20in"``
    """
    if isinstance(value, PdfValueWithUnits):
        return f"{format_number(value.value)}{value.unit.value}"
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Unsupported measurement value: {value!r}")
    return f"{format_number(value)}px"


def normalize_font_list(names: Optional[Iterable[str]]) -> Optional[str]:
    """
    Canonicalize Google Font names into the ``|``-joined wire form.

    Names are trimmed and their spaces become ``+``; blank names are dropped and
    duplicates removed keeping the first occurrence. Returns ``None`` for a
    missing or empty list, so the field is omitted from the request.
    """
    if not names:
        return None

    fonts = []
    seen = set()
    for name in names:
        font = name.strip().replace(" ", "+")
        if font and font not in seen:
            seen.add(font)
            fonts.append(font)

    return "|".join(fonts)
