"""Text helpers shared by extraction and synthesis."""

BOM = "\ufeff"


def is_blank(text: str | None) -> bool:
    """True when ``text`` holds nothing but whitespace and byte order marks.

    ``str.strip`` keeps U+FEFF, so a BOM-prefixed empty file would otherwise
    count as content.
    """
    if not text:
        return True
    return not text.replace(BOM, "").strip()
