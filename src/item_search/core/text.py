"""Case-insensitive text containment."""


def contains_any(fragment: str, *candidates: str | None) -> bool:
    """Return True if any candidate contains ``fragment``, ignoring case.

    Missing or empty candidates are skipped.
    """
    needle = fragment.lower()
    for text in candidates:
        if text and needle in text.lower():
            return True
    return False
