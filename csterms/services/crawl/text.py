from __future__ import annotations

MIN_TERM_LENGTH = 2
MIN_DEFINITION_LENGTH = 10
# A definition containing its own term must add at least this many characters.
RESTATEMENT_PADDING = 20


def clean_text(text: str) -> str:
    """Collapse whitespace runs to single spaces, trim, and drop non-printable characters."""
    kept = "".join(ch for ch in (text or "") if ch.isprintable() or ch.isspace())
    return " ".join(kept.split())


def comparison_key(term: str) -> str:
    """Term without a trailing parenthetical, e.g. 'API (Application ...)' -> 'API'."""
    idx = term.find(" (")
    return term[:idx] if idx != -1 else term


def is_valid_term(term: str, definition: str) -> bool:
    if len(term) < MIN_TERM_LENGTH or len(definition) < MIN_DEFINITION_LENGTH:
        return False

    key = comparison_key(term)
    if key.lower() in definition.lower() and len(definition) < len(key) + RESTATEMENT_PADDING:
        return False

    return True
