from __future__ import annotations


class QueryMisuseError(ValueError):
    pass


def sanitize_typed_text(typed_text: object) -> str:
    """Validate the token text handed to a query.

    The text is returned unchanged; matching compares it verbatim.
    """
    if typed_text is None:
        raise QueryMisuseError("Typed text is required")
    if not isinstance(typed_text, str):
        raise QueryMisuseError(f"Typed text must be a string, got {type(typed_text).__name__}")
    return typed_text
