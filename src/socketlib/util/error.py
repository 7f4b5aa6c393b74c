"""Error formatting utilities.

Renders exceptions into log-friendly strings.
"""

import json
import traceback
from typing import Any


def format_error(error: Any) -> str | None:
    """Format an exception and its ``__cause__`` chain on one line.

    Returns None for anything that is not an exception, allowing
    fallback to format_unknown_error.
    """
    if not isinstance(error, BaseException):
        return None

    parts = []
    seen = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current)
        parts.append(f"{current.__class__.__name__}: {text}" if text else current.__class__.__name__)
        current = current.__cause__
    return " Caused by: ".join(parts)


def format_unknown_error(error: Any) -> str:
    """Format any error into a string representation.

    Handles Exception objects, serializable objects, and primitives.
    """
    if isinstance(error, BaseException):
        if error.__traceback__:
            return ''.join(traceback.format_exception(type(error), error, error.__traceback__))
        return f"{error.__class__.__name__}: {str(error)}"

    if isinstance(error, (dict, list)):
        try:
            return json.dumps(error, indent=2)
        except (TypeError, ValueError):
            return "Unexpected error (unserializable)"

    return str(error)
