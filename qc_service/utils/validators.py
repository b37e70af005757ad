import html
import bleach


def sanitize_string(value):
    """Strip HTML tags and trim whitespace from string inputs.

    bleach escapes what it keeps (``&`` -> ``&amp;``); the text is unescaped
    again so stored values and filter values compare equal.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    cleaned = bleach.clean(str(value), tags=[], strip=True)
    return html.unescape(cleaned).strip()


def sanitize_fields(data, keys):
    """Return a copy of ``data`` with the given string keys sanitized."""
    if not isinstance(data, dict):
        return data
    sanitized = dict(data)
    for key in keys:
        if sanitized.get(key):
            sanitized[key] = sanitize_string(sanitized[key])
    return sanitized
