from __future__ import annotations


def preview_token(token: str | None, visible: int = 8) -> str:
    """Return a log-safe preview of a token.

    Only the first ``visible`` characters are kept; short tokens are fully masked
    so that nothing identifying ends up in log output.

    Example:
        >>> preview_token("vulncheck_1234567890abcdef")
        'vulnchec...'
        >>> preview_token("abc")
        '***'
    """
    if not token:
        return "<missing>"
    if len(token) > visible:
        return f"{token[:visible]}..."
    return "***"
