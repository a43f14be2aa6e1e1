#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/utils/html_utils.py
"""HTML escaping and URL safety helpers used by the HTML renderer."""

from __future__ import annotations

from html import escape as _html_escape
from urllib.parse import urlparse

from adoctree.constants import DANGEROUS_SCHEMES


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a scheme that can execute script.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True for ``javascript:``, ``vbscript:`` and script-bearing ``data:``
        URLs and for URLs urllib cannot parse; False for relative URLs and
        ordinary schemes

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("JavaScript:alert(1)")
    True

    """
    if not url or not url.strip():
        return False

    # Control characters and whitespace inside a scheme are ignored by browsers
    url_lower = "".join(ch for ch in url.lower().strip() if ch > " ")

    for dangerous_scheme in DANGEROUS_SCHEMES:
        if url_lower.startswith(dangerous_scheme):
            return True

    try:
        scheme = urlparse(url_lower).scheme
    except ValueError:
        # unparseable netloc such as an unbalanced "]"
        return True
    return scheme in ("javascript", "vbscript", "about")


def sanitize_url(url: str) -> str:
    """Return ``url`` unchanged, or ``"#"`` when it uses a dangerous scheme."""
    if is_url_scheme_dangerous(url):
        return "#"
    return url
