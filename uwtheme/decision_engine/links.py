"""First-link extraction and URL sanitizing for post content."""

from __future__ import annotations

import html
import re
from typing import Optional

_ANCHOR_HREF_RE = re.compile(r"""<a\s[^>]*?href=['"](.+?)['"]""", re.IGNORECASE | re.DOTALL)
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")
_UNSAFE_CHARS_RE = re.compile(r"[^a-zA-Z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\U0010ffff]")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")

ALLOWED_PROTOCOLS = frozenset({
    "http", "https", "ftp", "ftps", "mailto", "news", "irc", "gopher",
    "nntp", "feed", "telnet", "mms", "rtsp", "svn", "tel", "fax", "xmpp",
    "webcal", "urn",
})


def sanitize_url(url: str) -> str:
    """Clean a URL for storage or redirects.

    Returns an empty string when the URL uses a protocol outside
    ALLOWED_PROTOCOLS. Relative URLs are kept as-is.
    """
    url = _CONTROL_CHARS_RE.sub("", url.strip())
    url = url.replace(" ", "%20")
    url = _UNSAFE_CHARS_RE.sub("", url)
    if not url:
        return ""

    match = _SCHEME_RE.match(url)
    if match and match.group(1).lower() not in ALLOWED_PROTOCOLS:
        return ""
    return url


def extract_first_link(content: str) -> Optional[str]:
    """Return the href of the first anchor tag in content, or None."""
    match = _ANCHOR_HREF_RE.search(content or "")
    if match is None:
        return None
    return sanitize_url(html.unescape(match.group(1)))
