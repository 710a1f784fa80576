"""Link and redirect helpers: back-link validation, source URLs, theme and sort."""

from __future__ import annotations

from urllib.parse import quote_plus, unquote, urlsplit

MAX_FROM_LEN = 2048

SORT_ASC = "date_asc"
SORT_DESC = "date_desc"
_VALID_SORTS = (SORT_ASC, SORT_DESC)

THEME_DARK = "dark"
THEME_LIGHT = "light"


def validate_from(s: str) -> str:
    """Return ``s`` if it is a safe same-origin path for a back link, else "".

    The value is expected to be decoded already and is not decoded again.
    Rejected: empty strings, strings longer than 2048 characters, anything not
    starting with "/", protocol-relative "//" prefixes and any "..".
    """
    if not s:
        return ""
    if len(s) > MAX_FROM_LEN:
        return ""
    if not s.startswith("/"):
        return ""
    if s.startswith("//"):
        return ""
    if ".." in s:
        return ""
    return s


def _query_escape(value: str) -> str:
    return quote_plus(value, safe="")


def build_source_url(
    project: str,
    typ: str,
    q: str,
    sort: str,
    sort_explicit: bool,
    topic_key_prefix: str,
) -> str:
    """Build the unescaped URL of a project view for use in a ?from= value.

    Parameters appear in the order type, q, sort, topic_key_prefix; empty ones
    are left out, and sort is only included when it was set explicitly.
    """
    base = "/p/" + project
    params = [
        ("type", typ),
        ("q", q),
        ("sort", sort if sort_explicit else ""),
        ("topic_key_prefix", topic_key_prefix),
    ]
    parts = [f"{name}={_query_escape(value)}" for name, value in params if value]
    if not parts:
        return base
    return base + "?" + "&".join(parts)


def safe_referer(referer: str | None, host: str) -> str:
    """Reduce a Referer header to a same-origin path and query.

    Returns "/" when the header is missing, unparseable or names another host.
    """
    if not referer:
        return "/"
    try:
        parts = urlsplit(referer)
    except ValueError:
        return "/"
    referer_host = parts.netloc.rpartition("@")[2]
    if referer_host != host:
        return "/"
    target = unquote(parts.path) or "/"
    if parts.query:
        target += "?" + parts.query
    return target


def next_theme(current: str) -> str:
    """Return the theme that a toggle switches to from ``current``."""
    return THEME_DARK if current == THEME_LIGHT else THEME_LIGHT


def normalize_sort(value: str | None) -> str:
    """Return a recognised sort direction, defaulting to newest first."""
    return value if value in _VALID_SORTS else SORT_DESC