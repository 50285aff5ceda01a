"""Ramlink helpers."""

from django.utils.html import strip_tags
from django.utils.text import Truncator

TRUTHY = {"1", "true", "yes", "on"}


def rewrite_public_url(internal_base: str, public_base: str, url: str) -> str:
    """
    Swap the internal base URL of ``url`` for the public one.

    Generated links carry the host the app was reached on (an internal
    service name behind the proxy); browsers need the public host.
    URLs that do not start with the internal base are returned unchanged.

    >>> rewrite_public_url("http://shop:8000", "https://tienda.com", "http://shop:8000/p/1")
    'https://tienda.com/p/1'
    """
    if not url:
        return ""

    internal = internal_base.rstrip("/")
    public = public_base.rstrip("/")
    if not internal or internal == public or not url.startswith(internal):
        return url

    rest = url[len(internal):]
    if rest and not rest.startswith(("/", "?", "#")):
        # "http://shop:8000" must not match "http://shop:80001/..."
        return url
    return public + rest


def absolute_url(base: str, path: str) -> str:
    """Join a base URL and a path; absolute ``path`` values pass through."""
    if not path:
        return ""
    if path.startswith(("http://", "https://")):
        return path
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def summarize(short_description: str, description: str, length: int = 100) -> str:
    """Short description, or the HTML-stripped long description cut to ``length`` chars."""
    if short_description:
        return short_description
    return Truncator(strip_tags(description or "")).chars(length, truncate="")


def is_truthy(value) -> bool:
    """Interpret a query-string flag (``1``, ``true``, ``yes``, ``on``)."""
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY
