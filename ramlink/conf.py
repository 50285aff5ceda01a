"""
Ramlink configuration.

Usage in settings.py:
    RAMLINK = {
        "SERVICE_TOKEN": env("RAM_SERVICE_TOKEN"),
        "APP_URL": "http://shop:8000",
        "PUBLIC_URL": "https://tienda.example.com",
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class RamlinkSettings:
    """Ramlink configuration settings."""

    # Shared secret for the server-to-server API (empty = reject everything)
    SERVICE_TOKEN: str = ""

    # Internal base URL (what the app generates) and browser-facing base URL
    APP_URL: str = "http://localhost"
    PUBLIC_URL: str = ""

    # ExternalIdentity.provider for partner users
    PROVIDER: str = "ram"

    # Storefront
    CHANNEL_CODE: str = "default"
    DEFAULT_GROUP_CODE: str = ""
    FALLBACK_GROUP_CODE: str = "general"

    # Auto-provisioning
    DEFAULT_FIRST_NAME: str = "Usuario"
    DEFAULT_LAST_NAME: str = "RAM"
    CART_REQUIRES_EMAIL: bool = True
    WISHLIST_REQUIRES_EMAIL: bool = False

    # Product listing page size
    POPULAR_DEFAULT_LIMIT: int = 24
    POPULAR_MIN_LIMIT: int = 12
    POPULAR_MAX_LIMIT: int = 48


def get_ramlink_settings() -> RamlinkSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "RAMLINK", {})
    return RamlinkSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_ramlink_settings(), name)


ramlink_settings = _LazySettings()
