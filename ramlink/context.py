"""
Storefront context.

Channel, default customer group and base URLs are resolved once per request
and handed to every service call, instead of each service reading settings
or looking up "the current channel" on its own.

Usage:
    ctx = StorefrontContext.current()
    CartService.add_item(customer, product_id, 2, context=ctx)
"""

from __future__ import annotations

from dataclasses import dataclass

from ramlink.conf import ramlink_settings
from ramlink.models import Channel, CustomerGroup


@dataclass(frozen=True)
class StorefrontContext:
    """Per-request storefront state."""

    channel: Channel
    customer_group: CustomerGroup
    app_url: str
    public_url: str
    provider: str = "ram"

    @classmethod
    def current(cls) -> StorefrontContext:
        """Build the context from RAMLINK settings."""
        app_url = ramlink_settings.APP_URL.rstrip("/")
        public_url = (ramlink_settings.PUBLIC_URL or app_url).rstrip("/")
        return cls(
            channel=cls._channel(ramlink_settings.CHANNEL_CODE),
            customer_group=cls._customer_group(),
            app_url=app_url,
            public_url=public_url,
            provider=ramlink_settings.PROVIDER,
        )

    @staticmethod
    def _channel(code: str) -> Channel:
        channel, _ = Channel.objects.get_or_create(code=code, defaults={"name": code.title()})
        return channel

    @staticmethod
    def _customer_group() -> CustomerGroup:
        """Configured group, else the default-flagged group, else the fallback group."""
        if ramlink_settings.DEFAULT_GROUP_CODE:
            group = CustomerGroup.objects.filter(code=ramlink_settings.DEFAULT_GROUP_CODE).first()
            if group:
                return group

        group = CustomerGroup.objects.filter(is_default=True).first()
        if group:
            return group

        fallback = ramlink_settings.FALLBACK_GROUP_CODE
        group, _ = CustomerGroup.objects.get_or_create(
            code=fallback, defaults={"name": fallback.title()}
        )
        return group
