"""Catalog service - read-only product listing for the partner."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.core.paginator import EmptyPage, Paginator

from ramlink.conf import ramlink_settings
from ramlink.models import Product, StorefrontSetting
from ramlink.protocols import PopularPage, ProductCard
from ramlink.utils import absolute_url, rewrite_public_url, summarize

if TYPE_CHECKING:
    from ramlink.context import StorefrontContext

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Service for product reads.

    Uses @classmethod for extensibility, like the other services.
    """

    @classmethod
    def clamp(cls, limit: int, offset: int) -> tuple[int, int]:
        """Clamp page size to [POPULAR_MIN_LIMIT, POPULAR_MAX_LIMIT] and offset to >= 0."""
        limit = min(
            max(limit, ramlink_settings.POPULAR_MIN_LIMIT),
            ramlink_settings.POPULAR_MAX_LIMIT,
        )
        return limit, max(offset, 0)

    @classmethod
    def popular(
        cls,
        *,
        context: StorefrontContext,
        limit: int | None = None,
        offset: int = 0,
    ) -> PopularPage:
        """
        Newest active, individually visible products of the channel.

        The offset is converted to a page number (``offset // limit + 1``),
        so it is honored in multiples of ``limit``.

        Args:
            context: Current storefront context
            limit: Page size (clamped)
            offset: Item offset (clamped to >= 0)

        Returns:
            PopularPage with product cards and listing meta
        """
        if limit is None:
            limit = ramlink_settings.POPULAR_DEFAULT_LIMIT
        limit, offset = cls.clamp(limit, offset)

        qs = (
            Product.objects.filter(
                channels=context.channel,
                status=True,
                visible_individually=True,
            )
            .order_by("-created_at", "-pk")
            .distinct()
        )
        paginator = Paginator(qs, limit)

        try:
            products = list(paginator.page(offset // limit + 1).object_list)
        except EmptyPage:
            products = []

        return PopularPage(
            products=[cls.product_card(p, context=context) for p in products],
            total=paginator.count,
            limit=limit,
            offset=offset,
            page_sizes=cls.page_size_choices(),
        )

    @classmethod
    def product_card(cls, product: Product, *, context: StorefrontContext) -> ProductCard:
        """Shape a product for partner product cards."""
        price = product.minimal_price
        return ProductCard(
            id=product.pk,
            name=product.name,
            description=summarize(product.short_description, product.description),
            price=float(price),
            price_formatted=context.channel.format_price(price),
            image_url=cls.image_url(product, context=context),
            url=cls.product_url(product, context=context),
            is_saleable=product.is_saleable,
            on_sale=product.on_sale,
        )

    @classmethod
    def image_url(cls, product: Product, *, context: StorefrontContext) -> str:
        """Public URL of the product image ("" when there is none)."""
        if not product.image:
            return ""
        internal = absolute_url(context.app_url, product.image.url)
        return rewrite_public_url(context.app_url, context.public_url, internal)

    @classmethod
    def product_url(cls, product: Product, *, context: StorefrontContext) -> str:
        """Public storefront URL of the product page."""
        internal = absolute_url(context.app_url, product.url_key)
        return rewrite_public_url(context.app_url, context.public_url, internal)

    @classmethod
    def page_size_choices(cls) -> list[int]:
        """Storefront page-size choices (``products_per_page`` setting)."""
        raw = StorefrontSetting.get_value(StorefrontSetting.PRODUCTS_PER_PAGE, "")
        choices = []
        for part in raw.split(","):
            part = part.strip()
            if part.isdigit():
                choices.append(int(part))
            elif part:
                logger.warning("Ignoring invalid products_per_page entry %r", part)
        return choices
