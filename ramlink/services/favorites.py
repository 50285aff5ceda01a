"""Favorite service - wishlist membership toggle and listing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.db import IntegrityError, transaction

from ramlink.exceptions import RamlinkError
from ramlink.models import Customer, Favorite, Product
from ramlink.protocols import FavoriteCard, FavoriteList
from ramlink.services.catalog import CatalogService
from ramlink.signals import favorite_toggled

if TYPE_CHECKING:
    from ramlink.context import StorefrontContext

logger = logging.getLogger(__name__)


class FavoriteService:
    """
    Service for wishlist operations.

    Uses @classmethod for extensibility, like the other services.
    """

    @classmethod
    def toggle(
        cls,
        customer: Customer,
        product_id: int,
        *,
        context: StorefrontContext,
    ) -> bool:
        """
        Flip the favorite state of a product.

        Two consecutive calls return opposite values.

        Args:
            customer: Resolved customer
            product_id: Product primary key
            context: Current storefront context

        Returns:
            True if the product is now favorited, False if it was removed

        Raises:
            RamlinkError: PRODUCT_NOT_FOUND or PRODUCT_UNAVAILABLE
        """
        try:
            product = Product.objects.get(pk=product_id)
        except Product.DoesNotExist:
            raise RamlinkError("PRODUCT_NOT_FOUND", product_id=product_id) from None
        if not product.status:
            raise RamlinkError("PRODUCT_UNAVAILABLE", product_id=product_id)

        lookup = {"channel": context.channel, "customer": customer, "product": product}

        deleted, _ = Favorite.objects.filter(**lookup).delete()
        if deleted:
            favorited = False
        else:
            try:
                with transaction.atomic():
                    Favorite.objects.create(**lookup)
            except IntegrityError:
                # Created concurrently; the end state is the same
                logger.debug("Favorite already present for customer %s", customer.pk)
            favorited = True

        favorite_toggled.send(
            sender=Favorite, customer=customer, product=product, favorited=favorited
        )
        return favorited

    @classmethod
    def list(
        cls,
        customer: Customer | None,
        *,
        context: StorefrontContext,
        with_details: bool = False,
    ) -> FavoriteList:
        """
        Favorites of a customer in the current channel.

        ``product_ids`` lists every stored favorite. With details, products
        that are inactive are skipped from ``products``.
        """
        if customer is None:
            return FavoriteList(product_ids=[], products=[] if with_details else None)

        favorites = list(
            Favorite.objects.filter(channel=context.channel, customer=customer).select_related(
                "product"
            )
        )
        product_ids = [f.product_id for f in favorites]

        if not with_details:
            return FavoriteList(product_ids=product_ids)

        products = []
        for favorite in favorites:
            product = favorite.product
            if not product.status:
                continue
            price = product.minimal_price
            products.append(
                FavoriteCard(
                    id=product.pk,
                    name=product.name,
                    price=float(price),
                    price_formatted=context.channel.format_price(price),
                    image_url=CatalogService.image_url(product, context=context),
                    url=CatalogService.product_url(product, context=context),
                )
            )
        return FavoriteList(product_ids=product_ids, products=products)
