"""Cart service - stateless cart access for partner users.

There is no session: the cart is found from the resolved customer and the
current channel on every call. All writes that touch >1 record use
transaction.atomic().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import F

from ramlink.exceptions import RamlinkError
from ramlink.models import Cart, CartItem, Customer, Product
from ramlink.signals import cart_item_added

if TYPE_CHECKING:
    from ramlink.context import StorefrontContext

logger = logging.getLogger(__name__)


class CartService:
    """
    Service for cart operations.

    Uses @classmethod for extensibility, like the other services.
    """

    @classmethod
    def add_item(
        cls,
        customer: Customer,
        product_id: int,
        quantity: int = 1,
        *,
        context: StorefrontContext,
    ) -> int:
        """
        Add a product to the customer's active cart.

        Adding a product already in the cart merges into its line.

        Args:
            customer: Resolved customer
            product_id: Product primary key
            quantity: Units to add (>= 1)
            context: Current storefront context

        Returns:
            Total item quantity of the active cart after the add

        Raises:
            RamlinkError: VALIDATION_FAILED, PRODUCT_NOT_FOUND,
                PRODUCT_UNAVAILABLE or CART_OPERATION_FAILED
        """
        if quantity < 1:
            raise RamlinkError(
                "VALIDATION_FAILED", message="Quantity must be at least 1", quantity=quantity
            )

        product = cls._get_product(product_id)

        if not product.in_stock:
            raise RamlinkError(
                "CART_OPERATION_FAILED",
                message="Producto sin stock",
                product_id=product.pk,
            )

        try:
            with transaction.atomic():
                cart = cls.active_cart(customer, context=context, create=True)
                item, created = CartItem.objects.get_or_create(
                    cart=cart,
                    product=product,
                    defaults={"quantity": quantity, "price": product.minimal_price},
                )
                if not created:
                    CartItem.objects.filter(pk=item.pk).update(
                        quantity=F("quantity") + quantity
                    )
                cart.save(update_fields=["updated_at"])
        except (DatabaseError, OverflowError) as exc:
            # OverflowError: the driver could not bind the quantity (SQLite)
            logger.warning("Cart add failed for customer %s: %s", customer.pk, exc)
            raise RamlinkError(
                "CART_OPERATION_FAILED", message=str(exc), product_id=product.pk
            ) from exc

        cart_item_added.send(
            sender=Cart, customer=customer, cart=cart, product=product, quantity=quantity
        )
        return cart.items_count

    @classmethod
    def count(cls, customer: Customer | None, *, context: StorefrontContext) -> int:
        """Summed quantity of the customer's active cart (0 if none)."""
        if customer is None:
            return 0
        cart = cls.active_cart(customer, context=context)
        return cart.items_count if cart else 0

    @classmethod
    def active_cart(
        cls,
        customer: Customer,
        *,
        context: StorefrontContext,
        create: bool = False,
    ) -> Cart | None:
        """
        Get the customer's active cart in the current channel.

        Args:
            customer: Cart owner
            context: Current storefront context
            create: Create the cart when missing

        Returns:
            Cart, or None when missing and create is False
        """
        cart = Cart.objects.filter(
            customer=customer, channel=context.channel, is_active=True
        ).first()
        if cart or not create:
            return cart

        try:
            with transaction.atomic():
                return Cart.objects.create(customer=customer, channel=context.channel)
        except IntegrityError:
            # Another request opened the cart between our read and insert
            cart = Cart.objects.filter(
                customer=customer, channel=context.channel, is_active=True
            ).first()
            if cart is None:
                raise
            return cart

    @classmethod
    def _get_product(cls, product_id: int) -> Product:
        """Fetch a product that can be added (exists and is active)."""
        try:
            product = Product.objects.get(pk=product_id)
        except Product.DoesNotExist:
            raise RamlinkError("PRODUCT_NOT_FOUND", product_id=product_id) from None
        if not product.status:
            raise RamlinkError("PRODUCT_UNAVAILABLE", product_id=product_id)
        return product
