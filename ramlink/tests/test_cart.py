"""Tests for CartService."""

from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import IntegrityError, OperationalError, transaction

from ramlink.exceptions import RamlinkError
from ramlink.models import Cart, CartItem, Channel
from ramlink.services import CartService
from ramlink.signals import cart_item_added

pytestmark = pytest.mark.django_db


class TestAddItem:
    def test_first_add_creates_cart(self, context, customer, product):
        count = CartService.add_item(customer, product.pk, 3, context=context)

        assert count == 3
        cart = Cart.objects.get(customer=customer, is_active=True)
        assert cart.channel == context.channel
        assert cart.items.count() == 1

    def test_same_product_merges_quantities(self, context, customer, product):
        CartService.add_item(customer, product.pk, 3, context=context)
        count = CartService.add_item(customer, product.pk, 2, context=context)

        assert count == 5
        item = CartItem.objects.get(cart__customer=customer, product=product)
        assert item.quantity == 5

    def test_different_products_are_summed(self, context, customer, product, product_on_sale):
        CartService.add_item(customer, product.pk, 1, context=context)
        count = CartService.add_item(customer, product_on_sale.pk, 4, context=context)

        assert count == 5
        assert CartItem.objects.filter(cart__customer=customer).count() == 2

    def test_default_quantity_is_one(self, context, customer, product):
        assert CartService.add_item(customer, product.pk, context=context) == 1

    def test_price_snapshot_uses_minimal_price(self, context, customer, product_on_sale):
        CartService.add_item(customer, product_on_sale.pk, context=context)
        item = CartItem.objects.get(product=product_on_sale)
        assert item.price == Decimal("60.00")

    def test_reuses_existing_active_cart(self, context, customer, product):
        cart = Cart.objects.create(customer=customer, channel=context.channel)
        CartService.add_item(customer, product.pk, context=context)

        assert Cart.objects.filter(customer=customer).count() == 1
        assert cart.items.count() == 1

    def test_inactive_cart_is_not_reused(self, context, customer, product):
        old = Cart.objects.create(customer=customer, channel=context.channel, is_active=False)
        CartService.add_item(customer, product.pk, context=context)

        assert Cart.objects.filter(customer=customer, is_active=True).exclude(pk=old.pk).exists()
        assert old.items.count() == 0

    def test_inactive_product_creates_nothing(self, context, customer, product_inactive):
        with pytest.raises(RamlinkError) as exc_info:
            CartService.add_item(customer, product_inactive.pk, context=context)

        assert exc_info.value.code == "PRODUCT_UNAVAILABLE"
        assert not Cart.objects.exists()
        assert not CartItem.objects.exists()

    def test_missing_product(self, context, customer):
        with pytest.raises(RamlinkError) as exc_info:
            CartService.add_item(customer, 999999, context=context)
        assert exc_info.value.code == "PRODUCT_NOT_FOUND"

    def test_out_of_stock_fails_as_cart_operation(self, context, customer, product_out_of_stock):
        with pytest.raises(RamlinkError) as exc_info:
            CartService.add_item(customer, product_out_of_stock.pk, context=context)

        assert exc_info.value.code == "CART_OPERATION_FAILED"
        assert not Cart.objects.exists()

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_quantity_must_be_positive(self, context, customer, product, quantity):
        with pytest.raises(RamlinkError, match="VALIDATION_FAILED"):
            CartService.add_item(customer, product.pk, quantity, context=context)

    def test_database_error_surfaces_message(self, context, customer, product):
        with patch.object(
            CartItem.objects, "get_or_create", side_effect=OperationalError("disk I/O error")
        ):
            with pytest.raises(RamlinkError) as exc_info:
                CartService.add_item(customer, product.pk, context=context)

        assert exc_info.value.code == "CART_OPERATION_FAILED"
        assert exc_info.value.message == "disk I/O error"
        # The cart opened in the same transaction was rolled back
        assert not Cart.objects.exists()

    def test_unbindable_quantity_fails_as_cart_operation(self, context, customer, product):
        with patch.object(
            CartItem.objects,
            "get_or_create",
            side_effect=OverflowError("Python int too large to convert to SQLite INTEGER"),
        ):
            with pytest.raises(RamlinkError) as exc_info:
                CartService.add_item(customer, product.pk, 10**20, context=context)

        assert exc_info.value.code == "CART_OPERATION_FAILED"
        assert not CartItem.objects.exists()

    def test_emits_cart_item_added(self, context, customer, product):
        received = []

        def handler(sender, customer, cart, product, quantity, **kwargs):
            received.append((customer.pk, product.pk, quantity))

        cart_item_added.connect(handler)
        try:
            CartService.add_item(customer, product.pk, 2, context=context)
        finally:
            cart_item_added.disconnect(handler)

        assert received == [(customer.pk, product.pk, 2)]


class TestCount:
    def test_no_cart_returns_zero(self, context, customer):
        assert CartService.count(customer, context=context) == 0

    def test_no_customer_returns_zero(self, context):
        assert CartService.count(None, context=context) == 0

    def test_counts_active_cart_quantities(self, context, customer, product, product_on_sale):
        CartService.add_item(customer, product.pk, 3, context=context)
        CartService.add_item(customer, product_on_sale.pk, 2, context=context)
        assert CartService.count(customer, context=context) == 5

    def test_other_channel_is_ignored(self, context, customer, product):
        other = Channel.objects.create(code="outlet", name="Outlet")
        cart = Cart.objects.create(customer=customer, channel=other)
        CartItem.objects.create(cart=cart, product=product, quantity=7, price=product.price)

        assert CartService.count(customer, context=context) == 0


class TestActiveCart:
    def test_missing_without_create(self, context, customer):
        assert CartService.active_cart(customer, context=context) is None

    def test_one_active_cart_per_customer_and_channel(self, context, customer):
        Cart.objects.create(customer=customer, channel=context.channel)
        with pytest.raises(IntegrityError), transaction.atomic():
            Cart.objects.create(customer=customer, channel=context.channel)

    def test_concurrent_creation_returns_existing(self, context, customer):
        existing = Cart.objects.create(customer=customer, channel=context.channel)

        # First read misses (the other request had not committed yet)
        real_filter = Cart.objects.filter
        calls = {"n": 0}

        def flaky_filter(*args, **kwargs):
            calls["n"] += 1
            qs = real_filter(*args, **kwargs)
            return qs.none() if calls["n"] == 1 else qs

        with patch.object(Cart.objects, "filter", side_effect=flaky_filter):
            cart = CartService.active_cart(customer, context=context, create=True)

        assert cart == existing
        assert Cart.objects.filter(customer=customer).count() == 1
