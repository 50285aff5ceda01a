"""Pytest fixtures for Ramlink tests."""

from decimal import Decimal

import pytest

from ramlink.context import StorefrontContext
from ramlink.models import (
    Channel,
    Customer,
    CustomerGroup,
    ExternalIdentity,
    Product,
)

SERVICE_TOKEN = "test-service-token-12345"


@pytest.fixture
def channel(db):
    """Create the default storefront channel."""
    return Channel.objects.create(
        code="default",
        name="Tienda",
        currency_code="PEN",
        currency_symbol="S/",
    )


@pytest.fixture
def group_general(db):
    """Create the default customer group."""
    return CustomerGroup.objects.create(code="general", name="General", is_default=True)


@pytest.fixture
def context(channel, group_general):
    """Storefront context for the default channel."""
    return StorefrontContext.current()


def make_product(channel, url_key, **fields):
    defaults = {
        "name": url_key.replace("-", " ").title(),
        "price": Decimal("50.00"),
    }
    defaults.update(fields)
    product = Product.objects.create(url_key=url_key, **defaults)
    product.channels.add(channel)
    return product


@pytest.fixture
def product(channel):
    """Active, in-stock product with an image."""
    return make_product(
        channel,
        "taza-loca",
        name="Taza Loca",
        short_description="Taza de cerámica",
        price=Decimal("45.00"),
        image="product/taza.jpg",
    )


@pytest.fixture
def product_on_sale(channel):
    return make_product(
        channel,
        "polo-ram",
        name="Polo RAM",
        description="<p>Polo de <b>algodón</b> peruano</p>",
        price=Decimal("80.00"),
        special_price=Decimal("60.00"),
    )


@pytest.fixture
def product_inactive(channel):
    return make_product(channel, "gorra-vieja", status=False)


@pytest.fixture
def product_out_of_stock(channel):
    return make_product(channel, "llavero-agotado", in_stock=False)


@pytest.fixture
def customer(channel, group_general):
    """Customer already linked to partner user ``ext-known``."""
    cust = Customer.objects.create(
        first_name="Ana",
        last_name="Quispe",
        email="ana@example.com",
        password="!",
        channel=channel,
        group=group_general,
        is_verified=True,
    )
    ExternalIdentity.objects.create(customer=cust, provider="ram", provider_uid="ext-known")
    return cust


@pytest.fixture
def auth_headers():
    """Client kwargs carrying a valid service token."""
    return {"HTTP_AUTHORIZATION": f"Bearer {SERVICE_TOKEN}"}
