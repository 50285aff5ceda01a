"""Ramlink models.

Customer-side models (Customer, CustomerGroup, ExternalIdentity) hold the
partner identity mapping. Storefront models (Channel, Product, Cart,
Favorite, StorefrontSetting) are the collaborators the partner API reads
and writes.
"""

from ramlink.models.channel import Channel
from ramlink.models.group import CustomerGroup
from ramlink.models.customer import Customer
from ramlink.models.external_identity import ExternalIdentity
from ramlink.models.product import Product
from ramlink.models.cart import Cart, CartItem
from ramlink.models.favorite import Favorite
from ramlink.models.storefront_setting import StorefrontSetting

__all__ = [
    # Customers
    "Channel",
    "CustomerGroup",
    "Customer",
    "ExternalIdentity",
    # Catalog
    "Product",
    # Sessions
    "Cart",
    "CartItem",
    "Favorite",
    # Configuration
    "StorefrontSetting",
]
