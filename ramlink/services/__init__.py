"""Ramlink services.

- identity: IdentityResolver (partner user id -> Customer, auto-provisioning)
- cart: CartService (stateless active cart, add/count)
- favorites: FavoriteService (wishlist toggle/list)
- catalog: CatalogService (popular products, product cards)
"""

from ramlink.services.identity import IdentityResolver
from ramlink.services.catalog import CatalogService
from ramlink.services.cart import CartService
from ramlink.services.favorites import FavoriteService

__all__ = ["IdentityResolver", "CatalogService", "CartService", "FavoriteService"]
