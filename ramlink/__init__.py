"""
Django Ramlink - partner (RAM / Muro Loco) storefront API.

Usage:
    from ramlink import IdentityResolver, CartService, FavoriteService
    from ramlink.context import StorefrontContext

    ctx = StorefrontContext.current()
    customer, created = IdentityResolver.resolve_or_create("ext-1", context=ctx, email="a@x.com")
    count = CartService.add_item(customer, product_id=42, quantity=2, context=ctx)
    favorited = FavoriteService.toggle(customer, product_id=42, context=ctx)

    # Token gate
    Gates.service_token_authenticity(request.headers.get("Authorization"), secret)
"""

_SERVICES = {"IdentityResolver", "CartService", "FavoriteService", "CatalogService"}


def __getattr__(name):
    if name in _SERVICES:
        from ramlink import services

        return getattr(services, name)
    if name == "Gates":
        from ramlink.gates import Gates

        return Gates
    if name == "GateError":
        from ramlink.gates import GateError

        return GateError
    if name == "RamlinkError":
        from ramlink.exceptions import RamlinkError

        return RamlinkError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "IdentityResolver",
    "CartService",
    "FavoriteService",
    "CatalogService",
    "Gates",
    "GateError",
    "RamlinkError",
]
__version__ = "0.1.0"
