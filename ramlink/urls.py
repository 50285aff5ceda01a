"""
Partner API routes.

Mount under the ``api/ram/`` prefix:
    path("api/ram/", include("ramlink.urls")),
"""

from django.urls import path

from .views import (
    CartAddView,
    CartCountView,
    PopularProductsView,
    WishlistToggleView,
    WishlistView,
)

app_name = "ramlink"

urlpatterns = [
    path("products/popular", PopularProductsView.as_view(), name="products-popular"),
    path("cart/add", CartAddView.as_view(), name="cart-add"),
    path("cart/count", CartCountView.as_view(), name="cart-count"),
    path("wishlist/toggle", WishlistToggleView.as_view(), name="wishlist-toggle"),
    path("wishlist", WishlistView.as_view(), name="wishlist"),
]
