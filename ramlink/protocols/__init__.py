"""Ramlink protocols."""

from ramlink.protocols.catalog import (
    FavoriteCard,
    FavoriteList,
    PopularPage,
    ProductCard,
)

__all__ = [
    "FavoriteCard",
    "FavoriteList",
    "PopularPage",
    "ProductCard",
]
