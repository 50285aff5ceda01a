"""Catalog payloads returned to the partner."""

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class ProductCard:
    """Product as shown on partner product cards."""

    id: int
    name: str
    description: str
    price: float
    price_formatted: str
    image_url: str
    url: str
    is_saleable: bool
    on_sale: bool

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FavoriteCard:
    """Favorited product summary."""

    id: int
    name: str
    price: float
    price_formatted: str
    image_url: str
    url: str

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FavoriteList:
    """Customer favorites in a channel. ``products`` is None unless details were asked for."""

    product_ids: list[int] = field(default_factory=list)
    products: list[FavoriteCard] | None = None


@dataclass(frozen=True)
class PopularPage:
    """One page of the popular products listing."""

    products: list[ProductCard]
    total: int
    limit: int
    offset: int
    page_sizes: list[int] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "data": [p.as_dict() for p in self.products],
            "meta": {
                "total": self.total,
                "limit": self.limit,
                "offset": self.offset,
                "page_sizes": self.page_sizes,
            },
        }
