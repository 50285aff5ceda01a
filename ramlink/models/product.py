"""Product model (read-only for the partner API)."""

from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _


class Product(models.Model):
    """Catalog product."""

    name = models.CharField(_("nombre"), max_length=255)
    url_key = models.SlugField(_("clave URL"), max_length=255, unique=True)
    short_description = models.TextField(_("descripción corta"), blank=True)
    description = models.TextField(
        _("descripción"),
        blank=True,
        help_text=_("Puede contener HTML"),
    )

    price = models.DecimalField(_("precio"), max_digits=12, decimal_places=2)
    special_price = models.DecimalField(
        _("precio especial"),
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
    )

    image = models.FileField(_("imagen"), upload_to="product/", blank=True)

    status = models.BooleanField(_("activo"), default=True, db_index=True)
    visible_individually = models.BooleanField(_("visible individualmente"), default=True)
    in_stock = models.BooleanField(_("en stock"), default=True)

    channels = models.ManyToManyField(
        "ramlink.Channel",
        related_name="products",
        blank=True,
        verbose_name=_("canales"),
    )

    created_at = models.DateTimeField(_("creado en"), auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(_("actualizado en"), auto_now=True)

    class Meta:
        verbose_name = _("producto")
        verbose_name_plural = _("productos")
        ordering = ["-created_at"]

    def __str__(self):
        return self.name

    @property
    def minimal_price(self) -> Decimal:
        """Lowest applicable price (special price when it undercuts the base price)."""
        if self.special_price is not None and self.special_price < self.price:
            return self.special_price
        return self.price

    @property
    def on_sale(self) -> bool:
        return self.minimal_price < self.price

    @property
    def is_saleable(self) -> bool:
        return self.status and self.in_stock
