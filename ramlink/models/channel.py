"""Channel model."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Channel(models.Model):
    """Storefront channel. Carts and favorites are scoped to one."""

    code = models.SlugField(_("código"), max_length=50, unique=True)
    name = models.CharField(_("nombre"), max_length=200)
    currency_code = models.CharField(_("moneda"), max_length=3, default="USD")
    currency_symbol = models.CharField(_("símbolo"), max_length=5, default="$")

    class Meta:
        verbose_name = _("canal")
        verbose_name_plural = _("canales")
        ordering = ["code"]

    def __str__(self):
        return self.name

    def format_price(self, amount) -> str:
        """Render an amount with the channel currency, e.g. ``$1,250.00``."""
        return f"{self.currency_symbol}{amount:,.2f}"
