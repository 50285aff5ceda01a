"""
StorefrontSetting model - persisted storefront configuration.

Keyed by dotted code, e.g. ``catalog.products.storefront.products_per_page``.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class StorefrontSetting(models.Model):
    """Key/value storefront configuration row."""

    PRODUCTS_PER_PAGE = "catalog.products.storefront.products_per_page"

    code = models.CharField(_("código"), max_length=255, unique=True)
    value = models.TextField(_("valor"), blank=True)

    updated_at = models.DateTimeField(_("actualizado en"), auto_now=True)

    class Meta:
        db_table = "ramlink_storefront_setting"
        verbose_name = _("configuración de tienda")
        verbose_name_plural = _("configuraciones de tienda")
        ordering = ["code"]

    def __str__(self):
        return f"{self.code}={self.value}"

    @classmethod
    def get_value(cls, code: str, default: str | None = None) -> str | None:
        """Stored value for ``code``, or ``default`` when absent."""
        value = cls.objects.filter(code=code).values_list("value", flat=True).first()
        return default if value is None else value
