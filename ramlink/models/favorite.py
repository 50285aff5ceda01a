"""Favorite (wishlist) model."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Favorite(models.Model):
    """
    Wishlist membership.

    Presence of a row means the product is favorited; toggling deletes or
    creates it. (channel, customer, product) is unique.
    """

    channel = models.ForeignKey(
        "ramlink.Channel",
        on_delete=models.CASCADE,
        related_name="favorites",
        verbose_name=_("canal"),
    )
    customer = models.ForeignKey(
        "ramlink.Customer",
        on_delete=models.CASCADE,
        related_name="favorites",
        verbose_name=_("cliente"),
    )
    product = models.ForeignKey(
        "ramlink.Product",
        on_delete=models.CASCADE,
        related_name="favorites",
        verbose_name=_("producto"),
    )

    created_at = models.DateTimeField(_("creado en"), auto_now_add=True)

    class Meta:
        verbose_name = _("favorito")
        verbose_name_plural = _("favoritos")
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["channel", "customer", "product"],
                name="ramlink_unique_favorite",
            ),
        ]

    def __str__(self):
        return f"{self.customer_id} -> {self.product_id}"
