"""Cart and CartItem models."""

from django.db import models
from django.db.models import Q, Sum
from django.utils.translation import gettext_lazy as _


class Cart(models.Model):
    """
    Shopping cart.

    Rules:
    - At most one active cart per (customer, channel)
    - One line per product: adding a product again merges quantities
    """

    customer = models.ForeignKey(
        "ramlink.Customer",
        on_delete=models.CASCADE,
        related_name="carts",
        verbose_name=_("cliente"),
    )
    channel = models.ForeignKey(
        "ramlink.Channel",
        on_delete=models.PROTECT,
        related_name="carts",
        verbose_name=_("canal"),
    )
    is_active = models.BooleanField(_("activo"), default=True)

    created_at = models.DateTimeField(_("creado en"), auto_now_add=True)
    updated_at = models.DateTimeField(_("actualizado en"), auto_now=True)

    class Meta:
        verbose_name = _("carrito")
        verbose_name_plural = _("carritos")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["customer", "channel"],
                condition=Q(is_active=True),
                name="ramlink_unique_active_cart",
            ),
        ]

    def __str__(self):
        state = "active" if self.is_active else "closed"
        return f"Cart #{self.pk} ({state})"

    @property
    def items_count(self) -> int:
        """Summed quantity across all lines."""
        return self.items.aggregate(total=Sum("quantity"))["total"] or 0


class CartItem(models.Model):
    """Cart line."""

    cart = models.ForeignKey(
        Cart,
        on_delete=models.CASCADE,
        related_name="items",
        verbose_name=_("carrito"),
    )
    product = models.ForeignKey(
        "ramlink.Product",
        on_delete=models.CASCADE,
        related_name="cart_items",
        verbose_name=_("producto"),
    )
    quantity = models.PositiveIntegerField(_("cantidad"), default=1)
    price = models.DecimalField(
        _("precio"),
        max_digits=12,
        decimal_places=2,
        help_text=_("Precio unitario al agregar"),
    )

    created_at = models.DateTimeField(_("creado en"), auto_now_add=True)
    updated_at = models.DateTimeField(_("actualizado en"), auto_now=True)

    class Meta:
        verbose_name = _("ítem del carrito")
        verbose_name_plural = _("ítems del carrito")
        constraints = [
            models.UniqueConstraint(
                fields=["cart", "product"],
                name="ramlink_unique_cart_product",
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product_id}"
