"""Customer model.

Storefront customers. Partner (RAM) users are linked to a customer through
ExternalIdentity; a customer created by auto-provisioning gets a random
password it never uses, since the partner authenticates it server-side.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Customer(models.Model):
    """Registered storefront customer."""

    first_name = models.CharField(_("nombre"), max_length=100)
    last_name = models.CharField(_("apellido"), max_length=100, blank=True)
    email = models.EmailField(_("email"), null=True, blank=True, db_index=True)
    password = models.CharField(_("contraseña"), max_length=128)

    channel = models.ForeignKey(
        "ramlink.Channel",
        on_delete=models.PROTECT,
        related_name="customers",
        verbose_name=_("canal"),
    )
    group = models.ForeignKey(
        "ramlink.CustomerGroup",
        on_delete=models.PROTECT,
        related_name="customers",
        null=True,
        blank=True,
        verbose_name=_("grupo"),
    )

    is_verified = models.BooleanField(_("verificado"), default=False)
    is_active = models.BooleanField(_("activo"), default=True, db_index=True)

    created_at = models.DateTimeField(_("creado en"), auto_now_add=True)
    updated_at = models.DateTimeField(_("actualizado en"), auto_now=True)

    class Meta:
        verbose_name = _("cliente")
        verbose_name_plural = _("clientes")
        ordering = ["first_name", "last_name"]

    def __str__(self):
        return self.name

    @property
    def name(self) -> str:
        """Full name (first + last)."""
        return f"{self.first_name} {self.last_name}".strip()

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.lower().strip()
        else:
            self.email = None
        super().save(*args, **kwargs)
