"""
ExternalIdentity model - Link to external providers.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ExternalIdentity(models.Model):
    """
    Customer link to an external provider account.

    Rules:
    - (provider, provider_uid) is globally unique: one customer per external id
    - Created on first resolution/provisioning, never deleted by the API
    """

    class Provider(models.TextChoices):
        RAM = "ram", "RAM (Muro Loco)"
        GOOGLE = "google", "Google"
        FACEBOOK = "facebook", "Facebook"
        OTHER = "other", _("Otro")

    customer = models.ForeignKey(
        "ramlink.Customer",
        on_delete=models.CASCADE,
        related_name="external_identities",
        verbose_name=_("cliente"),
    )

    provider = models.CharField(
        _("proveedor"),
        max_length=20,
        choices=Provider.choices,
        default=Provider.RAM,
    )
    provider_uid = models.CharField(
        _("ID en el proveedor"),
        max_length=255,
        help_text=_("ID único en el proveedor (ej: ram_user_id)"),
    )

    created_at = models.DateTimeField(_("creado en"), auto_now_add=True)

    class Meta:
        db_table = "ramlink_external_identity"
        verbose_name = _("identidad externa")
        verbose_name_plural = _("identidades externas")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["provider", "provider_uid"],
                name="ramlink_unique_external_identity",
            ),
        ]

    def __str__(self):
        uid_short = (
            self.provider_uid[:20] + "..." if len(self.provider_uid) > 20 else self.provider_uid
        )
        return f"{self.provider}: {uid_short}"
