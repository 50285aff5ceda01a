"""CustomerGroup model."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class CustomerGroup(models.Model):
    """Customer group assigned to new customers."""

    code = models.SlugField(_("código"), max_length=50, unique=True)
    name = models.CharField(_("nombre"), max_length=200)

    is_default = models.BooleanField(
        _("por defecto"),
        default=False,
        help_text=_("Grupo por defecto para clientes nuevos"),
    )

    created_at = models.DateTimeField(_("creado en"), auto_now_add=True)

    class Meta:
        verbose_name = _("grupo de clientes")
        verbose_name_plural = _("grupos de clientes")
        ordering = ["name"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if self.is_default:
            CustomerGroup.objects.filter(is_default=True).exclude(pk=self.pk).update(
                is_default=False
            )
        super().save(*args, **kwargs)
