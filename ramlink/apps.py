from django.apps import AppConfig


class RamlinkConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "ramlink"
    verbose_name = "Ramlink - Partner API"
