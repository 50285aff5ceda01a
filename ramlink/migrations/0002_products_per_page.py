# Widen the storefront page-size choices so the partner listing can fetch
# more than a handful of products per request.

from django.db import migrations

PRODUCTS_PER_PAGE = "catalog.products.storefront.products_per_page"


def widen_page_sizes(apps, schema_editor):
    StorefrontSetting = apps.get_model("ramlink", "StorefrontSetting")
    StorefrontSetting.objects.update_or_create(
        code=PRODUCTS_PER_PAGE, defaults={"value": "12,24,36,48"}
    )


def restore_page_sizes(apps, schema_editor):
    StorefrontSetting = apps.get_model("ramlink", "StorefrontSetting")
    StorefrontSetting.objects.filter(code=PRODUCTS_PER_PAGE).update(value="12")


class Migration(migrations.Migration):

    dependencies = [
        ("ramlink", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(widen_page_sizes, restore_page_sizes),
    ]
