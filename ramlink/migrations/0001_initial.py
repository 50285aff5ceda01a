# Initial schema for the partner API

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Channel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.SlugField(unique=True, verbose_name="código")),
                ("name", models.CharField(max_length=200, verbose_name="nombre")),
                ("currency_code", models.CharField(default="USD", max_length=3, verbose_name="moneda")),
                ("currency_symbol", models.CharField(default="$", max_length=5, verbose_name="símbolo")),
            ],
            options={
                "verbose_name": "canal",
                "verbose_name_plural": "canales",
                "ordering": ["code"],
            },
        ),
        migrations.CreateModel(
            name="CustomerGroup",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.SlugField(unique=True, verbose_name="código")),
                ("name", models.CharField(max_length=200, verbose_name="nombre")),
                (
                    "is_default",
                    models.BooleanField(
                        default=False,
                        help_text="Grupo por defecto para clientes nuevos",
                        verbose_name="por defecto",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="creado en")),
            ],
            options={
                "verbose_name": "grupo de clientes",
                "verbose_name_plural": "grupos de clientes",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="StorefrontSetting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=255, unique=True, verbose_name="código")),
                ("value", models.TextField(blank=True, verbose_name="valor")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="actualizado en")),
            ],
            options={
                "verbose_name": "configuración de tienda",
                "verbose_name_plural": "configuraciones de tienda",
                "db_table": "ramlink_storefront_setting",
                "ordering": ["code"],
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="nombre")),
                ("url_key", models.SlugField(max_length=255, unique=True, verbose_name="clave URL")),
                ("short_description", models.TextField(blank=True, verbose_name="descripción corta")),
                (
                    "description",
                    models.TextField(blank=True, help_text="Puede contener HTML", verbose_name="descripción"),
                ),
                ("price", models.DecimalField(decimal_places=2, max_digits=12, verbose_name="precio")),
                (
                    "special_price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=12, null=True, verbose_name="precio especial"
                    ),
                ),
                ("image", models.FileField(blank=True, upload_to="product/", verbose_name="imagen")),
                ("status", models.BooleanField(db_index=True, default=True, verbose_name="activo")),
                (
                    "visible_individually",
                    models.BooleanField(default=True, verbose_name="visible individualmente"),
                ),
                ("in_stock", models.BooleanField(default=True, verbose_name="en stock")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="creado en")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="actualizado en")),
                (
                    "channels",
                    models.ManyToManyField(
                        blank=True, related_name="products", to="ramlink.channel", verbose_name="canales"
                    ),
                ),
            ],
            options={
                "verbose_name": "producto",
                "verbose_name_plural": "productos",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Customer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("first_name", models.CharField(max_length=100, verbose_name="nombre")),
                ("last_name", models.CharField(blank=True, max_length=100, verbose_name="apellido")),
                (
                    "email",
                    models.EmailField(blank=True, db_index=True, max_length=254, null=True, verbose_name="email"),
                ),
                ("password", models.CharField(max_length=128, verbose_name="contraseña")),
                ("is_verified", models.BooleanField(default=False, verbose_name="verificado")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="activo")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="creado en")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="actualizado en")),
                (
                    "channel",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="customers",
                        to="ramlink.channel",
                        verbose_name="canal",
                    ),
                ),
                (
                    "group",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="customers",
                        to="ramlink.customergroup",
                        verbose_name="grupo",
                    ),
                ),
            ],
            options={
                "verbose_name": "cliente",
                "verbose_name_plural": "clientes",
                "ordering": ["first_name", "last_name"],
            },
        ),
        migrations.CreateModel(
            name="ExternalIdentity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "provider",
                    models.CharField(
                        choices=[
                            ("ram", "RAM (Muro Loco)"),
                            ("google", "Google"),
                            ("facebook", "Facebook"),
                            ("other", "Otro"),
                        ],
                        default="ram",
                        max_length=20,
                        verbose_name="proveedor",
                    ),
                ),
                (
                    "provider_uid",
                    models.CharField(
                        help_text="ID único en el proveedor (ej: ram_user_id)",
                        max_length=255,
                        verbose_name="ID en el proveedor",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="creado en")),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="external_identities",
                        to="ramlink.customer",
                        verbose_name="cliente",
                    ),
                ),
            ],
            options={
                "verbose_name": "identidad externa",
                "verbose_name_plural": "identidades externas",
                "db_table": "ramlink_external_identity",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Cart",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(default=True, verbose_name="activo")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="creado en")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="actualizado en")),
                (
                    "channel",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="carts",
                        to="ramlink.channel",
                        verbose_name="canal",
                    ),
                ),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="carts",
                        to="ramlink.customer",
                        verbose_name="cliente",
                    ),
                ),
            ],
            options={
                "verbose_name": "carrito",
                "verbose_name_plural": "carritos",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="CartItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("quantity", models.PositiveIntegerField(default=1, verbose_name="cantidad")),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Precio unitario al agregar",
                        max_digits=12,
                        verbose_name="precio",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="creado en")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="actualizado en")),
                (
                    "cart",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="ramlink.cart",
                        verbose_name="carrito",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cart_items",
                        to="ramlink.product",
                        verbose_name="producto",
                    ),
                ),
            ],
            options={
                "verbose_name": "ítem del carrito",
                "verbose_name_plural": "ítems del carrito",
            },
        ),
        migrations.CreateModel(
            name="Favorite",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="creado en")),
                (
                    "channel",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="favorites",
                        to="ramlink.channel",
                        verbose_name="canal",
                    ),
                ),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="favorites",
                        to="ramlink.customer",
                        verbose_name="cliente",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="favorites",
                        to="ramlink.product",
                        verbose_name="producto",
                    ),
                ),
            ],
            options={
                "verbose_name": "favorito",
                "verbose_name_plural": "favoritos",
                "ordering": ["created_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="externalidentity",
            constraint=models.UniqueConstraint(
                fields=("provider", "provider_uid"),
                name="ramlink_unique_external_identity",
            ),
        ),
        migrations.AddConstraint(
            model_name="cart",
            constraint=models.UniqueConstraint(
                condition=models.Q(is_active=True),
                fields=("customer", "channel"),
                name="ramlink_unique_active_cart",
            ),
        ),
        migrations.AddConstraint(
            model_name="cartitem",
            constraint=models.UniqueConstraint(
                fields=("cart", "product"),
                name="ramlink_unique_cart_product",
            ),
        ),
        migrations.AddConstraint(
            model_name="favorite",
            constraint=models.UniqueConstraint(
                fields=("channel", "customer", "product"),
                name="ramlink_unique_favorite",
            ),
        ),
    ]
