"""Ramlink admin."""

from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from ramlink.models import (
    Cart,
    CartItem,
    Channel,
    Customer,
    CustomerGroup,
    ExternalIdentity,
    Favorite,
    Product,
    StorefrontSetting,
)


# ===========================================
# Channel / CustomerGroup / StorefrontSetting Admin
# ===========================================


@admin.register(Channel)
class ChannelAdmin(admin.ModelAdmin):
    list_display = ["code", "name", "currency_code"]
    search_fields = ["code", "name"]


@admin.register(CustomerGroup)
class CustomerGroupAdmin(admin.ModelAdmin):
    list_display = ["code", "name", "is_default", "customer_count"]
    list_filter = ["is_default"]
    search_fields = ["code", "name"]

    def customer_count(self, obj):
        return obj.customers.count()

    customer_count.short_description = "Customers"


@admin.register(StorefrontSetting)
class StorefrontSettingAdmin(admin.ModelAdmin):
    list_display = ["code", "value", "updated_at"]
    search_fields = ["code"]


# ===========================================
# Customer Admin
# ===========================================


class ExternalIdentityInline(admin.TabularInline):
    model = ExternalIdentity
    extra = 0
    fields = ["provider", "provider_uid", "created_at"]
    readonly_fields = ["provider_uid", "created_at"]


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "channel", "group", "is_verified", "is_active"]
    list_filter = ["channel", "group", "is_verified", "is_active"]
    search_fields = ["first_name", "last_name", "email", "external_identities__provider_uid"]
    readonly_fields = ["password", "created_at", "updated_at"]
    inlines = [ExternalIdentityInline]

    fieldsets = [
        ("Identification", {"fields": ["first_name", "last_name", "email"]}),
        ("Storefront", {"fields": ["channel", "group"]}),
        (
            "System",
            {
                "fields": ["is_verified", "is_active", "password", "created_at", "updated_at"],
                "classes": ["collapse"],
            },
        ),
    ]


# ===========================================
# ExternalIdentity Admin
# ===========================================


@admin.register(ExternalIdentity)
class ExternalIdentityAdmin(admin.ModelAdmin):
    list_display = ["provider", "provider_uid_short", "customer_link", "created_at"]
    list_filter = ["provider"]
    search_fields = ["provider_uid", "customer__first_name", "customer__email"]
    raw_id_fields = ["customer"]
    readonly_fields = ["created_at"]

    def provider_uid_short(self, obj):
        if len(obj.provider_uid) > 20:
            return obj.provider_uid[:20] + "..."
        return obj.provider_uid

    provider_uid_short.short_description = "Provider UID"

    def customer_link(self, obj):
        url = reverse("admin:ramlink_customer_change", args=[obj.customer.pk])
        return format_html('<a href="{}">{}</a>', url, obj.customer.name)

    customer_link.short_description = "Customer"


# ===========================================
# Catalog / Cart / Favorite Admin
# ===========================================


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ["name", "url_key", "price", "special_price", "status", "in_stock"]
    list_filter = ["status", "in_stock", "visible_individually", "channels"]
    search_fields = ["name", "url_key"]
    filter_horizontal = ["channels"]


class CartItemInline(admin.TabularInline):
    model = CartItem
    extra = 0
    fields = ["product", "quantity", "price"]
    raw_id_fields = ["product"]


@admin.register(Cart)
class CartAdmin(admin.ModelAdmin):
    list_display = ["id", "customer", "channel", "is_active", "items_count", "updated_at"]
    list_filter = ["is_active", "channel"]
    search_fields = ["customer__first_name", "customer__email"]
    raw_id_fields = ["customer"]
    inlines = [CartItemInline]

    def items_count(self, obj):
        return obj.items_count

    items_count.short_description = "Items"


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ["customer", "product", "channel", "created_at"]
    list_filter = ["channel"]
    raw_id_fields = ["customer", "product"]
