"""Request validation for the partner API."""

import re

from django import forms

from ramlink.models import Product

# Largest value every supported database accepts in a PositiveIntegerField
MAX_QUANTITY = 2147483647

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class UserLookupForm(forms.Form):
    """Read-only lookups only need the partner user id."""

    ram_user_id = forms.CharField(max_length=255)


class PartnerUserForm(UserLookupForm):
    """Identifies the partner user and carries optional provisioning data."""

    email = forms.EmailField(required=False)
    first_name = forms.CharField(max_length=100, required=False)
    last_name = forms.CharField(max_length=100, required=False)


class ProductRequestForm(PartnerUserForm):
    product_id = forms.IntegerField()

    def clean_product_id(self):
        product_id = self.cleaned_data["product_id"]
        if not Product.objects.filter(pk=product_id).exists():
            raise forms.ValidationError("El producto seleccionado no existe.", code="exists")
        return product_id


class CartAddForm(ProductRequestForm):
    quantity = forms.IntegerField(min_value=1, max_value=MAX_QUANTITY, required=False)

    def clean_quantity(self):
        return self.cleaned_data.get("quantity") or 1


class WishlistToggleForm(ProductRequestForm):
    pass


class PopularProductsForm(forms.Form):
    """
    Listing window.

    Values are read leniently (leading digits, anything else counts as 0)
    and clamped by the service, never rejected.
    """

    limit = forms.CharField(required=False)
    offset = forms.CharField(required=False)

    @staticmethod
    def _leading_int(value: str) -> int:
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0

    def clean_limit(self):
        value = self.cleaned_data["limit"]
        return self._leading_int(value) if value else None

    def clean_offset(self):
        return self._leading_int(self.cleaned_data["offset"])
