"""
Partner (RAM / Muro Loco) server-to-server endpoints.

Flow for every request:
    1. Validates the service token (G1) - 401 and nothing else runs
    2. Validates the payload - 400
    3. Resolves the partner user to a Customer (auto-provisioning on writes)
    4. Runs the cart / wishlist / catalog operation
"""

from __future__ import annotations

import json
import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from ramlink.conf import ramlink_settings
from ramlink.context import StorefrontContext
from ramlink.exceptions import RamlinkError
from ramlink.forms import CartAddForm, PopularProductsForm, UserLookupForm, WishlistToggleForm
from ramlink.gates import GateError, Gates
from ramlink.services import CartService, CatalogService, FavoriteService, IdentityResolver
from ramlink.utils import is_truthy

logger = logging.getLogger("ramlink.api")


def error_response(message: str, status: int = 400, **extra) -> JsonResponse:
    return JsonResponse({"success": False, "message": str(message), **extra}, status=status)


@method_decorator(csrf_exempt, name="dispatch")
class PartnerAPIView(View):
    """
    Base view: bearer-token authentication, JSON parsing, error mapping.

    Stateless: no session, no cookies, no CSRF.

    Settings:
        RAMLINK["SERVICE_TOKEN"]: shared secret expected as Bearer token.
    """

    http_method_names = ["get", "post"]

    def dispatch(self, request, *args, **kwargs):
        # G1: Authenticity
        try:
            Gates.service_token_authenticity(
                request.headers.get("Authorization", ""),
                ramlink_settings.SERVICE_TOKEN,
            )
        except GateError as exc:
            logger.warning("RAM API: G1 failed for %s: %s", request.path, exc.message)
            return error_response(
                RamlinkError("UNAUTHORIZED").message, status=401
            )

        try:
            return super().dispatch(request, *args, **kwargs)
        except RamlinkError as exc:
            logger.info("RAM API: %s on %s", exc.code, request.path)
            return error_response(exc.message, status=exc.status_code)
        except Exception:
            logger.exception("RAM API: %s failed", request.path)
            return error_response("Internal error", status=500)

    def payload(self, request) -> dict:
        """Request body as a dict (JSON or form-encoded)."""
        if request.content_type == "application/json":
            try:
                data = json.loads(request.body or b"{}")
            except (json.JSONDecodeError, ValueError):
                raise RamlinkError("VALIDATION_FAILED", message="Invalid JSON") from None
            if not isinstance(data, dict):
                raise RamlinkError("VALIDATION_FAILED", message="Invalid JSON")
            return data
        return request.POST

    def lookup_user_id(self, request) -> str:
        """``ram_user_id`` of a read-only lookup. Other query parameters are ignored."""
        form = UserLookupForm(request.GET)
        if not form.is_valid():
            raise RamlinkError("VALIDATION_FAILED", message="ram_user_id requerido")
        return form.cleaned_data["ram_user_id"]

    @staticmethod
    def invalid(form) -> JsonResponse:
        return error_response(
            RamlinkError("VALIDATION_FAILED").message,
            errors=form.errors.get_json_data(),
        )


class PopularProductsView(PartnerAPIView):
    """GET /api/ram/products/popular?limit=24&offset=0"""

    def get(self, request):
        form = PopularProductsForm(request.GET)
        if not form.is_valid():
            return self.invalid(form)

        page = CatalogService.popular(
            context=StorefrontContext.current(),
            limit=form.cleaned_data["limit"],
            offset=form.cleaned_data["offset"] or 0,
        )
        return JsonResponse(page.as_dict())


class CartAddView(PartnerAPIView):
    """POST /api/ram/cart/add"""

    def post(self, request):
        form = CartAddForm(self.payload(request))
        if not form.is_valid():
            return self.invalid(form)
        data = form.cleaned_data

        context = StorefrontContext.current()
        customer, _ = IdentityResolver.resolve_or_create(
            data["ram_user_id"],
            context=context,
            email=data["email"] or None,
            first_name=data["first_name"] or None,
            last_name=data["last_name"] or None,
            require_email=ramlink_settings.CART_REQUIRES_EMAIL,
        )
        cart_count = CartService.add_item(
            customer, data["product_id"], data["quantity"], context=context
        )
        return JsonResponse(
            {
                "success": True,
                "cart_count": cart_count,
                "message": "Producto agregado al carrito",
            }
        )


class CartCountView(PartnerAPIView):
    """GET /api/ram/cart/count?ram_user_id=..."""

    def get(self, request):
        ram_user_id = self.lookup_user_id(request)

        context = StorefrontContext.current()
        customer = IdentityResolver.resolve(ram_user_id, provider=context.provider)
        return JsonResponse({"count": CartService.count(customer, context=context)})


class WishlistToggleView(PartnerAPIView):
    """POST /api/ram/wishlist/toggle"""

    def post(self, request):
        form = WishlistToggleForm(self.payload(request))
        if not form.is_valid():
            return self.invalid(form)
        data = form.cleaned_data

        context = StorefrontContext.current()
        customer, _ = IdentityResolver.resolve_or_create(
            data["ram_user_id"],
            context=context,
            email=data["email"] or None,
            first_name=data["first_name"] or None,
            last_name=data["last_name"] or None,
            require_email=ramlink_settings.WISHLIST_REQUIRES_EMAIL,
        )
        favorited = FavoriteService.toggle(customer, data["product_id"], context=context)
        return JsonResponse(
            {
                "success": True,
                "favorited": favorited,
                "message": (
                    "Producto agregado a favoritos"
                    if favorited
                    else "Producto eliminado de favoritos"
                ),
            }
        )


class WishlistView(PartnerAPIView):
    """GET /api/ram/wishlist?ram_user_id=...&with_details=1"""

    def get(self, request):
        ram_user_id = self.lookup_user_id(request)

        context = StorefrontContext.current()
        customer = IdentityResolver.resolve(ram_user_id, provider=context.provider)
        with_details = is_truthy(request.GET.get("with_details"))

        if customer is None:
            return JsonResponse({"success": True, "product_ids": [], "products": []})

        favorites = FavoriteService.list(customer, context=context, with_details=with_details)
        body = {"success": True, "product_ids": favorites.product_ids}
        if favorites.products is not None:
            body["products"] = [p.as_dict() for p in favorites.products]
        return JsonResponse(body)
