"""Tests for CatalogService, URL rewriting and the page-size migration."""

from decimal import Decimal

import pytest

from ramlink.models import Channel, StorefrontSetting
from ramlink.services import CatalogService
from ramlink.tests.conftest import make_product
from ramlink.utils import absolute_url, is_truthy, rewrite_public_url, summarize


# ═══════════════════════════════════════════════════════════════════
# Pure helpers
# ═══════════════════════════════════════════════════════════════════


class TestRewritePublicUrl:
    def test_replaces_internal_prefix(self):
        assert (
            rewrite_public_url("http://shop:8000", "https://tienda.com", "http://shop:8000/cache/a.jpg")
            == "https://tienda.com/cache/a.jpg"
        )

    def test_trailing_slashes_are_ignored(self):
        assert (
            rewrite_public_url("http://shop:8000/", "https://tienda.com/", "http://shop:8000/p")
            == "https://tienda.com/p"
        )

    def test_non_prefixed_url_is_unchanged(self):
        url = "https://cdn.example.com/a.jpg"
        assert rewrite_public_url("http://shop:8000", "https://tienda.com", url) == url

    def test_host_that_merely_shares_a_prefix_is_unchanged(self):
        url = "http://shop:80001/a.jpg"
        assert rewrite_public_url("http://shop:8000", "https://tienda.com", url) == url

    def test_same_bases_is_a_no_op(self):
        url = "http://shop:8000/a"
        assert rewrite_public_url("http://shop:8000", "http://shop:8000", url) == url

    def test_empty_url(self):
        assert rewrite_public_url("http://shop:8000", "https://tienda.com", "") == ""


class TestHelpers:
    def test_absolute_url(self):
        assert absolute_url("http://shop:8000/", "/storage/a.jpg") == "http://shop:8000/storage/a.jpg"
        assert absolute_url("http://shop:8000", "https://cdn/a.jpg") == "https://cdn/a.jpg"
        assert absolute_url("http://shop:8000", "") == ""

    def test_summarize_prefers_short_description(self):
        assert summarize("Corta", "<p>Larga</p>") == "Corta"

    def test_summarize_strips_and_truncates(self):
        long_html = "<p>" + "a" * 150 + "</p>"
        assert summarize("", long_html) == "a" * 100

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_truthy(self, value):
        assert is_truthy(value)

    @pytest.mark.parametrize("value", [None, "", "0", "false", "no"])
    def test_falsy(self, value):
        assert not is_truthy(value)


# ═══════════════════════════════════════════════════════════════════
# CatalogService
# ═══════════════════════════════════════════════════════════════════


class TestClamp:
    @pytest.mark.parametrize(
        "limit, offset, expected",
        [
            (100, 0, (48, 0)),
            (1, 0, (12, 0)),
            (24, -5, (24, 0)),
            (36, 72, (36, 72)),
        ],
    )
    def test_clamp(self, limit, offset, expected):
        assert CatalogService.clamp(limit, offset) == expected


@pytest.mark.django_db
class TestPopular:
    def test_newest_active_visible_products_of_channel(self, context, channel):
        older = make_product(channel, "primero")
        newer = make_product(channel, "segundo")
        make_product(channel, "inactivo", status=False)
        make_product(channel, "oculto", visible_individually=False)
        other = Channel.objects.create(code="outlet", name="Outlet")
        make_product(other, "otro-canal")

        page = CatalogService.popular(context=context)

        assert [card.id for card in page.products] == [newer.pk, older.pk]
        assert page.total == 2
        assert page.limit == 24
        assert page.offset == 0

    def test_limit_is_clamped_before_querying(self, context, channel):
        for i in range(50):
            make_product(channel, f"producto-{i}")

        page = CatalogService.popular(context=context, limit=100)

        assert page.limit == 48
        assert len(page.products) == 48
        assert page.total == 50

    def test_offset_selects_page(self, context, channel):
        for i in range(30):
            make_product(channel, f"producto-{i}")

        page = CatalogService.popular(context=context, limit=12, offset=24)
        assert len(page.products) == 6

    def test_offset_past_the_end_is_empty(self, context, channel):
        make_product(channel, "solo")
        page = CatalogService.popular(context=context, limit=12, offset=120)
        assert page.products == []
        assert page.total == 1

    def test_reports_page_size_choices(self, context):
        page = CatalogService.popular(context=context)
        assert page.page_sizes == [12, 24, 36, 48]
        assert page.as_dict()["meta"]["page_sizes"] == [12, 24, 36, 48]


@pytest.mark.django_db
class TestProductCard:
    def test_card_fields(self, context, product):
        card = CatalogService.product_card(product, context=context)

        assert card.id == product.pk
        assert card.name == "Taza Loca"
        assert card.description == "Taza de cerámica"
        assert card.price == 45.0
        assert card.price_formatted == "S/45.00"
        assert card.image_url == "https://tienda.example.com/storage/product/taza.jpg"
        assert card.url == "https://tienda.example.com/taza-loca"
        assert card.is_saleable is True
        assert card.on_sale is False

    def test_sale_product(self, context, product_on_sale):
        card = CatalogService.product_card(product_on_sale, context=context)

        assert card.price == 60.0
        assert card.on_sale is True
        assert card.description == "Polo de algodón peruano"
        assert card.image_url == ""

    def test_out_of_stock_is_not_saleable(self, context, product_out_of_stock):
        card = CatalogService.product_card(product_out_of_stock, context=context)
        assert card.is_saleable is False

    def test_public_url_falls_back_to_app_url(self, channel, group_general, product, settings):
        from ramlink.context import StorefrontContext

        settings.RAMLINK = {**settings.RAMLINK, "PUBLIC_URL": ""}
        ctx = StorefrontContext.current()

        card = CatalogService.product_card(product, context=ctx)
        assert card.url == "http://shop-internal:8000/taza-loca"
        assert card.image_url == "http://shop-internal:8000/storage/product/taza.jpg"

    def test_special_price_above_base_is_ignored(self, context, channel):
        p = make_product(channel, "raro", price=Decimal("10.00"), special_price=Decimal("15.00"))
        assert p.minimal_price == Decimal("10.00")
        assert CatalogService.product_card(p, context=context).on_sale is False


@pytest.mark.django_db
class TestPageSizeSetting:
    def test_migration_widens_page_sizes(self):
        assert (
            StorefrontSetting.get_value(StorefrontSetting.PRODUCTS_PER_PAGE) == "12,24,36,48"
        )

    def test_invalid_entries_are_skipped(self):
        StorefrontSetting.objects.filter(code=StorefrontSetting.PRODUCTS_PER_PAGE).update(
            value="12, 24,abc,,48"
        )
        assert CatalogService.page_size_choices() == [12, 24, 48]

    def test_missing_setting(self):
        StorefrontSetting.objects.all().delete()
        assert CatalogService.page_size_choices() == []
        assert StorefrontSetting.get_value("nope", "fallback") == "fallback"
