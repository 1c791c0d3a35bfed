"""Tests for status, date, product and total formatting."""

from datetime import datetime
from types import SimpleNamespace

import pytest

from minimarket.models import MenuItem, NavigationIntent, ProductLine, Record
from minimarket.rendering import (
    format_date,
    format_menu_item,
    format_products,
    format_status_badge,
    format_total,
    iter_products,
    record_detail_rows,
    record_row_cells,
    status_color,
)


class TestStatusColor:
    @pytest.mark.parametrize(
        "status, token",
        [
            ("pendiente", "warning"),
            ("PENDIENTE", "warning"),
            ("Enviado", "info"),
            ("entregado", "success"),
            ("CANCELADO", "danger"),
            ("devuelto", "neutral"),
            ("", "neutral"),
            (None, "neutral"),
            (7, "neutral"),
        ],
    )
    def test_status_tokens(self, status, token):
        assert status_color(status) == token

    def test_badge_uses_status_colour(self):
        badge = format_status_badge("pendiente")
        assert badge.plain == "● pendiente"
        assert str(badge.spans[0].style) == "#FFC107"

    def test_badge_for_missing_status(self):
        assert format_status_badge(None).plain == "● "


class TestFormatDate:
    def test_seconds_mapping(self):
        expected = datetime.fromtimestamp(1_700_000_000).strftime("%x")
        assert format_date({"seconds": 1_700_000_000}) == expected

    def test_seconds_attribute(self):
        expected = datetime.fromtimestamp(1_700_000_000).strftime("%x")
        assert format_date(SimpleNamespace(seconds=1_700_000_000, nanoseconds=0)) == expected

    def test_raw_values_pass_through(self):
        assert format_date("2024-05-01") == "2024-05-01"
        assert format_date(None) == ""
        assert format_date({"nanoseconds": 5}) == "{'nanoseconds': 5}"

    @pytest.mark.parametrize("seconds", [1e15, -1e15, float("nan"), float("inf")])
    def test_out_of_range_seconds_render_invalid_date(self, seconds):
        assert format_date({"seconds": seconds}) == "Fecha inválida"
        assert format_date(SimpleNamespace(seconds=seconds)) == "Fecha inválida"

    def test_invalid_date_in_row_cells(self):
        record = Record(id="a", name="Ana", date={"seconds": 10**15})
        assert record_row_cells(record)[1] == "Fecha inválida"


class TestFormatProducts:
    def test_mapping_and_list_format_the_same(self):
        as_mapping = {"a": {"name": "Bread", "quantity": 2}}
        as_list = [{"name": "Bread", "quantity": 2}]
        assert format_products(as_mapping) == ["• Bread (x2)"]
        assert format_products(as_list) == ["• Bread (x2)"]

    @pytest.mark.parametrize("value", [None, [], {}, ""])
    def test_empty_yields_sentinel(self, value):
        assert format_products(value) == ["Sin productos"]

    def test_order_is_preserved(self):
        value = {"b": {"name": "Leche", "quantity": 1}, "a": {"name": "Pan", "quantity": 3}}
        assert iter_products(value) == [ProductLine("Leche", 1), ProductLine("Pan", 3)]

    def test_missing_quantity(self):
        assert format_products([{"name": "Sal"}]) == ["• Sal (x?)"]


class TestFormatTotal:
    def test_missing_total(self):
        assert format_total(None) == "0"

    def test_grouped(self):
        assert format_total(1500) == "1,500"
        assert format_total(1234567) == "1,234,567"
        assert format_total(1500.0) == "1,500"
        assert format_total(1500.5) == "1,500.50"
        assert format_total(0) == "0"


class TestRichRendering:
    def test_record_row_cells(self):
        record = Record(id="x", name="Ana", date="hoy", status="enviado", address="Calle 1")
        cells = record_row_cells(record)
        assert [getattr(cell, "plain", cell) for cell in cells] == ["Ana", "hoy", "● enviado", "Calle 1"]

    def test_record_detail_rows(self):
        record = Record(
            id="x1",
            name="Ana",
            total=2500,
            status="entregado",
            products=[{"name": "Pan", "quantity": 2}, {"name": "Leche", "quantity": 1}],
        )
        rows = [(label, value.plain) for label, value in record_detail_rows(record)]
        assert rows == [
            ("ID", "x1"),
            ("Cliente", "Ana"),
            ("Productos", "• Pan (x2)\n• Leche (x1)"),
            ("Total", "$2,500"),
            ("Fecha", ""),
            ("Estado", "● entregado"),
        ]

    def test_record_detail_rows_without_products(self):
        rows = dict(record_detail_rows(Record(id="x2")))
        assert rows["Productos"].plain == "Sin productos"
        assert rows["Total"].plain == "$0"

    def test_menu_item_row(self):
        item = MenuItem("cart-outline", "Carrito", NavigationIntent("CartScreen"))
        assert format_menu_item(item).plain.endswith("Carrito")
