"""Formatting and rich rendering helpers for records and menu rows."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from rich.text import Text

from minimarket.constant import (
    ICON_GLYPHS,
    INVALID_DATE_TEXT,
    NEUTRAL_STATUS_TOKEN,
    NO_PRODUCTS_LINE,
    STATUS_STYLES,
    STATUS_TOKENS,
)
from minimarket.models import MenuItem, ProductLine, Record

logger = logging.getLogger(__name__)


def status_color(status: Any) -> str:
    """Map a status string to a colour token, case-insensitively."""
    if not isinstance(status, str):
        return NEUTRAL_STATUS_TOKEN
    return STATUS_TOKENS.get(status.strip().lower(), NEUTRAL_STATUS_TOKEN)


def _timestamp_seconds(value: Any) -> float | None:
    if isinstance(value, Mapping):
        seconds = value.get("seconds")
    else:
        seconds = getattr(value, "seconds", None)
    if isinstance(seconds, (int, float)) and not isinstance(seconds, bool):
        return float(seconds)
    return None


def format_date(value: Any) -> str:
    """Render a ``{seconds}`` timestamp as a local date; pass anything else through."""
    seconds = _timestamp_seconds(value)
    if seconds is not None:
        try:
            return datetime.fromtimestamp(seconds).strftime("%x")
        except (OverflowError, OSError, ValueError):
            logger.debug("unrenderable timestamp seconds=%r", seconds)
            return INVALID_DATE_TEXT
    if value is None:
        return ""
    return str(value)


def _product_line(product: Any) -> ProductLine:
    if isinstance(product, ProductLine):
        return product
    if isinstance(product, Mapping):
        return ProductLine(name=str(product.get("name") or ""), quantity=product.get("quantity"))
    return ProductLine(name=str(product), quantity=None)


def iter_products(value: Any) -> list[ProductLine]:
    """Normalize a product list or keyed product mapping to one ordered list."""
    if not value:
        return []
    if isinstance(value, Mapping):
        entries = value.values()
    elif isinstance(value, (str, bytes)):
        return []
    else:
        entries = value
    return [_product_line(product) for product in entries]


def format_products(value: Any) -> list[str]:
    """Return one display line per product, or the no-products sentinel."""
    lines = []
    for product in iter_products(value):
        quantity = "?" if product.quantity is None else product.quantity
        lines.append(f"• {product.name} (x{quantity})")
    return lines or [NO_PRODUCTS_LINE]


def format_total(value: Any) -> str:
    """Comma-grouped total; missing totals render as ``0``."""
    if value is None:
        return "0"
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        if value.is_integer():
            return f"{int(value):,}"
        return f"{value:,.2f}"
    return str(value)


def status_style(status: Any) -> str:
    return STATUS_STYLES[status_color(status)]


def format_status_badge(status: Any) -> Text:
    """Render a coloured dot followed by the raw status text."""
    text = Text()
    text.append("● ", style=status_style(status))
    text.append(status or "")
    return text


def record_row_cells(record: Record) -> tuple[Text | str, ...]:
    """Cells for one table row: client, date, status, address."""
    return (
        Text(record.name or "", style="bold"),
        format_date(record.date),
        format_status_badge(record.status),
        Text(record.address or "", overflow="ellipsis", no_wrap=True),
    )


def record_detail_rows(record: Record) -> list[tuple[str, Text]]:
    """Label/value pairs for the order detail view, in display order."""
    return [
        ("ID", Text(record.id)),
        ("Cliente", Text(record.name or "")),
        ("Productos", Text("\n".join(format_products(record.products)))),
        ("Total", Text(f"${format_total(record.total)}")),
        ("Fecha", Text(format_date(record.date))),
        ("Estado", format_status_badge(record.status)),
    ]


def format_menu_item(item: MenuItem) -> Text:
    """Render a drawer row with its icon glyph."""
    text = Text()
    text.append(ICON_GLYPHS.get(item.icon, "•"), style="bold")
    text.append(f"  {item.label}")
    return text
