"""Order detail modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Grid, Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, Static

from minimarket.models import Record
from minimarket.rendering import record_detail_rows


class OrderDetailModal(ModalScreen[None]):
    """Read-only label/value sheet for one order."""

    BINDINGS = [
        ("escape", "close", "Cerrar"),
        ("q", "close", "Cerrar"),
        ("e", "edit_status", "Editar estado"),
    ]

    DEFAULT_CSS = """
    OrderDetailModal {
        align: center middle;
    }

    #detail-sheet {
        width: 72;
        max-width: 90%;
        height: auto;
        max-height: 90%;
        border: heavy $accent;
        border-title-align: center;
        background: $surface;
    }

    #detail-grid {
        grid-size: 2;
        grid-columns: 12 1fr;
        grid-rows: auto;
        grid-gutter: 0 1;
        height: auto;
        padding: 1 2;
    }

    #detail-grid .detail-label {
        text-style: bold;
        color: $text-muted;
        width: 100%;
        text-align: right;
    }

    #detail-grid .detail-value {
        height: auto;
    }

    #detail-actions {
        height: 1;
        background: $boost;
        text-align: center;
    }
    """

    def __init__(self, record: Record) -> None:
        super().__init__()
        self.record = record

    def compose(self) -> ComposeResult:
        with Vertical(id="detail-sheet") as sheet:
            sheet.border_title = "Detalles del Pedido"
            with Grid(id="detail-grid"):
                for label, value in record_detail_rows(self.record):
                    yield Label(label, classes="detail-label")
                    yield Static(value, classes="detail-value")
            yield Static("E editar estado · Esc/q cerrar", id="detail-actions")

    def action_close(self) -> None:
        self.dismiss()

    def action_edit_status(self) -> None:
        # Status edits are not persisted; the affordance only dismisses.
        self.dismiss()
