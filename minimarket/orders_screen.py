"""Orders list screen: search, paginate and inspect fetched orders."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import DataTable, Input, Static

from minimarket.config import PAGE_SIZE
from minimarket.constant import RECORD_NOUN_PLURAL
from minimarket.layout_screen import LayoutScreen
from minimarket.menu import Navigate
from minimarket.order_detail_modal import OrderDetailModal
from minimarket.records import FetchRecords, RecordListPipeline
from minimarket.rendering import record_row_cells
from minimarket.session import SessionStore

logger = logging.getLogger(__name__)


class OrdersScreen(LayoutScreen):
    """Admin orders table backed by a RecordListPipeline."""

    DEFAULT_CSS = """
    #orders-title {
        text-style: bold;
        text-align: center;
        width: 100%;
        margin-bottom: 1;
    }

    #orders-search {
        margin-bottom: 1;
    }

    #orders-table {
        height: 1fr;
    }

    #orders-pagination {
        height: 1;
        margin-top: 1;
    }

    #orders-summary {
        width: 1fr;
        color: $text-muted;
    }

    #orders-page {
        width: auto;
    }

    #orders-status {
        height: 1;
        color: $warning;
    }
    """

    BINDINGS = [
        ("f7", "prev_page", "Anterior"),
        ("f8", "next_page", "Siguiente"),
    ]

    def __init__(
        self,
        session_store: SessionStore,
        navigate: Navigate,
        fetch: FetchRecords,
        page_size: int = PAGE_SIZE,
    ) -> None:
        super().__init__(session_store, navigate)
        self.fetch = fetch
        self.pipeline = RecordListPipeline(page_size=page_size)

    def compose_content(self) -> ComposeResult:
        yield Static("Pedidos", id="orders-title")
        yield Input(placeholder="Buscar por nombre", id="orders-search")
        yield DataTable(id="orders-table", cursor_type="row", zebra_stripes=True)
        with Horizontal(id="orders-pagination"):
            yield Static(id="orders-summary")
            yield Static(id="orders-page")
        yield Static(id="orders-status")

    def on_mount(self) -> None:
        table = self.query_one("#orders-table", DataTable)
        table.add_columns("Cliente", "Fecha", "Estado", "Dirección")
        self._refresh_table()
        self.run_worker(self._load_records(), exclusive=True, group="orders-fetch")

    async def _load_records(self) -> None:
        self._set_status("Cargando pedidos…")
        await self.pipeline.refresh(self.fetch)
        if self.pipeline.last_error is not None:
            self._set_status("No se pudieron cargar los pedidos")
        else:
            self._set_status("")
        self._refresh_table()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "orders-search":
            return
        self.pipeline.set_search_text(event.value)
        self._refresh_table()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        record_id = event.row_key.value
        record = next((r for r in self.pipeline.visible if r.id == record_id), None)
        if record is None:
            return
        self.pipeline.select(record)
        logger.debug("inspect record id=%s", record.id)
        self.app.push_screen(OrderDetailModal(record), self._on_detail_closed)

    def _on_detail_closed(self, _result: None) -> None:
        self.pipeline.clear_selection()

    def action_next_page(self) -> None:
        self.pipeline.go_to_next_page()
        self._refresh_table()

    def action_prev_page(self) -> None:
        self.pipeline.go_to_prev_page()
        self._refresh_table()

    def go_back(self) -> None:
        self.menu.navigate_and_close("AdminRoot", {"screen": "AdminDashboard"})

    def focus_content(self) -> None:
        self.query_one("#orders-search", Input).focus()

    def _set_status(self, message: str) -> None:
        self.query_one("#orders-status", Static).update(message)

    def _refresh_table(self) -> None:
        table = self.query_one("#orders-table", DataTable)
        table.clear()
        for record in self.pipeline.visible:
            table.add_row(*record_row_cells(record), key=record.id)

        first, last, total = self.pipeline.page_window()
        self.query_one("#orders-summary", Static).update(
            f"Mostrando {first}-{last} de {total} {RECORD_NOUN_PLURAL}"
        )
        self.query_one("#orders-page", Static).update(f"{self.pipeline.page_index} de {self.pipeline.page_count}")
