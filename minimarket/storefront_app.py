"""Main Textual app class and the navigation dispatcher."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Mapping

from rich.text import Text
from textual.app import App, ComposeResult
from textual.widgets import Static

from minimarket.config import DB_PATH
from minimarket.constant import MENU_ROWS_BY_ROLE
from minimarket.layout_screen import LayoutScreen
from minimarket.menu import Navigate
from minimarket.orders_screen import OrdersScreen
from minimarket.persistence import bootstrap_schema, fetch_records
from minimarket.records import FetchRecords
from minimarket.roles import profile_target
from minimarket.session import SessionStore

logger = logging.getLogger(__name__)

SECTION_TITLES: dict[str, str] = {
    nested or screen: label
    for rows in MENU_ROWS_BY_ROLE.values()
    for _, label, screen, nested, signs_out in rows
    if not signs_out
}


class SectionScreen(LayoutScreen):
    """Landing view for storefront sections that live outside this engine."""

    def __init__(self, session_store: SessionStore, navigate: Navigate, route: str, params: Mapping[str, Any]) -> None:
        super().__init__(session_store, navigate)
        self.route = route
        self.params = dict(params)

    def compose_content(self) -> ComposeResult:
        text = Text()
        text.append(SECTION_TITLES.get(self.route, self.route), style="bold")
        text.append("\n\nF2 menú · F3 perfil", style="dim")
        yield Static(text, id="section-body")


class LoginScreen(SectionScreen):
    """Stand-in for the login form: pick a role to start a session."""

    BINDINGS = [
        ("a", "sign_in('admin')", "Administrador"),
        ("c", "sign_in('customer')", "Cliente"),
    ]

    def compose_content(self) -> ComposeResult:
        yield Static("Iniciar Sesión\n\nA administrador · C cliente", id="section-body")

    def action_sign_in(self, role: str) -> None:
        self.session_store.sign_in(role)
        intent = profile_target(self.session_store.session)
        self.menu.navigate_and_close(intent.screen, intent.params)


class StorefrontApp(App):
    """Storefront shell: one LayoutScreen per route, swapped on navigation."""

    TITLE = "MiniMarket"
    SUB_TITLE = "Tienda"

    BINDINGS = [
        ("ctrl+q", "quit", "Salir"),
    ]

    def __init__(
        self,
        session_store: SessionStore | None = None,
        fetch: FetchRecords | None = None,
        db_path: str = DB_PATH,
        initial_route: tuple[str, Mapping[str, Any]] = ("Home", {}),
    ) -> None:
        super().__init__()
        self.session_store = session_store or SessionStore()
        self.db_path = db_path
        self._uses_local_store = fetch is None
        self.fetch_orders: FetchRecords = fetch or partial(fetch_records, db_path)
        self.initial_route = initial_route

    def on_mount(self) -> None:
        if self._uses_local_store:
            bootstrap_schema(self.db_path)
        screen_name, params = self.initial_route
        self.navigate_to(screen_name, params)

    def navigate_to(self, screen_name: str, params: Mapping[str, Any] | None = None) -> None:
        """Navigation dispatcher: nested ``params['screen']`` wins over the root name."""
        params = dict(params or {})
        route = str(params.get("screen", screen_name))
        logger.info("navigate %s -> %s", screen_name, route)
        screen = self._build_screen(route, params)
        if len(self.screen_stack) > 1:
            self.switch_screen(screen)
        else:
            self.push_screen(screen)

    def _build_screen(self, route: str, params: Mapping[str, Any]) -> LayoutScreen:
        if route == "OrdersScreen":
            return OrdersScreen(self.session_store, self.navigate_to, self.fetch_orders)
        if route == "Login":
            return LoginScreen(self.session_store, self.navigate_to, route, params)
        return SectionScreen(self.session_store, self.navigate_to, route, params)
