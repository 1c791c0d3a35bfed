"""Base screen with header, drawer and overlay shared by every storefront screen."""

from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.events import Click
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from minimarket.drawer import MenuDrawer
from minimarket.menu import Navigate, RoleMenuController
from minimarket.session import SessionStore


class MenuOverlay(Static):
    """Dimmed backdrop behind the drawer; a click closes the menu."""

    DEFAULT_CSS = """
    MenuOverlay {
        layer: overlay;
        width: 100%;
        height: 100%;
        background: black 50%;
    }
    """

    def __init__(self, controller: RoleMenuController, **kwargs) -> None:
        super().__init__(**kwargs)
        self.controller = controller

    def on_click(self, event: Click) -> None:
        event.stop()
        self.controller.close()
        self.display = False


class LayoutScreen(Screen):
    """A screen that owns one RoleMenuController for its lifetime."""

    DEFAULT_CSS = """
    LayoutScreen {
        layers: default overlay drawer;
    }

    #content {
        padding: 1 2;
    }
    """

    BINDINGS = [
        ("f2", "toggle_menu", "Menú"),
        ("f3", "profile", "Perfil"),
        ("escape", "close_menu", "Cerrar"),
    ]

    def __init__(self, session_store: SessionStore, navigate: Navigate) -> None:
        super().__init__()
        self.session_store = session_store
        self.menu = RoleMenuController(session_store.session, navigate, session_store.sign_out)
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="content"):
            yield from self.compose_content()
        yield MenuOverlay(self.menu, id="menu-overlay")
        yield MenuDrawer(self.menu, id="menu-drawer")
        yield Footer()

    def compose_content(self) -> ComposeResult:
        yield from ()

    def on_mount(self) -> None:
        self._unsubscribe = self.session_store.subscribe(self.menu.update_session)
        self._sync_overlay()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def action_toggle_menu(self) -> None:
        self.menu.toggle()
        self._sync_overlay()
        if self.menu.target_open:
            self.query_one("#drawer-items").focus()
        else:
            self.focus_content()

    def action_profile(self) -> None:
        self.menu.press_profile()

    def action_close_menu(self) -> None:
        if self.menu.target_open:
            self.menu.close()
            self._sync_overlay()
            self.focus_content()
            return
        self.go_back()

    def go_back(self) -> None:
        return

    def focus_content(self) -> None:
        self.set_focus(None)

    def _sync_overlay(self) -> None:
        self.query_one("#menu-overlay", MenuOverlay).display = self.menu.target_open
