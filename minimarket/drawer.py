"""Slide-out drawer widget driven by a RoleMenuController."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from minimarket.config import DRAWER_WIDTH_RATIO
from minimarket.menu import RoleMenuController
from minimarket.models import RoleClass
from minimarket.rendering import format_menu_item


class MenuDrawer(Vertical):
    """Renders menu items for the controller's role and slides with its progress."""

    DEFAULT_CSS = """
    MenuDrawer {
        dock: left;
        layer: drawer;
        height: 100%;
        background: $panel;
        border-right: tall $primary;
    }

    #drawer-header {
        height: auto;
        background: #0077B6;
        color: white;
        padding: 1 2;
    }

    #drawer-title {
        text-style: bold;
    }

    #drawer-items {
        height: 1fr;
        border: none;
    }
    """

    def __init__(self, controller: RoleMenuController, **kwargs) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self._rendered_role: RoleClass | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="drawer-header"):
            yield Static("MiniMarket", id="drawer-title")
            yield Static(id="drawer-subtitle")
        yield OptionList(id="drawer-items")

    def on_mount(self) -> None:
        self.styles.width = f"{round(DRAWER_WIDTH_RATIO * 100)}%"
        self.controller.on_change = self.sync_state
        self.sync_state()

    def on_unmount(self) -> None:
        self.controller.dispose()

    def sync_state(self) -> None:
        """Mirror MenuState and the role's item set onto the widget tree."""
        state = self.controller.state
        self.display = state.is_rendered
        width = round(self.app.size.width * DRAWER_WIDTH_RATIO)
        self.styles.offset = (-round((1.0 - state.progress) * width), 0)

        if self._rendered_role is not self.controller.role:
            self._rendered_role = self.controller.role
            self.query_one("#drawer-subtitle", Static).update(self.controller.label)
            options = self.query_one("#drawer-items", OptionList)
            options.clear_options()
            options.add_options(
                [Option(format_menu_item(item), id=f"menu-{idx}") for idx, item in enumerate(self.controller.items)]
            )

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        items = self.controller.items
        if 0 <= event.option_index < len(items):
            self.controller.activate(items[event.option_index])
