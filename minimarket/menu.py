"""Slide-out menu controller: role-derived items plus an animated open/close protocol."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Mapping

from minimarket.config import MENU_ANIMATION_SECONDS, MENU_FRAME_SECONDS
from minimarket.models import MenuItem, MenuState, Session
from minimarket.roles import menu_items_for, profile_target, resolve_role, role_label

logger = logging.getLogger(__name__)

Navigate = Callable[[str, Mapping[str, Any]], None]

OPEN = 1.0
CLOSED = 0.0


def ease_out_cubic(fraction: float) -> float:
    return 1.0 - (1.0 - fraction) ** 3


def _clamp(value: float) -> float:
    return max(CLOSED, min(OPEN, value))


class RoleMenuController:
    """Owns one drawer's MenuState and resolves the session into menu items.

    Opening marks the drawer open immediately and tweens progress to 1.
    Closing tweens progress to 0 and only marks the drawer closed once the
    tween completes, so the content stays rendered while it slides out.
    A new direction cancels the running tween; the latest call wins.

    Without a running event loop (headless use) transitions settle at once.
    """

    def __init__(
        self,
        session: Session,
        navigate: Navigate,
        sign_out: Callable[[], None] | None = None,
        *,
        duration: float = MENU_ANIMATION_SECONDS,
        frame: float = MENU_FRAME_SECONDS,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.session = session
        self.role = resolve_role(session)
        self.state = MenuState()
        self.on_change = on_change
        self._navigate = navigate
        self._sign_out = sign_out
        self._duration = duration
        self._frame = frame
        self._target = CLOSED
        self._task: asyncio.Task[None] | None = None
        self._disposed = False

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return menu_items_for(self.role)

    @property
    def label(self) -> str:
        return role_label(self.role)

    @property
    def target_open(self) -> bool:
        """Direction of the latest open/close call."""
        return self._target == OPEN

    @property
    def is_animating(self) -> bool:
        return self._task is not None and not self._task.done()

    def update_session(self, session: Session) -> None:
        """Replace the session snapshot and recompute the role class."""
        self.session = session
        role = resolve_role(session)
        if role is not self.role:
            logger.debug("menu role %s -> %s", self.role.value, role.value)
        self.role = role
        self._notify()

    def toggle(self) -> None:
        if self.target_open:
            self.close()
        else:
            self.open()

    def open(self) -> None:
        if self._disposed:
            return
        self._target = OPEN
        if not self.state.is_open:
            self.state.is_open = True
            self._notify()
        self._start(OPEN)

    def close(self) -> None:
        if self._disposed:
            return
        self._target = CLOSED
        if not self.state.is_rendered:
            self._cancel()
            return
        self._start(CLOSED)

    def navigate_and_close(self, target: str, params: Mapping[str, Any] | None = None) -> None:
        """Close the drawer and dispatch the navigation intent."""
        self.close()
        logger.debug("navigate target=%s params=%s", target, dict(params or {}))
        self._navigate(target, dict(params or {}))

    def activate(self, item: MenuItem) -> None:
        """Run a drawer item; sign-out items tear the session down first."""
        if item.signs_out and self._sign_out is not None:
            logger.info("sign out requested from menu (role=%s)", self.role.value)
            self._sign_out()
        self.navigate_and_close(item.intent.screen, item.intent.params)

    def press_profile(self) -> None:
        intent = profile_target(self.session)
        self.navigate_and_close(intent.screen, intent.params)

    def dispose(self) -> None:
        """Cancel any in-flight tween without running its completion."""
        self._disposed = True
        self.on_change = None
        self._cancel()

    async def wait_idle(self) -> None:
        """Wait until no tween is running."""
        while self.is_animating:
            await asyncio.wait({self._task})

    def _start(self, target: float) -> None:
        self._cancel()
        if self.state.progress == target:
            self._finish(target)
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._finish(target)
            return
        self._task = loop.create_task(self._tween(target))

    def _cancel(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    async def _tween(self, target: float) -> None:
        loop = asyncio.get_running_loop()
        start = self.state.progress
        duration = self._duration * abs(target - start)
        began = loop.time()
        while True:
            fraction = 1.0 if duration <= 0 else (loop.time() - began) / duration
            if fraction >= 1.0:
                break
            self.state.progress = _clamp(start + (target - start) * ease_out_cubic(fraction))
            self._notify()
            await asyncio.sleep(self._frame)
        self._finish(target)

    def _finish(self, target: float) -> None:
        self.state.progress = target
        if target == CLOSED:
            self.state.is_open = False
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
