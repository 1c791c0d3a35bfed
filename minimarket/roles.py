"""Role classification and the static per-role menu tables."""

from __future__ import annotations

import logging

from minimarket.constant import MENU_ROWS_BY_ROLE, PROFILE_TARGETS, ROLE_LABELS
from minimarket.models import MenuItem, NavigationIntent, RoleClass, Session

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def _intent(screen: str, nested: str | None) -> NavigationIntent:
    if nested is None:
        return NavigationIntent(screen)
    return NavigationIntent(screen, {"screen": nested})


MENU_ITEMS_BY_ROLE: dict[RoleClass, tuple[MenuItem, ...]] = {
    role_class: tuple(
        MenuItem(icon=icon, label=label, intent=_intent(screen, nested), signs_out=signs_out)
        for icon, label, screen, nested, signs_out in MENU_ROWS_BY_ROLE[role_class.value]
    )
    for role_class in RoleClass
}


def resolve_role(session: Session) -> RoleClass:
    """Classify a session. Never raises; unknown roles fall back to customer."""
    if not session.authenticated:
        return RoleClass.GUEST

    role = session.role
    if role is None:
        return RoleClass.CUSTOMER
    if not isinstance(role, str):
        logger.debug("malformed role %r (%s); treating as customer", role, type(role).__name__)
        return RoleClass.CUSTOMER
    if role.strip().lower() == ADMIN_ROLE:
        return RoleClass.ADMIN
    return RoleClass.CUSTOMER


def menu_items_for(role_class: RoleClass) -> tuple[MenuItem, ...]:
    """Return the fixed, ordered drawer items for a role class."""
    return MENU_ITEMS_BY_ROLE[role_class]


def role_label(role_class: RoleClass) -> str:
    return ROLE_LABELS[role_class.value]


def profile_target(session: Session) -> NavigationIntent:
    """Where the header profile button leads for this session."""
    screen, nested = PROFILE_TARGETS[resolve_role(session).value]
    return _intent(screen, nested)
