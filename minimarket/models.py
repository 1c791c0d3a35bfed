"""Domain models for the storefront engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from minimarket.config import PAGE_SIZE


class RoleClass(Enum):
    """Normalized classification of a session."""

    GUEST = "guest"
    CUSTOMER = "customer"
    ADMIN = "admin"


@dataclass(frozen=True)
class Session:
    """Read-only authentication snapshot supplied by the session provider."""

    authenticated: bool = False
    role: Any = None

    @classmethod
    def from_auth_state(cls, state: Mapping[str, Any] | None) -> "Session":
        """Build a session from a loose auth-state mapping.

        The role is read from ``role`` and, when that is empty, from a nested
        ``user.role``.
        """
        if not state:
            return cls()
        role = state.get("role")
        if not role:
            user = state.get("user")
            if isinstance(user, Mapping):
                role = user.get("role")
        return cls(authenticated=bool(state.get("authenticated")), role=role or None)


@dataclass(frozen=True)
class NavigationIntent:
    """A screen name plus parameters for the navigation dispatcher."""

    screen: str
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MenuItem:
    """One drawer entry."""

    icon: str
    label: str
    intent: NavigationIntent
    signs_out: bool = False


@dataclass
class MenuState:
    """Drawer visibility plus animation progress in [0, 1]."""

    is_open: bool = False
    progress: float = 0.0

    @property
    def is_rendered(self) -> bool:
        return self.is_open or self.progress > 0.0


@dataclass(frozen=True)
class ProductLine:
    """A product name and quantity inside a record."""

    name: str
    quantity: Any


@dataclass(frozen=True)
class Record:
    """A fetched customer order."""

    id: str
    name: str | None = None
    date: Any = None
    status: str | None = None
    address: str | None = None
    total: Any = None
    products: Any = None

    @classmethod
    def from_mapping(cls, record_id: str, data: Mapping[str, Any]) -> "Record":
        """Build a record from a document id and its loose field mapping."""
        return cls(
            id=str(record_id),
            name=data.get("name"),
            date=data.get("date"),
            status=data.get("status"),
            address=data.get("address"),
            total=data.get("total"),
            products=data.get("products"),
        )


@dataclass
class ListQuery:
    """Search text plus 1-based page position."""

    search_text: str = ""
    page_index: int = 1
    page_size: int = PAGE_SIZE
