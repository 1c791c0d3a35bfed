"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from minimarket.models import Record, Session

CLIENT_NAMES = [
    "Ana Pérez",
    "Bruno Díaz",
    "Carla Gómez",
    "Diego Ruiz",
    "Elena Soto",
    "Fabián León",
    "Gabriela Vera",
    "Hugo Ríos",
    "Inés Mora",
    "Javier Paz",
    None,
    "Ana Beltrán",
]

STATUSES = ["pendiente", "Enviado", "ENTREGADO", "cancelado", None, "devuelto"]


@pytest.fixture
def sample_records() -> list[Record]:
    """Twelve orders with mixed statuses, date shapes and product shapes."""
    records = []
    for idx, name in enumerate(CLIENT_NAMES):
        if idx % 2:
            products = {f"p{idx}": {"name": "Pan", "quantity": idx}}
        else:
            products = [{"name": "Leche", "quantity": 1}, {"name": "Huevos", "quantity": 12}]
        records.append(
            Record(
                id=f"order-{idx:02d}",
                name=name,
                date={"seconds": 1_700_000_000 + idx * 86_400} if idx % 3 else "2024-05-01",
                status=STATUSES[idx % len(STATUSES)],
                address=f"Calle {idx + 1}",
                total=1500 * (idx + 1),
                products=products,
            )
        )
    return records


@pytest.fixture
def guest_session() -> Session:
    return Session(authenticated=False, role=None)


@pytest.fixture
def customer_session() -> Session:
    return Session(authenticated=True, role="customer")


@pytest.fixture
def admin_session() -> Session:
    return Session(authenticated=True, role="admin")


class NavigationRecorder:
    """Navigation dispatcher double that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict]] = []

    def __call__(self, screen: str, params) -> None:
        self.calls.append((screen, dict(params)))


@pytest.fixture
def navigation() -> NavigationRecorder:
    return NavigationRecorder()
