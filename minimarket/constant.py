"""Editable static menu, role and status configuration."""

from __future__ import annotations

# Raw menu rows consumed by minimarket.roles (which wraps them into MenuItem instances).
# Each row: (icon, label, screen, nested screen or None, signs_out).
MENU_ROWS_BY_ROLE: dict[str, list[tuple[str, str, str, str | None, bool]]] = {
    "guest": [
        ("home-outline", "Inicio", "Home", None, False),
        ("cart-outline", "Carrito", "CartScreen", None, False),
        ("log-in-outline", "Iniciar Sesión", "Login", None, False),
        ("information-circle-outline", "Acerca de", "About", None, False),
    ],
    "customer": [
        ("home-outline", "Inicio", "UserRoot", "UserDashboard", False),
        ("cart-outline", "Productos", "UserRoot", "ProductList", False),
        ("basket-outline", "Carrito", "CartScreen", None, False),
        ("list-outline", "Mis Pedidos", "UserRoot", "OrderHistory", False),
        ("person-circle-outline", "Mi Cuenta", "UserRoot", "AccountScreen", False),
        ("log-out-outline", "Cerrar Sesión", "Home", None, True),
    ],
    "admin": [
        ("grid-outline", "Panel Principal", "AdminRoot", "AdminDashboard", False),
        ("cube-outline", "Crear Producto", "AdminRoot", "CreateProduct", False),
        ("document-text-outline", "Pedidos", "AdminRoot", "OrdersScreen", False),
        ("people-outline", "Gestión de Usuarios", "AdminRoot", "UserManagement", False),
        ("person-circle-outline", "Mi Cuenta", "AdminRoot", "AccountScreenAdmin", False),
        ("log-out-outline", "Cerrar Sesión", "Home", None, True),
    ],
}

ROLE_LABELS: dict[str, str] = {
    "guest": "Invitado",
    "customer": "Cliente",
    "admin": "Administrador",
}

PROFILE_TARGETS: dict[str, tuple[str, str | None]] = {
    "guest": ("Login", None),
    "customer": ("UserRoot", "AccountScreen"),
    "admin": ("AdminRoot", "AccountScreenAdmin"),
}

# Terminal glyphs standing in for the icon ids above.
ICON_GLYPHS: dict[str, str] = {
    "home-outline": "⌂",
    "cart-outline": "🛒",
    "basket-outline": "🧺",
    "log-in-outline": "→",
    "log-out-outline": "←",
    "information-circle-outline": "ⓘ",
    "list-outline": "≡",
    "person-circle-outline": "☺",
    "grid-outline": "▦",
    "cube-outline": "▣",
    "document-text-outline": "▤",
    "people-outline": "☻",
}

STATUS_TOKENS: dict[str, str] = {
    "pendiente": "warning",
    "enviado": "info",
    "entregado": "success",
    "cancelado": "danger",
}

NEUTRAL_STATUS_TOKEN = "neutral"

STATUS_STYLES: dict[str, str] = {
    "warning": "#FFC107",
    "info": "#2196F3",
    "success": "#4CAF50",
    "danger": "#F44336",
    "neutral": "#9E9E9E",
}

NO_PRODUCTS_LINE = "Sin productos"
INVALID_DATE_TEXT = "Fecha inválida"
RECORD_NOUN_PLURAL = "pedidos"
