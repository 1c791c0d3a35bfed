"""Entry point for the MiniMarket Textual app."""

from __future__ import annotations

import os
from typing import Mapping

from minimarket.config import DB_PATH, SEED_PATH
from minimarket.log import configure_debug_log
from minimarket.models import Session
from minimarket.persistence import seed_records
from minimarket.session import SessionStore
from minimarket.storefront_app import StorefrontApp


def initial_session(environ: Mapping[str, str] = os.environ) -> Session:
    """Session to start with: ``MINIMARKET_ROLE`` signs in with that role."""
    role = environ.get("MINIMARKET_ROLE", "").strip()
    return Session.from_auth_state({"authenticated": bool(role), "role": role})


def main() -> None:
    """Run the Textual application.

    ``MINIMARKET_SEED`` names a JSON file loaded into the record store when it is empty.
    """
    logger = configure_debug_log()
    session = initial_session()
    if SEED_PATH:
        seed_records(SEED_PATH, DB_PATH)
    logger.info("app start role=%r", session.role)
    StorefrontApp(session_store=SessionStore(session), db_path=DB_PATH).run()


if __name__ == "__main__":
    main()
