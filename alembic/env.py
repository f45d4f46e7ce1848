# alembic/env.py
from __future__ import annotations

from logging.config import fileConfig
from typing import Any, Dict, cast

from alembic import context
from sqlalchemy import engine_from_config, pool

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# --- App metadata so autogenerate sees teams/players/auctions ---
from cricket_auction import models  # noqa: E402,F401
from cricket_auction.config import DATABASE_URL  # noqa: E402
from cricket_auction.db import Base  # noqa: E402

target_metadata = Base.metadata

# SQLite cannot ALTER constraints in place
COMPARE_TYPE = True
RENDER_AS_BATCH = True


def run_migrations_offline() -> None:
    """Emit SQL for the configured DATABASE_URL without connecting."""
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=COMPARE_TYPE,
        render_as_batch=RENDER_AS_BATCH,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    section = cast(Dict[str, Any], config.get_section(config.config_ini_section) or {})
    # the app's DATABASE_URL (env or default) always wins over alembic.ini
    section["sqlalchemy.url"] = DATABASE_URL

    connectable = engine_from_config(
        section,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=COMPARE_TYPE,
            render_as_batch=RENDER_AS_BATCH,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
