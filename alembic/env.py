"""
Alembic environment for the gallery database.

- Database URL comes from the application settings (DB_URL / .env)
- Online migrations run through the same async engine builder as the app,
  so SQLite gets the same pragmas (foreign keys, WAL)
- Batch mode for SQLite, required for ALTER TABLE operations
"""

import asyncio
from logging.config import fileConfig
from sqlalchemy.engine import Connection
from alembic import context
from dotenv import load_dotenv

# Load environment variables from .env file before the settings are read
load_dotenv()

from gallery.core.config import config as settings  # noqa: E402
from gallery.core.db.engine import build_engine  # noqa: E402

# Import every model so autogenerate sees the full metadata
from gallery.core.db.registry import Base  # noqa: E402

# this is the Alembic Config object
config = context.config

db_url = config.get_main_option("sqlalchemy.url") or settings.database_url
config.set_main_option("sqlalchemy.url", db_url)

is_sqlite = db_url.startswith("sqlite")

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    This generates SQL without connecting to the database.
    """
    context.configure(
        url=db_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=is_sqlite,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        # SQLite cannot ALTER most constraints; batch mode recreates tables
        render_as_batch=is_sqlite,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Run migrations in 'online' mode with an async engine."""
    connectable = build_engine(db_url)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
