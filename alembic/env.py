"""
Migration environment. Migrations run over a blocking driver, so the
application's async URL is mapped onto its sync twin first.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import URL, make_url

from rentkaro.config import get_settings
from rentkaro.db.base import Base
from rentkaro.db.models import BrowseHistoryEntry, Item, Rental, User  # noqa: F401

SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg2",
    "sqlite+aiosqlite": "sqlite",
}

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def migration_url() -> URL:
    url = make_url(get_settings().database_url)
    return url.set(drivername=SYNC_DRIVERS.get(url.drivername, url.drivername))


def configure(**kwargs) -> None:
    context.configure(target_metadata=Base.metadata, compare_type=True, **kwargs)


if context.is_offline_mode():
    configure(
        url=migration_url().render_as_string(hide_password=False),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    engine = create_engine(migration_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()
