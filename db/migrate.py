from pathlib import Path

from alembic import command
from alembic.config import Config

from core.config import settings
from core.logger import log

ROOT = Path(__file__).resolve().parents[1]
MIGRATIONS_DIR = ROOT / "migrations"


def alembic_config(url: str | None = None) -> Config:
    """
    Build an Alembic config without relying on alembic.ini being present
    (the CLI uses alembic.ini; the app and tests use this).
    """
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", (url or settings.DATABASE_URL).replace("%", "%%"))
    return cfg


def run_migrations(url: str | None = None, revision: str = "head") -> None:
    target = url or settings.DATABASE_URL
    log.info("Applying migrations up to %s", revision)
    command.upgrade(alembic_config(target), revision)


def downgrade(url: str | None = None, revision: str = "base") -> None:
    target = url or settings.DATABASE_URL
    log.info("Reverting migrations down to %s", revision)
    command.downgrade(alembic_config(target), revision)
