"""Run the Alembic migrations against a scratch SQLite database."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from moodmenu.infrastructure.db import Base

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def alembic_config(db_path: Path) -> Config:
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.cmd_opts = Namespace(x=[f"url=sqlite+aiosqlite:///{db_path}"])
    return config


def table_columns(db_path: Path) -> dict[str, set[str]]:
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        return {
            table: {column["name"] for column in inspector.get_columns(table)}
            for table in inspector.get_table_names()
            if table != "alembic_version"
        }
    finally:
        engine.dispose()


def test_upgrade_creates_the_model_schema(tmp_path: Path) -> None:
    db_path = tmp_path / "migrated.db"

    command.upgrade(alembic_config(db_path), "head")

    expected = {table.name: {column.name for column in table.columns} for table in Base.metadata.sorted_tables}
    assert table_columns(db_path) == expected


def test_downgrade_removes_the_tables(tmp_path: Path) -> None:
    db_path = tmp_path / "migrated.db"
    config = alembic_config(db_path)

    command.upgrade(config, "head")
    command.downgrade(config, "base")

    assert table_columns(db_path) == {}
