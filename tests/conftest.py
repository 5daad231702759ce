"""Shared fixtures for the intake service tests."""

from __future__ import annotations

import io
from collections.abc import Iterator
from pathlib import Path

import logfire
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.engine import Engine

from form_intake.db import init_db, make_engine
from form_intake.main import STYLESHEET_URL, create_app
from form_intake.service import SubmissionService
from form_intake.settings import Settings

ADMIN_TOKEN = "s3cret-admin-token"


@pytest.fixture(scope="session", autouse=True)
def _quiet_logfire() -> None:
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'submissions.sqlite'}",
        upload_dir=str(tmp_path / "uploads"),
        upload_url="/uploads",
        admin_token=ADMIN_TOKEN,
        log_console=False,
        send_to_logfire=False,
    )


@pytest.fixture
def engine(settings: Settings) -> Iterator[Engine]:
    engine = make_engine(settings)
    init_db(engine, settings)
    yield engine
    engine.dispose()


@pytest.fixture
def service(engine: Engine, settings: Settings) -> SubmissionService:
    return SubmissionService(engine, settings, stylesheet_url=STYLESHEET_URL)


@pytest.fixture
def client(settings: Settings, service: SubmissionService) -> Iterator[TestClient]:
    with TestClient(create_app(settings, service)) as client:
        yield client


def insert_raw(engine: Engine, **values: str) -> None:
    """Insert a row without going through sanitization."""
    row = {"name": "", "email": "", "phone": "", "plateThickness": "", "comment": "", "file_path": ""}
    row.update(values)
    with engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO submissions (name, email, phone, plateThickness, comment, file_path) "
                "VALUES (:name, :email, :phone, :plateThickness, :comment, :file_path)"
            ),
            row,
        )


def count_rows(engine: Engine) -> int:
    with engine.connect() as conn:
        return conn.execute(text("SELECT COUNT(*) FROM submissions")).scalar_one()


class BrokenStream(io.RawIOBase):
    """Yields some bytes, then fails like a full disk or a dropped client."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._sent = False

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if self._sent:
            raise OSError(28, "No space left on device")
        self._sent = True
        n = len(self._data)
        buffer[:n] = self._data
        return n
