# -*- coding: utf-8 -*-
"""Shared fixtures for API tests: one throwaway database per test class."""

from __future__ import annotations

import atexit
import os
import shutil
import tempfile
import unittest
from itertools import count
from pathlib import Path

from fastapi.testclient import TestClient

# Must be set before ``uplift.config`` is imported: the module-level app built on import
# should not touch the repository's data/ directory.
_SUITE_TMP = Path(tempfile.mkdtemp(prefix="uplift-suite-"))
atexit.register(shutil.rmtree, _SUITE_TMP, True)
os.environ["UPLIFT_DATA_ROOT"] = str(_SUITE_TMP)
os.environ["UPLIFT_DB_PATH"] = str(_SUITE_TMP / "default.db")
os.environ["UPLIFT_SESSION_SECRET"] = "test-secret"
os.environ.pop("UPLIFT_ENV", None)
os.environ.pop("UPLIFT_COOKIE_SECURE", None)

from uplift.api import create_app  # noqa: E402
from uplift.config import Settings  # noqa: E402

_seq = count(1)

PASSWORD = "secret1"


class ApiTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="uplift-test-"))
        settings = Settings()
        settings.data_root = cls._tmp
        settings.db_path = cls._tmp / "uplift.db"
        cls.app = create_app(settings)
        cls.db = cls.app.state.db
        cls.client = TestClient(cls.app)

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()
        cls.db.close()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def new_client(self) -> TestClient:
        client = TestClient(self.app)
        self.addCleanup(client.close)
        return client

    def signed_up(self, prefix: str = "user") -> TestClient:
        """A fresh client logged in as a brand-new user."""
        n = next(_seq)
        client = self.new_client()
        resp = client.post(
            "/api/auth/register",
            json={"username": f"{prefix}{n}", "email": f"{prefix}{n}@example.com", "password": PASSWORD},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return client

    def count_rows(self, sql: str, *params) -> int:
        with self.db.connection() as conn:
            return int(conn.execute(sql, params).fetchone()[0])
