# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""SQLite persistence layer for panel documents and their revisions."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from hashlib import sha256
from pathlib import Path
from typing import Iterator

from models import PanelDocument

SCHEMA = """
CREATE TABLE IF NOT EXISTS panel (
  panel_id TEXT PRIMARY KEY,
  name TEXT NOT NULL,
  created_at TEXT NOT NULL,
  updated_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS revision (
  revision_id TEXT PRIMARY KEY,
  panel_id TEXT NOT NULL,
  created_at TEXT NOT NULL,
  source_text TEXT NOT NULL,
  source_hash TEXT NOT NULL,
  document_json TEXT NOT NULL,
  FOREIGN KEY(panel_id) REFERENCES panel(panel_id)
);
CREATE INDEX IF NOT EXISTS idx_revision_panel ON revision(panel_id);
"""


def panel_id_for(name: str) -> str:
    return f"pnl_{sha256(name.encode('utf-8')).hexdigest()[:16]}"


class Database:
    def __init__(self, path: str = "patchpanel.db"):
        self.path = path

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        with self.connect() as conn:
            conn.executescript(SCHEMA)

    def save_revision(
        self, panel_name: str, source_text: str, document: PanelDocument
    ) -> tuple[str, str]:
        now = datetime.now(timezone.utc).isoformat()
        panel_id = panel_id_for(panel_name)
        revision_id = (
            f"rev_{sha256((panel_name + now + source_text).encode('utf-8')).hexdigest()[:16]}"
        )
        source_hash = sha256(source_text.encode("utf-8")).hexdigest()
        with self.connect() as conn:
            conn.execute(
                "INSERT INTO panel(panel_id,name,created_at,updated_at) VALUES(?,?,?,?) ON CONFLICT(panel_id) DO UPDATE SET updated_at=excluded.updated_at,name=excluded.name",
                (panel_id, panel_name, now, now),
            )
            conn.execute(
                "INSERT INTO revision(revision_id,panel_id,created_at,source_text,source_hash,document_json) VALUES(?,?,?,?,?,?)",
                (
                    revision_id,
                    panel_id,
                    now,
                    source_text,
                    source_hash,
                    document.model_dump_json(by_alias=True),
                ),
            )
        return panel_id, revision_id

    def list_panels(self) -> list[sqlite3.Row]:
        with self.connect() as conn:
            return conn.execute("SELECT * FROM panel ORDER BY updated_at DESC").fetchall()

    def list_revisions(self, panel_id: str) -> list[sqlite3.Row]:
        with self.connect() as conn:
            return conn.execute(
                "SELECT * FROM revision WHERE panel_id=? ORDER BY created_at DESC", (panel_id,)
            ).fetchall()

    def get_revision(self, revision_id: str) -> sqlite3.Row | None:
        with self.connect() as conn:
            return conn.execute(
                "SELECT * FROM revision WHERE revision_id=?", (revision_id,)
            ).fetchone()

    def get_document(self, revision_id: str) -> PanelDocument | None:
        row = self.get_revision(revision_id)
        if row is None:
            return None
        return PanelDocument.model_validate_json(row["document_json"])
