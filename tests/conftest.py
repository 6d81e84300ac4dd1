# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def sample_content() -> str:
    return "\n".join(
        [
            "",
            "# uplinks",
            '1 "Server A" #07c uplink to core',
            "2 eth0",
            '3 "Printer" "second floor"',
            "not a port",
            "",
        ]
    )


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("PATCHPANEL_DB", str(tmp_path / "test.db"))
    from app import create_app

    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()
