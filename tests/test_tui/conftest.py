from __future__ import annotations

from unittest.mock import patch

import pytest

from notfis.models.settings import Settings


@pytest.fixture
def mock_config(tmp_path):
    """Point data dir at tmp_path and use default settings, so no user files are touched."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    with (
        patch("notfis.config.get_data_dir", return_value=data_dir),
        patch("notfis.config.load_settings", return_value=Settings()),
    ):
        yield data_dir


async def wait_for_load(app, pilot) -> None:
    """Let the dashboard's file-reading worker finish and its UI update land."""
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()
