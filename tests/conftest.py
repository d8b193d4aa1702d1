"""Root test configuration: isolate each test from local config, SLUG_* env vars and CLI log handlers"""

import logging

import pytest

from slug.config import ENV_PREFIX, Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run from an empty directory with no SLUG_<FIELD> variables set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"{ENV_PREFIX}{name.upper()}", raising=False)
    yield tmp_path
    # get_logger binds a handler to the CliRunner's stderr, which is closed after each invoke
    logger = logging.getLogger("slug")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
