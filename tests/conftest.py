"""Shared pytest configuration and fixtures for the test suite."""

import atexit
import os
import shutil
import tempfile
from pathlib import Path

import pytest
import yaml

_TEST_DATA_DIR = Path(tempfile.mkdtemp(prefix="cm-tests-"))
os.environ["CM_DATA_PATH"] = str(_TEST_DATA_DIR)
_TEST_CONFIG_FILE = _TEST_DATA_DIR / "config.yaml"

_TEST_CONFIG_FILE.write_text(
    yaml.safe_dump(
        {"log_level": "DEBUG", "stream_type_case": "upper"},
        sort_keys=False,
    ),
    encoding="utf-8",
)

from src.config import settings as settings_module  # noqa: E402

settings_module.get_config.cache_clear()


@pytest.fixture
def movie_bag() -> dict:
    """Metadata bag of a movie as sent by a receiver."""
    return {
        "metadataType": 1,
        "title": "Inception",
        "releaseDate": "2010-07-16",
        "images": [{"url": "http://img/1.jpg"}],
    }


@pytest.fixture(autouse=True)
def _reset_config_cache():
    """Ensure each test reads a fresh configuration instance."""
    settings_module.get_config.cache_clear()
    yield
    settings_module.get_config.cache_clear()


@atexit.register
def _cleanup_test_data_dir() -> None:
    """Remove the temporary test data directory after the test session."""
    shutil.rmtree(_TEST_DATA_DIR, ignore_errors=True)
