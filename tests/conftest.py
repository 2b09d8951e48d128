"""Shared fixtures for the tinyview test suite"""

import pytest

from tinyview.support import Config


@pytest.fixture(autouse=True)
def clean_config():
    """Runtime config overrides never leak between tests"""
    Config.clear_runtime_overrides()
    yield
    Config.clear_runtime_overrides()


@pytest.fixture
def write_template(tmp_path):
    """Write a template file under tmp_path and return its path as a string"""

    def _write(name, source):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return str(path)

    return _write
