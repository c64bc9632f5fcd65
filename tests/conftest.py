"""Shared test fixtures for TextureOptimizer."""

import json

import pytest
from loguru import logger


@pytest.fixture
def tmp_data_dir(tmp_path):
    """Provide a temporary data directory."""
    data_dir = tmp_path / "oxide" / "data"
    data_dir.mkdir(parents=True)
    return data_dir


@pytest.fixture
def file_store(tmp_data_dir):
    """Provide a JsonFileStore rooted in a temp directory."""
    from texopt.config.store import JsonFileStore

    return JsonFileStore(tmp_data_dir)


@pytest.fixture
def write_document(tmp_data_dir):
    """Write raw JSON (or text) to texture_config.json and return its path."""

    def _write(content):
        path = tmp_data_dir / "texture_config.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
