"""Shared test fixtures for healthlog."""

import json
import os
import tempfile

import pytest


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def entries_dir(tmp_dir):
    path = os.path.join(tmp_dir, "data")
    os.makedirs(path)
    return path


@pytest.fixture
def write_entry(entries_dir):
    """Write a raw entry file: write_entry("2025-01-05-0930", {...}) or raw text."""

    def _write(identifier, payload):
        path = os.path.join(entries_dir, f"{identifier}.json")
        with open(path, "w") as f:
            f.write(payload if isinstance(payload, str) else json.dumps(payload))
        return path

    return _write


@pytest.fixture
def tmp_config_file(tmp_dir, entries_dir):
    """Create a temporary YAML config file pointing at tmp_dir."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": tmp_dir,
            "entries_dir": entries_dir,
            "report_file": os.path.join(tmp_dir, "index.html"),
        },
        "checker": {
            "window_minutes": 90,
            "timezone": "America/Detroit",
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path
