"""Shared test fixtures for daybook."""

import os
import tempfile

import pytest


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file pointing at a notes directory in tmp_dir."""
    import yaml

    config_data = {
        "notes": {
            "directory": os.path.join(tmp_dir, "notes"),
            "file_type": "org",
        },
        "journal": {
            "directory": os.path.join(tmp_dir, "notes", "journal"),
            "keyword": "journal",
            "title_format": "day-date-month-year",
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path
