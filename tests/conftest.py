"""Shared pytest fixtures for DualTransfer tests."""

import json
import shutil
import tempfile
from pathlib import Path

import pytest

from dualtransfer.core.models import TransferItem


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file path."""
    return temp_dir / "config.json"


@pytest.fixture
def valid_config_data():
    """Return valid configuration data."""
    return {
        "version": 1,
        "settings": {
            "pagination": True,
            "page_size": 5,
            "move_order": "append",
            "show_search": False,
            "one_way": True,
            "display_name": "Fruit picker",
        },
    }


@pytest.fixture
def temp_config_with_data(temp_config_file, valid_config_data):
    """Create a temporary config file with valid data."""
    temp_config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(temp_config_file, "w", encoding="utf-8") as f:
        json.dump(valid_config_data, f)
    return temp_config_file


@pytest.fixture
def abc_items():
    """Three items where "b" is disabled."""
    return [
        {"key": "a", "title": "Apple"},
        {"key": "b", "title": "Banana", "disabled": True},
        {"key": "c", "title": "Cherry"},
    ]


@pytest.fixture
def numbered_items():
    """Twenty TransferItems keyed "0".."19"; every fourth one is disabled."""
    return [
        TransferItem(key=str(i), title=f"content{i + 1}", disabled=i % 4 == 0)
        for i in range(20)
    ]
