"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from romakana.config import clear_configuration_cache, get_configuration
from romakana.hepburn import hepburn_table
from romakana.mapping import build_mapping_tree

ENV_KEYS = (
    "ROMAKANA_IME_MODE",
    "ROMAKANA_USE_OBSOLETE_KANA",
    "ROMAKANA_IGNORE_CASE",
    "ROMAKANA_PASS_ROMAJI",
)

@pytest.fixture(autouse=True)
def clean_configuration(monkeypatch):
    """Start every test without cached trees or ROMAKANA_* variables."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr('romakana.config.load_dotenv', lambda *args, **kwargs: False)
    clear_configuration_cache()
    yield
    clear_configuration_cache()

@pytest.fixture
def hepburn_tree():
    """Frozen tree built from the Hepburn table without overlays."""
    return build_mapping_tree(hepburn_table())

@pytest.fixture
def ime_tree():
    """Frozen tree with the IME overlay."""
    return build_mapping_tree(hepburn_table(), ime_mode=True)

@pytest.fixture
def ime_configuration():
    """Configuration used for live typing."""
    return get_configuration({"IMEMode": True})
