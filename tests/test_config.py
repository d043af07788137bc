"""Tests for configuration validation and display."""

import pytest

from gridpath.config import Config


def test_default_configuration_is_valid():
    Config.validate()
    assert "gridpath Configuration:" in Config.display()


def test_validate_rejects_non_positive_dimensions(monkeypatch):
    monkeypatch.setattr(Config, "GRID_WIDTH", 0)
    with pytest.raises(ValueError, match="GRIDPATH_WIDTH"):
        Config.validate()


def test_validate_rejects_unknown_representation(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_REPRESENTATION", "tree")
    with pytest.raises(ValueError, match="GRIDPATH_REPRESENTATION"):
        Config.validate()


def test_display_reflects_values(monkeypatch):
    monkeypatch.setattr(Config, "GRID_WIDTH", 12)
    monkeypatch.setattr(Config, "GRID_HEIGHT", 8)
    monkeypatch.setattr(Config, "DEFAULT_REPRESENTATION", "linked_list")
    text = Config.display()
    assert "Grid: 12x8" in text
    assert "Default Representation: linked_list" in text
