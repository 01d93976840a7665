"""Tests for FundamentalsConfig."""

import dataclasses

import pytest

from fundamentals.config import DEFAULT_CONFIG, FundamentalsConfig


class TestFundamentalsConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.json_indent is None
        assert DEFAULT_CONFIG.json_sort_keys is False
        assert DEFAULT_CONFIG.json_ensure_ascii is False

    def test_compact_separators(self):
        assert DEFAULT_CONFIG.json_separators == (",", ":")

    def test_indented_separators(self):
        assert FundamentalsConfig(json_indent=4).json_separators == (",", ": ")

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.json_indent = 2  # type: ignore[misc]
