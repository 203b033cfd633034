"""Tests for solver configuration."""

import logging

import pytest

from src.basin.config import SolverConfig


class TestSolverConfig:
    def test_defaults(self):
        config = SolverConfig()
        assert config.trips == 1
        assert config.max_expansions is None
        assert config.log_level == "WARNING"
        assert config.logging_level == logging.WARNING

    def test_log_level_normalized(self):
        assert SolverConfig(log_level="debug").logging_level == logging.DEBUG

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            SolverConfig(trips=0)
        with pytest.raises(ValueError):
            SolverConfig(max_expansions=0)
        with pytest.raises(ValueError):
            SolverConfig(log_level="LOUD")

    def test_content_hash(self):
        assert SolverConfig().content_hash() == SolverConfig().content_hash()
        assert len(SolverConfig().content_hash()) == 16
        assert SolverConfig(trips=3).content_hash() != SolverConfig().content_hash()
        # Logging does not change the answer
        assert SolverConfig(log_level="DEBUG").content_hash() == SolverConfig().content_hash()


class TestFromEnv:
    def test_empty_env_gives_defaults(self):
        assert SolverConfig.from_env({}) == SolverConfig()

    def test_reads_variables(self):
        config = SolverConfig.from_env({
            "BASIN_TRIPS": "3",
            "BASIN_MAX_EXPANSIONS": "1000",
            "BASIN_LOG_LEVEL": "info",
        })
        assert config.trips == 3
        assert config.max_expansions == 1000
        assert config.log_level == "INFO"

    def test_blank_variables_are_ignored(self):
        assert SolverConfig.from_env({"BASIN_TRIPS": ""}) == SolverConfig()

    def test_invalid_integer(self):
        with pytest.raises(ValueError, match="BASIN_TRIPS"):
            SolverConfig.from_env({"BASIN_TRIPS": "three"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("BASIN_TRIPS", "2")
        assert SolverConfig.from_env().trips == 2
