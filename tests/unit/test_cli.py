"""Tests for the command-line entry point."""

import argparse
from datetime import time
from unittest.mock import patch

import pytest

from volprofile import cli


@pytest.fixture
def project(tmp_path, session_rows, write_profile):
    """Config dir pointing at a temporary profile dir holding a market default."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "markets.yaml").write_text(
        f"markets:\n  HK:\n    source:\n      profile_dir: '{tmp_path / 'profiles'}'\n"
    )
    (tmp_path / "profiles").mkdir()
    write_profile(session_rows, name="profiles/HK.csv")
    return config_dir


class TestArgumentParsing:
    """Test CLI argument parsing."""

    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        assert args.symbol == "0700_HK"
        assert args.from_time == time(9, 30)
        assert args.to_time == time(11, 30)
        assert args.at_time == time(10, 15)

    def test_seconds_accepted(self):
        args = cli.build_parser().parse_args(["--at", "10:15:30"])
        assert args.at_time == time(10, 15, 30)

    def test_unpadded_time_rejected(self):
        with pytest.raises(argparse.ArgumentTypeError):
            cli._clock("9:5")

    def test_invalid_time(self):
        with pytest.raises(argparse.ArgumentTypeError):
            cli._clock("ten")


class TestMain:
    """Test CLI execution."""

    @patch("volprofile.cli.configure_logging")
    def test_run_with_market_default(self, mock_configure, project):
        code = cli.main(["--config-dir", str(project), "--market", "HK", "--json-logs"])

        assert code == 0
        mock_configure.assert_called_once_with(level="INFO", format_json=True)

    @patch("volprofile.cli.configure_logging")
    def test_run_without_profiles_uses_flat_profile(self, mock_configure, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        assert cli.main(["--config-dir", str(config_dir)]) == 0

    @patch("volprofile.cli.configure_logging")
    def test_invalid_range_exit_code(self, mock_configure, project):
        code = cli.main(["--config-dir", str(project), "--from", "11:00", "--to", "10:00"])
        assert code == 2

    @patch("volprofile.cli.configure_logging")
    def test_time_outside_period_exit_code(self, mock_configure, project):
        code = cli.main(["--config-dir", str(project), "--at", "15:00"])
        assert code == 2
