"""
Unit tests for the command-line runner.
"""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from rebalancer import cli
from rebalancer.config.settings import get_settings
from rebalancer.core.enums import Currency


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leave loguru sinks alone while stdout is captured."""
    monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: None)
    get_settings.cache_clear()


@pytest.fixture
def price_csv() -> Generator[Path]:
    """Three-day history: price doubles then halves."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".csv", delete=False) as f:
        f.write("date,price\n2020-01-01,100\n2020-01-02,200\n2020-01-03,100\n")
        file_path = Path(f.name)

    try:
        yield file_path
    finally:
        if file_path.exists():
            file_path.unlink()


def _args(price_csv: Path, *extra: str) -> list[str]:
    return [
        "--source",
        "csv",
        "--data-path",
        str(price_csv),
        "--capital",
        "1000",
        "--ratio",
        "50",
        "--threshold",
        "10",
        *extra,
    ]


class TestCli:
    """Test suite for the CLI entry point."""

    def test_should_print_summary(
        self, price_csv: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = cli.main(_args(price_csv))

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Window:             2020-01-01 to 2020-01-03 (2 days)" in output
        assert "Final balance:      $1,125.00" in output
        assert "Rebalances:         2" in output
        assert "Max drawdown:       25.00%" in output
        assert "Buy & hold balance: $1,000.00" in output
        assert "vs buy & hold:      +12.50%" in output

    def test_should_list_rebalance_events(
        self, price_csv: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = cli.main(_args(price_csv, "--show-events"))

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "2020-01-02  SELL  price $200.00  total $1,500.00" in output
        assert "2020-01-03  BUY   price $100.00  total $1,125.00" in output

    def test_should_limit_window(
        self, price_csv: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = cli.main(_args(price_csv, "--start-date", "2020-01-02"))

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Window:             2020-01-02 to 2020-01-03" in output
        assert "Rebalances:         1" in output

    def test_should_fail_for_empty_window(self, price_csv: Path) -> None:
        exit_code = cli.main(
            _args(price_csv, "--start-date", "2021-01-01", "--end-date", "2021-02-01")
        )

        assert exit_code == 1

    def test_should_fail_for_invalid_dates(self, price_csv: Path) -> None:
        assert cli.main(_args(price_csv, "--start-date", "2020-13-01")) == 1

    def test_should_fail_for_invalid_ratio(self, price_csv: Path) -> None:
        assert cli.main(_args(price_csv, "--ratio", "150")) == 1

    def test_should_reject_unknown_source(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--source", "ftp"])

    def test_should_parse_currency_case_insensitively(self) -> None:
        args = cli.build_parser().parse_args(["--currency", "thb"])

        assert args.currency is Currency.THB

    def test_should_reject_unsupported_currency(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--currency", "EUR"])

    def test_should_overlay_options_on_settings(self, price_csv: Path) -> None:
        args = cli.build_parser().parse_args(_args(price_csv, "--currency", "THB", "--debug"))

        settings = cli.settings_from_args(args)

        assert settings.bitcoin_ratio == 50
        assert settings.currency == "THB"
        assert settings.log_level == "DEBUG"
        assert settings.data_path == price_csv
