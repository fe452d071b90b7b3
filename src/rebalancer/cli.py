#!/usr/bin/env python3
"""
Command-line backtest runner.

Loads a price history from the configured source, runs one rebalancing
simulation and prints a summary compared with buy-and-hold.
"""

import argparse
import sys

from loguru import logger
from pydantic import ValidationError as SettingsValidationError

from rebalancer.config.settings import Settings
from rebalancer.core.enums import Currency, PriceSourceKind
from rebalancer.core.exceptions.backtest import BacktestException
from rebalancer.core.logging_setup import configure_logging
from rebalancer.core.models import BacktestResult, StrategyParameters
from rebalancer.core.utils.formatting import format_bitcoin, format_currency, format_percentage
from rebalancer.engine import simulate
from rebalancer.infrastructure.data import build_price_source, price_range


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Backtest threshold rebalancing between Bitcoin and cash",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 60/40 Bitcoin/cash, rebalance on 10% drift, synthetic prices
  rebalance-backtest --ratio 60 --threshold 10

  # Real history from a JSON export over a fixed window
  rebalance-backtest --source json --data-path prices.json \\
      --start-date 2020-01-01 --end-date 2023-12-31
        """,
    )

    parser.add_argument("--capital", type=float, help="Initial capital (default: from settings)")
    parser.add_argument("--ratio", type=float, help="Target Bitcoin allocation in percent")
    parser.add_argument("--threshold", type=float, help="Rebalance threshold in percent")
    parser.add_argument("--start-date", type=str, help="Start date in YYYY-MM-DD format")
    parser.add_argument("--end-date", type=str, help="End date in YYYY-MM-DD format")

    parser.add_argument(
        "--source",
        choices=[kind.value for kind in PriceSourceKind],
        help="Price history source (default: from settings)",
    )
    parser.add_argument("--data-path", type=str, help="Price file for the json/csv sources")
    parser.add_argument(
        "--currency",
        type=Currency.from_string,
        choices=list(Currency),
        help="Quote currency (default: from settings)",
    )
    parser.add_argument(
        "--show-events", action="store_true", help="List every rebalance after the summary"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Overlay command-line options on environment settings."""
    overrides = {
        "initial_capital": args.capital,
        "bitcoin_ratio": args.ratio,
        "rebalance_threshold": args.threshold,
        "price_source": args.source,
        "data_path": args.data_path,
        "currency": args.currency,
    }
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def render_summary(result: BacktestResult, currency: Currency = Currency.USD) -> str:
    """Format the summary statistics of a result as text."""
    sign = "+" if result.outperformed_buy_and_hold() else ""
    lines = [
        f"Window:             {result.first_date} to {result.last_date} "
        f"({result.params.duration_days()} days)",
        f"Final balance:      {format_currency(result.final_total_value, currency)}",
        f"Bitcoin holdings:   {format_bitcoin(result.final_bitcoin_units)} BTC",
        f"Cash holdings:      {format_currency(result.final_cash_units, currency)}",
        f"CAGR:               {format_percentage(result.compound_annual_growth_rate_percent)}",
        f"Max drawdown:       {format_percentage(result.max_drawdown_percent)}",
        f"Rebalances:         {result.total_rebalance_events}",
        f"Buy & hold balance: {format_currency(result.buy_and_hold_final_value, currency)}",
        f"vs buy & hold:      {sign}{format_percentage(result.rebalance_advantage_percent)}",
    ]
    return "\n".join(lines)


def render_events(result: BacktestResult, currency: Currency = Currency.USD) -> str:
    """Format each rebalance as one line."""
    return "\n".join(
        f"{event.date}  {event.action:<4}  price {format_currency(event.price, currency)}  "
        f"total {format_currency(event.total_value, currency)}"
        for event in result.rebalance_events()
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = settings_from_args(args)
    except SettingsValidationError as e:
        configure_logging("INFO")
        logger.error(f"Invalid options: {e}")
        return 1

    configure_logging(settings.log_level, serialize=settings.log_json)

    try:
        samples = build_price_source(settings).provide_price_history(settings.currency)
        available = price_range(samples)
        params = StrategyParameters(
            initial_capital=settings.initial_capital,
            target_bitcoin_ratio=settings.bitcoin_ratio,
            rebalance_threshold_percent=settings.rebalance_threshold,
            window_start=args.start_date or available.earliest_date,
            window_end=args.end_date or available.latest_date,
        )
        result = simulate(samples, params)
        logger.debug(f"Performance summary: {result.performance_summary()}")
    except BacktestException as e:
        logger.error(f"Backtest failed: {e}")
        return 1

    print(render_summary(result, settings.currency))
    if args.show_events and result.total_rebalance_events:
        print()
        print(render_events(result, settings.currency))
    return 0


if __name__ == "__main__":
    sys.exit(main())
