"""
Threshold-rebalancing backtest simulation.

Walks a daily price window once, holding a Bitcoin/cash portfolio that is
reset to the target allocation whenever its Bitcoin share leaves the
``target ± threshold`` band, while an untouched copy of the opening
allocation serves as the buy-and-hold baseline.
"""

from loguru import logger

from rebalancer.core.enums import RebalanceAction
from rebalancer.core.models import (
    Allocation,
    BacktestResult,
    DailySnapshot,
    PortfolioState,
    PriceSample,
    StrategyParameters,
)
from rebalancer.core.types.financial import fraction_to_percent, validate_finite
from rebalancer.core.utils.decorators import log_simulation
from rebalancer.core.utils.formatting import format_bitcoin, format_currency, format_display_date

from .metrics import DrawdownTracker, compound_annual_growth_rate
from .preprocessing import PriceSeries, prepare_price_window


@log_simulation
def simulate(price_series: PriceSeries, params: StrategyParameters) -> BacktestResult:
    """Run a threshold-rebalancing backtest over the parameter window.

    Args:
        price_series: Daily Bitcoin prices; sorted and deduplicated on entry
        params: Validated strategy parameters

    Returns:
        Final holdings, summary statistics and one snapshot per simulated day

    Raises:
        InvalidRangeError: If no price sample falls inside the window
        CalculationError: If a price of zero makes the allocation undefined
    """
    window = prepare_price_window(price_series, params)
    target_ratio = params.target_ratio

    logger.info(
        f"Strategy parameters: target ratio {fraction_to_percent(target_ratio):g}%, "
        f"threshold {params.rebalance_threshold_percent:g}%"
    )
    logger.info(
        f"Rebalance when Bitcoin allocation > {fraction_to_percent(params.upper_bound):g}% "
        f"or < {fraction_to_percent(params.lower_bound):g}%"
    )

    opening_price = window[0].price
    portfolio = PortfolioState.allocate(params.initial_capital, target_ratio, opening_price)
    buy_and_hold = PortfolioState.allocate(params.initial_capital, target_ratio, opening_price)

    logger.debug(
        f"{window[0].date}: initial split - Bitcoin "
        f"{format_currency(portfolio.bitcoin_value(opening_price))} "
        f"({format_bitcoin(portfolio.bitcoin_units)} BTC), "
        f"cash {format_currency(portfolio.cash_units)}"
    )

    drawdown = DrawdownTracker(peak_value=params.initial_capital)
    snapshots: list[DailySnapshot] = []
    total_rebalances = 0

    for sample in window:
        total_value = portfolio.total_value(sample.price)
        current_ratio = portfolio.bitcoin_ratio(sample.price)
        action = RebalanceAction.for_ratio(current_ratio, params.lower_bound, params.upper_bound)

        if action is not None:
            _log_rebalance(sample, action, current_ratio, portfolio, total_value)
            portfolio.rebalance_to(total_value, target_ratio, sample.price)
            total_rebalances += 1

        drawdown.update(total_value)
        snapshots.append(_take_snapshot(sample, portfolio, total_value, action))

    final_price = window[-1].price
    final_total_value = validate_finite(portfolio.total_value(final_price), "final value")
    buy_and_hold_value = validate_finite(buy_and_hold.total_value(final_price), "baseline value")

    cagr = compound_annual_growth_rate(
        final_total_value, params.initial_capital, window[0].date, window[-1].date
    )

    return BacktestResult(
        params=params,
        final_total_value=final_total_value,
        final_bitcoin_units=portfolio.bitcoin_units,
        final_cash_units=portfolio.cash_units,
        total_rebalance_events=total_rebalances,
        compound_annual_growth_rate_percent=cagr,
        max_drawdown_percent=drawdown.max_drawdown_percent,
        daily_snapshots=tuple(snapshots),
        buy_and_hold_final_value=buy_and_hold_value,
        buy_and_hold_bitcoin_units=buy_and_hold.bitcoin_units,
    )


def _take_snapshot(
    sample: PriceSample,
    portfolio: PortfolioState,
    total_value: float,
    action: RebalanceAction | None,
) -> DailySnapshot:
    """Capture the post-rebalance state of one simulated day."""
    bitcoin_value = portfolio.bitcoin_value(sample.price)
    return DailySnapshot(
        date=sample.date,
        display_date=format_display_date(sample.date),
        price=sample.price,
        total_value=total_value,
        bitcoin_value=bitcoin_value,
        cash_value=portfolio.cash_units,
        bitcoin_units=portfolio.bitcoin_units,
        allocation=Allocation.from_values(bitcoin_value, portfolio.cash_units),
        rebalanced=action is not None,
        action=action,
    )


def _log_rebalance(
    sample: PriceSample,
    action: RebalanceAction,
    current_ratio: float,
    portfolio: PortfolioState,
    total_value: float,
) -> None:
    """Log the holdings a rebalance is about to reset."""
    breached = "lower" if action.is_buy else "upper"
    logger.debug(
        f"{sample.date}: {action} Bitcoin - ratio {fraction_to_percent(current_ratio):.2f}% "
        f"past {breached} bound | "
        f"before: BTC {format_bitcoin(portfolio.bitcoin_units)} "
        f"({format_currency(portfolio.bitcoin_value(sample.price))}), "
        f"cash {format_currency(portfolio.cash_units)}, total {format_currency(total_value)}"
    )
