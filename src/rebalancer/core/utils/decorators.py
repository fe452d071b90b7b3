"""
Utility decorators for logging simulation runs.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable, Sized
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


def _describe_argument(name: str, value: Any) -> dict[str, Any]:
    """Summarize one call argument as log context.

    Collections are reduced to their length and models to their ``to_dict``
    fields so a full price history never ends up in a log record.
    """
    if isinstance(value, Sized) and not isinstance(value, str):
        return {f"{name}_count": len(value)}
    if callable(getattr(value, "to_dict", None)):
        return value.to_dict()
    if hasattr(value, "value"):
        return {name: str(value.value)}
    return {name: value}


def _call_context(func: Callable[..., Any], args: tuple, kwargs: dict) -> dict[str, Any]:
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()

    context: dict[str, Any] = {"correlation_id": uuid.uuid4().hex[:8]}
    for name, value in bound.arguments.items():
        if name != "self":
            context.update(_describe_argument(name, value))
    return context


def _outcome(result: Any) -> dict[str, Any]:
    """Key figures of a simulation result."""
    if hasattr(result, "total_rebalance_events"):
        return {
            "rebalances": result.total_rebalance_events,
            "final_total_value": result.final_total_value,
        }
    if isinstance(result, bool | int | float | str):
        return {"result": result}
    return {"result_type": type(result).__name__}


def log_simulation(func: F) -> F:
    """Log start, completion and failure of a simulation run.

    All three records share a short correlation id and carry the call
    arguments as ``extra`` context; completion and failure add the elapsed
    time in milliseconds.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        from loguru import logger

        context = _call_context(func, args, kwargs)
        logger.info(f"Simulation started: {func.__name__}", extra=context)
        started = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            logger.error(
                f"Simulation failed: {func.__name__}",
                extra={
                    **context,
                    "success": False,
                    "execution_time_ms": elapsed_ms,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            raise

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.success(
            f"Simulation completed: {func.__name__}",
            extra={**context, "success": True, "execution_time_ms": elapsed_ms, **_outcome(result)},
        )
        return result

    return wrapper  # type: ignore[return-value]
