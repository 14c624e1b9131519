"""Verbose DEBUG tracing for layout entry points."""

from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 6
_repr.maxtuple = 6
_repr.maxdict = 10


def _looks_like_records(value: Sequence[Any]) -> bool:
    return bool(value) and all(hasattr(item, "leg_length") and hasattr(item, "index") for item in value)


def safe_repr(value: Any, *, max_length: int = 400) -> str:
    """Short, log-friendly rendering of layout inputs and outputs."""

    if isinstance(value, np.ndarray):
        if value.size == 0:
            return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
        return (
            f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype}, "
            f"min={float(value.min()):.6g}, max={float(value.max()):.6g})"
        )

    if isinstance(value, (list, tuple)) and _looks_like_records(value):
        legs = [item.leg_length for item in value]
        spiral = value[0].stack_order is not None
        return (
            f"<{len(value)} record(s) {'spiral' if spiral else 'circle'} "
            f"leg={min(legs):.6g}..{max(legs):.6g}>"
        )

    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - repr of foreign objects
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={safe_repr(value)}" for key, value in kwargs.items()) + "}"
        )
    if not parts:
        return "no-args"
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs on entry, exit and failure."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.exception("Exception in %s", qualname)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, safe_repr(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator
