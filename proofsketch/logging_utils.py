"""DEBUG call tracing shared by the construction and annotation modules."""

from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 6
_repr.maxtuple = 6
_repr.maxdict = 6

_MAX_LENGTH = 300


def _summarize_array(value: np.ndarray, max_items: int) -> str:
    head = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
    if value.size == 0:
        return head
    if value.size <= max_items:
        return f"{head}, values={_repr.repr(value.tolist())}"
    return f"{head}, min={float(value.min()):.6g}, max={float(value.max()):.6g}"


def _safe_repr(value: Any, *, max_items: int = 4) -> str:
    if isinstance(value, np.ndarray):
        return _summarize_array(value, max_items)
    if isinstance(value, float):
        return f"{value:.6g}"
    if isinstance(value, (list, tuple)) and not hasattr(value, "_fields"):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = [_safe_repr(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... ({len(value)} items)")
        return open_br + ", ".join(items) + close_br
    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - broken __repr__
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > _MAX_LENGTH:
        return rendered[:_MAX_LENGTH] + "... (truncated)"
    return rendered


def _format_call(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_safe_repr(arg) for arg in args]
    parts.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that logs entry, exit and failures at DEBUG level."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("-> %s(%s)", qualname, _format_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("!! %s raised %s: %s", qualname, type(exc).__name__, exc)
                raise
            if log_result:
                logger.debug("<- %s = %s", qualname, _safe_repr(result))
            else:
                logger.debug("<- %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _wrap_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr_name, attr_value in list(cls.__dict__.items()):
        if attr_name.startswith("__") and attr_name.endswith("__"):
            continue
        qualified = f"{cls.__name__}.{attr_name}"
        if attr_name in skip or qualified in skip:
            continue
        if isinstance(attr_value, staticmethod):
            wrapped = debug_log_call(logger, name=qualified)(attr_value.__func__)
            setattr(cls, attr_name, staticmethod(wrapped))
        elif isinstance(attr_value, classmethod):
            wrapped = debug_log_call(logger, name=qualified)(attr_value.__func__)
            setattr(cls, attr_name, classmethod(wrapped))
        elif inspect.isfunction(attr_value) and attr_value.__module__ == cls.__module__:
            setattr(cls, attr_name, debug_log_call(logger, name=qualified)(attr_value))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
    wrap_methods: bool = True,
) -> None:
    """Wrap the public functions (and methods) defined in ``namespace``.

    Private helpers (leading underscore) are left alone so that the trace
    only shows the calls a composition script makes.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name.startswith("_") or name in skip_set:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif wrap_methods and inspect.isclass(value) and value.__module__ == module_name:
            _wrap_class(value, logger, skip_set)
