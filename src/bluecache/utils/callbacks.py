import inspect
from types import MethodType
from typing import Any, Callable


def bind_callback(fn: Callable[..., Any], this_arg: Any = None, arity: int = 3) -> Callable[..., Any]:
    """
    Bind `fn` to `this_arg` when `fn` has room for a receiver.

    Query callbacks are called with `arity` positional arguments
    (`(value, key, container)`, or `(accumulator, value, key, container)` for
    reduce). A callback that accepts one more positional argument gets
    `this_arg` in front of them; any other callback keeps the plain shape and
    `this_arg` is ignored.
    """
    if not callable(fn):
        raise TypeError(f"Expected a callable, got {type(fn).__name__}")
    if this_arg is None or not _accepts_positional(fn, arity + 1):
        return fn
    return MethodType(fn, this_arg)


def _accepts_positional(fn: Callable[..., Any], count: int) -> bool:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # no introspectable signature (some builtins)
        return False
    try:
        signature.bind(*range(count))
    except TypeError:
        return False
    return True
