from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class Described:
    """A callable carrying a human-readable description for diagnostics."""

    description: str
    fn: Callable[..., Any]

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.fn(*args, **kwargs)

    def __str__(self) -> str:
        return self.description


def described(description: str, fn: Callable[..., Any]) -> Described:
    if isinstance(fn, Described):
        fn = fn.fn
    return Described(description, fn)


def describe(fn: Any) -> str:
    if isinstance(fn, Described):
        return fn.description
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name and "<lambda>" not in name:
        return name
    return str(fn)
