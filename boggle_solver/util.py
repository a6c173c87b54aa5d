from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def group_by(seq: Iterable[T], fn: Callable[[T], R]) -> dict[R, list[T]]:
    out = dict[R, list[T]]()
    for v in seq:
        out.setdefault(fn(v), []).append(v)
    return out
