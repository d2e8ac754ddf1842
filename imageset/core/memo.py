# imageset/core/memo.py
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class MemoCell(Generic[T]):
    """Holds a lazily computed value, storing successful results only.

    A computation that raises leaves the cell empty, so the next call
    computes again.
    """

    __slots__ = ("_filled", "_value")

    def __init__(self):
        self._filled = False
        self._value: Optional[T] = None

    @property
    def filled(self) -> bool:
        return self._filled

    def get(self, compute: Callable[[], T]) -> T:
        if self._filled:
            return self._value  # type: ignore[return-value]
        value = compute()
        self._value = value
        self._filled = True
        return value
