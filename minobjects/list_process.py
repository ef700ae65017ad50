"""Process lists in various ways."""

from __future__ import annotations

import enum
import math
import statistics
import threading
from typing import Callable, Optional, Union


class Operation(enum.IntEnum):
    """What to do with incoming lists."""

    COLLECT = 0
    AVERAGE = 1
    PRODUCT = 2

    @classmethod
    def parse(cls, value: Union["Operation", str, int]) -> "Operation":
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(f"unknown operation {value!r}") from None
        return cls(value)


class ListProcess:
    """Collect incoming items, or send the mean or product of each incoming list."""

    def __init__(
        self,
        operation: Union[Operation, str, int] = Operation.COLLECT,
        on_output: Optional[Callable[[list], None]] = None,
    ):
        self._lock = threading.Lock()
        self._data: list = []
        self._on_output = on_output
        self._operation = Operation.COLLECT
        self.operation = operation

    @property
    def operation(self) -> Operation:
        return self._operation

    @operation.setter
    def operation(self, value: Union[Operation, str, int]) -> None:
        self._operation = Operation.parse(value)

    @property
    def data(self) -> list:
        """The items collected so far."""
        with self._lock:
            return list(self._data)

    def _send(self, result: list) -> None:
        if self._on_output is not None:
            self._on_output(list(result))

    def process(self, *args) -> Optional[list]:
        """Handle a list, a number or any message according to the operation.

        Returns what was sent out, or None when items were only collected.
        """
        operation = self._operation
        if operation is Operation.COLLECT:
            with self._lock:
                self._data.extend(args)
            return None

        try:
            values = [float(arg) for arg in args]
        except (TypeError, ValueError):
            raise ValueError("only numbers can be averaged or multiplied") from None

        if operation is Operation.AVERAGE:
            if not values:
                raise ValueError("cannot average an empty list")
            result = [statistics.fmean(values), statistics.pstdev(values)]
        else:
            result = [math.prod(values, start=1.0)]
        self._send(result)
        return result

    def bang(self) -> list:
        """Send out the collected items and start a new collection."""
        with self._lock:
            data, self._data = self._data, []
        self._send(data)
        return data