"""Merge the content of two dictionaries."""

from __future__ import annotations

import copy
from typing import Callable, Mapping, Optional


class DictJoin:
    """Join a dictionary arriving at the left inlet with one stored from the right.

    Keys already held from the right inlet win over keys of the incoming one.
    """

    INLETS = ("left", "right")

    def __init__(
        self,
        initial: Optional[Mapping] = None,
        on_output: Optional[Callable[[dict], None]] = None,
    ):
        self._right: dict = dict(initial) if initial else {}
        self._merged: dict = {}
        self._on_output = on_output

    @property
    def right(self) -> dict:
        return dict(self._right)

    def dictionary(self, incoming: Mapping, inlet: int = 0) -> None:
        """Receive a dictionary at an inlet: store it (right) or join and send it (left)."""
        if inlet not in range(len(self.INLETS)):
            raise ValueError(f"no inlet {inlet}")
        if not isinstance(incoming, Mapping):
            raise TypeError("a dictionary is required")
        if inlet == 0:
            merged = copy.deepcopy(self._right)
            for key, value in incoming.items():
                merged.setdefault(key, copy.deepcopy(value))
            self._merged = merged
            self.bang()
        else:
            self._right = copy.deepcopy(dict(incoming))

    def bang(self) -> dict:
        """Resend the most recently joined dictionary."""
        result = copy.deepcopy(self._merged)
        if self._on_output is not None:
            self._on_output(result)
        return result