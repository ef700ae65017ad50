"""Post a greeting and send it out."""

from __future__ import annotations

from typing import Callable, Optional


class HelloWorld:
    """Print the greeting and pass it to the output callback on each bang."""

    def __init__(
        self,
        greeting: str = "hello world",
        on_output: Optional[Callable[[str], None]] = None,
    ):
        self.greeting = str(greeting)
        self._on_output = on_output

    def bang(self) -> str:
        """Post the greeting and send it out; return it."""
        the_greeting = self.greeting
        print(the_greeting)
        if self._on_output is not None:
            self._on_output(the_greeting)
        return the_greeting