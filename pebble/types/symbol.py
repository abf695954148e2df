from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Symbol:
    """A name in Pebble source, such as `x`, `def!` or `&`.

    Symbols are what the evaluator resolves through the environment chain;
    a string with the same text is a different value.
    """

    id: str

    def __post_init__(self):
        # Environment keys are plain names; interning keeps lookups cheap
        object.__setattr__(self, "id", sys.intern(self.id))

    @property
    def is_rest_marker(self) -> bool:
        """True for `&`, which introduces the variadic parameter of fn*."""
        return self.id == "&"

    def __str__(self):
        return self.id

