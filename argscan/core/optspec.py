"""Parsing of getopt-style option specification strings such as ``"a:hx"``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

VALUE_MARKER = ":"


@dataclass(frozen=True)
class OptionSpec:
    """Recognised option letters and whether each one takes a value.

    A letter followed by ``:`` requires a value. When a letter appears more
    than once, its first occurrence decides. ``:`` itself is never an option,
    so stray colons are ignored.
    """

    source: str
    _takes_value: Dict[str, bool] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def parse(cls, source: str) -> "OptionSpec":
        takes_value: Dict[str, bool] = {}
        for index, char in enumerate(source):
            if char == VALUE_MARKER or char in takes_value:
                continue
            following = source[index + 1 : index + 2]
            takes_value[char] = following == VALUE_MARKER
        return cls(source=source, _takes_value=takes_value)

    def recognises(self, char: str) -> bool:
        return char in self._takes_value

    def requires_value(self, char: str) -> bool:
        return self._takes_value.get(char, False)

    @property
    def letters(self) -> List[str]:
        return list(self._takes_value)

    def __str__(self) -> str:
        return self.source
