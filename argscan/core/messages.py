"""Parameterised diagnostic messages."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from .text import replace, replace_all

DEFAULT_MESSAGES: Dict[str, str] = {
    "illegal_option": "illegal option: %s",
    "missing_argument": "option %s requires an argument",
}


class MessageBundle:
    """Lookup table of message templates keyed by name.

    A template with one parameter uses ``%s`` and one with two uses ``%s1``
    and ``%s2``. Three or more parameters are numbered from ``%s0``.
    """

    def __init__(self, messages: Mapping[str, str]) -> None:
        self._messages: Dict[str, str] = dict(messages)

    def keys(self) -> List[str]:
        return sorted(self._messages)

    def template(self, key: str) -> str:
        try:
            return self._messages[key]
        except KeyError:
            raise KeyError(f"Unknown message key: {key}") from None

    def text(self, key: str, *values: Optional[str]) -> str:
        template = self.template(key)
        substitutes = ["" if value is None else str(value) for value in values]
        if not substitutes:
            return template
        if len(substitutes) == 1:
            return replace(template, "%s", substitutes[0]) or ""
        if len(substitutes) == 2:
            return replace_all(template, ["%s1", "%s2"], substitutes) or ""
        placeholders = [f"%s{index}" for index in range(len(substitutes))]
        return replace_all(template, placeholders, substitutes) or ""

    def merged(self, overrides: Mapping[str, str]) -> "MessageBundle":
        combined = dict(self._messages)
        combined.update(overrides)
        return MessageBundle(combined)

    def with_defaults(self) -> "MessageBundle":
        """Return this bundle with any missing default message filled in."""

        combined = dict(DEFAULT_MESSAGES)
        combined.update(self._messages)
        return MessageBundle(combined)

    def __contains__(self, key: object) -> bool:
        return key in self._messages


DEFAULT_BUNDLE = MessageBundle(DEFAULT_MESSAGES)
