"""Small string substitution helpers used for message templates and HTML output."""

from __future__ import annotations

import re
from typing import Optional, Sequence

XML_CHARS = ["&", "<", ">", '"']
XML_ENTITIES = ["&amp;", "&lt;", "&gt;", "&quot;"]

_ENTITY_CHARS = {"&lt;": "<", "&gt;": ">", "&quot;": '"', "&nbsp;": " "}
_ANY_ENTITY = re.compile(r"&[^;]*;")


def replace(text: Optional[str], target: str, replacement: str) -> Optional[str]:
    """Replace every occurrence of *target* in *text*.

    Occurrences are replaced left to right and the inserted text is never
    rescanned. ``None`` passes through unchanged.
    """

    if text is None:
        return None
    if not target:
        return text
    return text.replace(target, replacement)


def replace_all(
    text: Optional[str],
    targets: Sequence[str],
    replacements: Sequence[str],
) -> Optional[str]:
    """Apply :func:`replace` for each target in order.

    Targets without a matching replacement are removed.
    """

    if text is None:
        return None
    result = text
    for index, target in enumerate(targets):
        replacement = replacements[index] if index < len(replacements) else ""
        result = replace(result, target, replacement)
    return result


def xml_chars_to_entities(text: Optional[str]) -> Optional[str]:
    """Replace ``&``, ``<``, ``>`` and ``"`` with their XML entities.

    ``&`` is replaced before the others. ``None`` passes through unchanged.
    """

    return replace_all(text, XML_CHARS, XML_ENTITIES)


def xml_entities_to_chars(text: Optional[str]) -> Optional[str]:
    """Turn the known entities back into characters and drop any other entity.

    ``&nbsp;`` becomes a space. ``None`` passes through unchanged.
    """

    if text is None:
        return None

    def _substitute(match: re.Match[str]) -> str:
        entity = match.group(0)
        if entity == "&amp;":
            return "&"
        return _ENTITY_CHARS.get(entity, "")

    return _ANY_ENTITY.sub(_substitute, text)
