"""Result types produced by the argument scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class OutcomeKind(str, Enum):
    """What a single call to ``next_option`` produced."""

    OPTION = "option"
    END = "end"
    ILLEGAL = "illegal"


class ScanError(str, Enum):
    """Reason attached to an illegal outcome."""

    ILLEGAL_OPTION = "illegal-option"
    MISSING_ARGUMENT = "missing-argument"


@dataclass(frozen=True, slots=True)
class ScanOutcome:
    """One step of a scan: a recognised option, end-of-options or an error."""

    kind: OutcomeKind
    option: Optional[str] = None
    value: Optional[str] = None
    error: Optional[ScanError] = None

    @classmethod
    def end(cls) -> "ScanOutcome":
        return cls(kind=OutcomeKind.END)

    @classmethod
    def recognised(cls, option: str, value: Optional[str] = None) -> "ScanOutcome":
        return cls(kind=OutcomeKind.OPTION, option=option, value=value)

    @classmethod
    def illegal(cls, option: str, error: ScanError = ScanError.ILLEGAL_OPTION) -> "ScanOutcome":
        return cls(kind=OutcomeKind.ILLEGAL, option=option, error=error)

    @property
    def is_end(self) -> bool:
        return self.kind is OutcomeKind.END

    @property
    def is_illegal(self) -> bool:
        return self.kind is OutcomeKind.ILLEGAL

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the outcome for JSON output."""

        payload: Dict[str, Any] = {"kind": self.kind.value}
        if self.option is not None:
            payload["option"] = self.option
        if self.value is not None:
            payload["value"] = self.value
        if self.error is not None:
            payload["error"] = self.error.value
        return payload
