"""Short-option argument scanner in the style of Unix ``getopt``.

Typical use::

    scanner = ArgumentScanner.from_args(sys.argv[1:], "a:hx")
    for outcome in scanner:
        if outcome.is_illegal:
            usage()
        elif outcome.option == "a":
            name = outcome.value
        ...
    files = scanner.remaining_arguments()

Options are scanned until the first token that does not start with ``-``;
a lone ``-`` or ``--`` ends option scanning and is consumed. Options are not
permuted: once a positional argument is seen, every later token is positional
too, even when it looks like an option.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from .messages import DEFAULT_BUNDLE, MessageBundle
from .optspec import OptionSpec
from .outcome import ScanError, ScanOutcome
from .sources import PathLike, load_source

_LOG = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], None]

OPTION_PREFIX = "-"
END_MARKERS = frozenset({"-", "--"})


def stderr_sink(message: str) -> None:
    """Write a diagnostic line to standard error."""

    print(message, file=sys.stderr)


@dataclass
class ScannerConfig:
    """Everything needed to build an :class:`ArgumentScanner`.

    ``source`` is either a sequence of arguments (which may start with an
    ``@path`` indirection) or a path to an argument file.
    """

    source: Union[Sequence[str], PathLike]
    spec: str
    diagnostics: bool = True
    sink: Optional[DiagnosticSink] = None
    messages: Optional[MessageBundle] = None


@dataclass(slots=True)
class ScanCursor:
    """Position of the scan within the argument vector."""

    token_index: int = 0
    char_offset: int = 0

    @property
    def in_cluster(self) -> bool:
        return self.char_offset > 0

    def next_token(self) -> None:
        self.token_index += 1
        self.char_offset = 0


class ArgumentScanner:
    """Single-pass scanner over a fixed argument vector.

    The argument file, if any, is read during construction; an unreadable
    file raises :class:`~argscan.core.sources.UnreadableArgumentFile`.
    Scanning errors never raise: they are reported through the returned
    :class:`ScanOutcome` and :attr:`offending_character`.
    """

    def __init__(self, config: ScannerConfig) -> None:
        self._argv: Tuple[str, ...] = load_source(config.source)
        self._spec = OptionSpec.parse(config.spec)
        self._diagnostics = config.diagnostics
        self._sink = config.sink or stderr_sink
        self._messages = config.messages.with_defaults() if config.messages else DEFAULT_BUNDLE
        self._cursor = ScanCursor()
        self._value: Optional[str] = None
        self._offending: Optional[str] = None
        self._finished = False

    @classmethod
    def from_args(
        cls,
        argv: Sequence[str],
        spec: str,
        diagnostics: bool = True,
        sink: Optional[DiagnosticSink] = None,
    ) -> "ArgumentScanner":
        return cls(ScannerConfig(source=list(argv), spec=spec, diagnostics=diagnostics, sink=sink))

    @classmethod
    def from_file(
        cls,
        path: PathLike,
        spec: str,
        diagnostics: bool = True,
        sink: Optional[DiagnosticSink] = None,
    ) -> "ArgumentScanner":
        return cls(ScannerConfig(source=path, spec=spec, diagnostics=diagnostics, sink=sink))

    @property
    def arguments(self) -> Tuple[str, ...]:
        return self._argv

    @property
    def spec(self) -> OptionSpec:
        return self._spec

    @property
    def cursor(self) -> ScanCursor:
        return ScanCursor(self._cursor.token_index, self._cursor.char_offset)

    @property
    def current_value(self) -> Optional[str]:
        """Value captured by the most recent :meth:`next_option` call."""

        return self._value

    @property
    def offending_character(self) -> Optional[str]:
        """Character behind the most recent illegal or missing-argument outcome."""

        return self._offending

    @property
    def finished(self) -> bool:
        return self._finished

    def next_option(self) -> ScanOutcome:
        """Scan the next option and return what was found."""

        if self._finished:
            return ScanOutcome.end()

        cursor = self._cursor
        if not cursor.in_cluster:
            token = self._token()
            if token is None or not token.startswith(OPTION_PREFIX):
                return self._finish()
            if token in END_MARKERS:
                cursor.next_token()
                return self._finish()

        token = self._argv[cursor.token_index]
        cursor.char_offset += 1
        char = token[cursor.char_offset]
        last_in_token = cursor.char_offset + 1 >= len(token)

        if not self._spec.recognises(char):
            if last_in_token:
                cursor.next_token()
            return self._fail(char, ScanError.ILLEGAL_OPTION)

        if self._spec.requires_value(char):
            if not last_in_token:
                value = token[cursor.char_offset + 1 :]
                cursor.next_token()
            elif cursor.token_index + 1 < len(self._argv):
                value = self._argv[cursor.token_index + 1]
                cursor.next_token()
                cursor.next_token()
            else:
                cursor.next_token()
                return self._fail(char, ScanError.MISSING_ARGUMENT)
            self._value = value
            _LOG.debug("Option -%s with value %r", char, value)
            return ScanOutcome.recognised(char, value)

        if last_in_token:
            cursor.next_token()
        self._value = None
        _LOG.debug("Option -%s", char)
        return ScanOutcome.recognised(char)

    def remaining_arguments(self) -> List[str]:
        """Arguments from the current position to the end, in order."""

        return list(self._argv[self._cursor.token_index :])

    def __iter__(self) -> Iterator[ScanOutcome]:
        while True:
            outcome = self.next_option()
            if outcome.is_end:
                return
            yield outcome

    def scan(self) -> List[ScanOutcome]:
        """Consume every option and return the outcomes, end excluded."""

        return list(self)

    def _token(self) -> Optional[str]:
        index = self._cursor.token_index
        if index >= len(self._argv):
            return None
        return self._argv[index]

    def _finish(self) -> ScanOutcome:
        self._finished = True
        self._value = None
        _LOG.debug("End of options at argument %d", self._cursor.token_index)
        return ScanOutcome.end()

    def _fail(self, char: str, error: ScanError) -> ScanOutcome:
        self._offending = char
        self._value = None
        if self._diagnostics:
            key = "missing_argument" if error is ScanError.MISSING_ARGUMENT else "illegal_option"
            self._sink(self._messages.text(key, char))
        _LOG.debug("Rejected option -%s (%s)", char, error.value)
        return ScanOutcome.illegal(char, error)
