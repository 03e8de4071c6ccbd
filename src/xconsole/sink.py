"""
ConsoleSink: the four-channel writer underneath every console method.

Channels mirror the classic console object:

    log    plain output        -> stdout
    info   informational       -> stdout
    warn   warnings            -> stderr
    error  errors              -> stderr

Each channel accepts any number of parts, converts them with str() and
joins them with the separator. Streams left as None are looked up on
``sys`` at write time, so redirection (and pytest's capsys) is honoured.

Any object exposing the same four callables can stand in for a sink.
"""

import sys
from typing import Any, Optional, TextIO


# Channel names, in the order the engine documents them
CHANNELS = ('log', 'warn', 'error', 'info')


class ConsoleSink:
    """Default sink writing to stdout/stderr.

    Usage::

        sink = ConsoleSink()
        sink.log("> ", "hello")      # ">  hello" on stdout
        sink.warn("careful")         # "careful" on stderr
    """

    def __init__(self, out: TextIO = None, err: TextIO = None, sep: str = ' '):
        self.out = out
        self.err = err
        self.sep = sep

    def _write(self, stream: Optional[TextIO], parts: tuple) -> None:
        print(self.sep.join(str(p) for p in parts), file=stream)

    def log(self, *parts: Any) -> None:
        """Plain channel."""
        self._write(self.out if self.out is not None else sys.stdout, parts)

    def info(self, *parts: Any) -> None:
        """Informational channel."""
        self._write(self.out if self.out is not None else sys.stdout, parts)

    def warn(self, *parts: Any) -> None:
        """Warning channel."""
        self._write(self.err if self.err is not None else sys.stderr, parts)

    def error(self, *parts: Any) -> None:
        """Error channel."""
        self._write(self.err if self.err is not None else sys.stderr, parts)
