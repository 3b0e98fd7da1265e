# topmark:header:start
#
#   project      : OptBind
#   file         : sinks.py
#   file_relpath : src/optbind/options/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Caller-owned output file sink.

`OutputFile` is a small, lazily-opened text sink that a file option can open at a
path taken from the command line. Opening never raises: a failed open leaves the sink
closed, with `failed` set and the cause in `error`, so the caller checks the
resource's own state (the option layer only reports it).

The sink is owned by the caller. Options never close it.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING

from optbind.config.logging import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from optbind.config.logging import OptbindLogger

logger: OptbindLogger = get_logger(__name__)


class OutputFile:
    """A text output file that is opened on demand.

    Writes to a sink that is not open are silently discarded, the same way a closed
    output stream swallows output.

    Attributes:
        path (Path | None): Path of the last open attempt, if any.
        error (OSError | ValueError | None): The exception raised by the last failed open,
            if any (``ValueError`` for paths the OS cannot represent, such as embedded NUL).
        encoding (str): Text encoding used when opening.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.path: Path | None = None
        self.error: OSError | ValueError | None = None
        self.encoding = encoding
        self._handle: IO[str] | None = None

    @property
    def is_open(self) -> bool:
        """Return True if a file handle is currently open."""
        return self._handle is not None and not self._handle.closed

    @property
    def failed(self) -> bool:
        """Return True if the last open attempt failed."""
        return self.error is not None

    def open(self, path: str | Path) -> bool:
        """Open ``path`` for writing, creating or truncating it.

        A handle that is already open is closed first.

        Args:
            path (str | Path): Destination file.

        Returns:
            bool: True if the file is now open, False if opening failed.
        """
        self.close()
        self.path = Path(path)
        self.error = None
        try:
            self._handle = self.path.open("w", encoding=self.encoding)
        except (OSError, ValueError) as exc:
            logger.debug("Cannot open output file %s: %s", self.path, exc)
            self.error = exc
            self._handle = None
            return False
        logger.trace("Opened output file %s", self.path)
        return True

    def write(self, text: str) -> int:
        """Write ``text`` to the open file.

        Args:
            text (str): Text to write.

        Returns:
            int: Number of characters written (0 when the sink is not open).
        """
        if self._handle is None or self._handle.closed:
            return 0
        return self._handle.write(text)

    def flush(self) -> None:
        """Flush the open file, if any."""
        if self._handle is not None and not self._handle.closed:
            self._handle.flush()

    def close(self) -> None:
        """Close the open file, if any."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> OutputFile:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "open" if self.is_open else ("failed" if self.failed else "closed")
        return f"OutputFile({str(self.path) if self.path else None!r}, {state})"
