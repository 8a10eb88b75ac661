"""
Binary stream wrappers that measure transferred data as Size values.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import io
import time
from dataclasses import dataclass
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .log import get_logger
from .size import BYTE, Size
from .tools import fmt_type

logger = get_logger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Progress:
    """
    Snapshot of a ProgressReader.

    Attributes:
        n (Size)                        : Data read since the previous update
        total (Size)                    : Data read in total
        error (BaseException | None)    : Error raised by the wrapped stream, if any
        eof (bool)                      : True once the wrapped stream reported end of file
    """
    n: Size = Size()
    total: Size = Size()
    error: BaseException | None = None
    eof: bool = False

    @property
    def done(self) -> bool:
        """True once all data has been read."""
        return self.eof


class ProgressReader(io.RawIOBase):
    """
    A readable stream that reports read progress to a callback.

    The update callback receives a Progress after a read when any of these holds:

    - update_every and update_after are both zero or negative, then every read is reported,
    - at least update_after of data was read since the previous update,
    - update_every > 0 and it is the first read, or update_every seconds passed since the previous update.

    At end of file, or when the wrapped stream raises, the callback is called one final time and never
    again. Subsequent reads return end of file, or re-raise the stored error.

    Args:
        raw: Binary stream to read from.
        update: Progress callback, Signature: update(progress: Progress) -> None
        update_every: Minimum number of seconds between two updates.
        update_after: Minimum amount of data between two updates.
        clock: Monotonic time source in seconds.

    Example:
        >>> with open("image.iso", "rb") as f:
        ...     reader = ProgressReader(f, update=print, update_after=64 * MB)
        ...     shutil.copyfileobj(reader, sink)
    """

    def __init__(
            self,
            raw: Any,
            update: Callable[[Progress], None] | None = None,
            update_every: float = 0.0,
            update_after: Size = Size(),
            *,
            clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if raw is None:
            raise ValueError("ProgressReader stream required")
        if not isinstance(update_after, Size):
            raise TypeError(f"update_after must be a Size, but found {fmt_type(update_after)}")

        super().__init__()
        self.raw = raw
        self.update = update
        self.update_every = update_every
        self.update_after = update_after
        self._clock = clock

        self._n = 0
        self._total = 0
        self._last_update: float | None = None
        self._error: BaseException | None = None
        self._eof = False

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int | None:
        if self._error is not None:
            raise self._error
        if self._eof:
            return 0

        try:
            n = _readinto(self.raw, buffer)
        except Exception as e:
            self._error = e
            logger.debug(f"read failed after {self._total} bytes: {e!r}")
            self._notify()
            raise
        if n is None:
            return None

        self._n += n
        self._total += n
        if n == 0 and len(buffer) > 0:
            self._eof = True
            logger.debug(f"end of file after {self._total} bytes")
            self._notify()
            return 0

        self._maybe_notify()
        return n

    def progress(self) -> Progress:
        """Current progress, without resetting the update counter."""
        return Progress(n=BYTE * self._n, total=BYTE * self._total, error=self._error, eof=self._eof)

    def _maybe_notify(self) -> None:
        if self.update is None:
            return

        if self.update_every <= 0 and self.update_after.bits <= 0:
            self._notify()
        elif self.update_after.bits > 0 and BYTE * self._n >= self.update_after:
            self._notify()
        elif self.update_every > 0:
            now = self._clock()
            if self._last_update is None or now - self._last_update >= self.update_every:
                self._last_update = now
                self._notify()

    def _notify(self) -> None:
        if self.update is not None:
            self.update(self.progress())
        self._n = 0


class LimitedReader(io.RawIOBase):
    """
    A readable stream that returns at most n of data from the wrapped stream, then end of file.

    Sizes that are not a whole number of bytes are truncated to whole bytes.
    """

    def __init__(self, raw: Any, n: Size) -> None:
        if raw is None:
            raise ValueError("LimitedReader stream required")
        if not isinstance(n, Size):
            raise TypeError(f"limit must be a Size, but found {fmt_type(n)}")

        super().__init__()
        self.raw = raw
        self.remaining = max(n.bits, 0) // BYTE.bits

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int | None:
        if self.remaining <= 0:
            return 0
        view = memoryview(buffer).cast("B")
        n = _readinto(self.raw, view[:self.remaining])
        if n:
            self.remaining -= n
        return n


# Methods --------------------------------------------------------------------------------------------------------------

def limit_reader(raw: Any, n: Size) -> LimitedReader:
    """Wrap raw so that reading stops with end of file after n of data."""
    return LimitedReader(raw, n)


# Helper Functions -----------------------------------------------------------------------------------------------------

def _readinto(raw: Any, buffer) -> int | None:
    """Read into buffer from raw, with a read() fallback for streams lacking readinto()."""
    readinto = getattr(raw, "readinto", None)
    if readinto is not None:
        return readinto(buffer)

    data = raw.read(len(buffer))
    if data is None:
        return None
    n = len(data)
    memoryview(buffer).cast("B")[:n] = data
    return n
