#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import io
from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from datasize.io import Progress

DATA_SIZE = 10 * 1024

# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def payload() -> bytes:
    """Deterministic payload of DATA_SIZE bytes."""
    block = b"0123456789ABCDEF" * 64  # 1024 bytes per block
    repeats, remainder = divmod(DATA_SIZE, len(block))
    return block * repeats + block[:remainder]


@pytest.fixture
def stream(payload: bytes) -> io.BytesIO:
    """In-memory binary stream over the payload."""
    return io.BytesIO(payload)


@pytest.fixture
def callback_tracker() -> tuple[Callable[[Progress], None], list[Progress]]:
    """Fixture that provides a progress callback and a list to track its calls."""
    calls = []

    def tracker(progress: Progress) -> None:
        calls.append(progress)

    return tracker, calls
