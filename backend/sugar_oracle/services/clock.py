import time
from typing import Callable, Protocol, runtime_checkable

SECONDS_PER_MINUTE = 60

class ClockUnavailableError(RuntimeError):
    """The time source could not produce a reading."""

def quantize_to_minute(seconds: float) -> int:
    """Floor a unix timestamp to the start of its minute."""
    return int(seconds // SECONDS_PER_MINUTE) * SECONDS_PER_MINUTE

@runtime_checkable
class Clock(Protocol):
    """Source of the current time, in whole-minute unix seconds."""

    def now_quantized_to_minute(self) -> int:
        ...

class SystemClock:
    def __init__(self, source: Callable[[], float] = time.time):
        self._source = source

    def now_quantized_to_minute(self) -> int:
        try:
            seconds = self._source()
        except OSError as e:
            raise ClockUnavailableError(f"system clock read failed: {e}") from e
        return quantize_to_minute(seconds)
