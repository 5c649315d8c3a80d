import logging
from decimal import Decimal
from typing import Any, Dict, Optional

from sugar_oracle.services.clock import Clock, quantize_to_minute

logger = logging.getLogger(__name__)

HALF_PERIOD = 1800  # seconds, one linear segment
FULL_PERIOD = 2 * HALF_PERIOD
MAX_PRICE = 5

def phase_of(elapsed: int) -> int:
    # floor modulo: always in [0, FULL_PERIOD), negative elapsed included
    return elapsed % FULL_PERIOD

def triangle_price(elapsed: int) -> int:
    """
    Triangular wave over elapsed seconds.
    Rises 0 -> MAX_PRICE over the first half period, falls back over the second.
    Integer floor division throughout; no float intermediates.
    """
    phase = phase_of(elapsed)
    if phase < HALF_PERIOD:
        return phase * MAX_PRICE // HALF_PERIOD
    return MAX_PRICE - (phase - HALF_PERIOD) * MAX_PRICE // HALF_PERIOD

class WaveformOracle:
    def __init__(self, starting_time: int, clock: Clock, log: Optional[logging.Logger] = None):
        self._starting_time = int(starting_time)
        self._clock = clock
        self._log = log or logger

    @classmethod
    def initialize(cls, clock: Clock, log: Optional[logging.Logger] = None) -> "WaveformOracle":
        oracle = cls(clock.now_quantized_to_minute(), clock, log)
        oracle._log.debug("Oracle initialized at %s", oracle.starting_time)
        return oracle

    @classmethod
    def restore(cls, starting_time: int, clock: Clock, log: Optional[logging.Logger] = None) -> "WaveformOracle":
        return cls(quantize_to_minute(starting_time), clock, log)

    @property
    def starting_time(self) -> int:
        return self._starting_time

    def now(self) -> int:
        return self._clock.now_quantized_to_minute()

    def elapsed(self, now: Optional[int] = None) -> int:
        if now is None:
            now = self.now()
        return now - self._starting_time

    def price_at(self, now: int) -> Decimal:
        price = triangle_price(self.elapsed(now))
        self._log.info("Price: %s", price)
        return Decimal(price)

    def get_price(self) -> Decimal:
        return self.price_at(self.now())

    def describe(self) -> Dict[str, Any]:
        now = self.now()
        elapsed = self.elapsed(now)
        phase = phase_of(elapsed)
        return {
            "starting_time": self._starting_time,
            "now": now,
            "elapsed": elapsed,
            "phase": phase,
            "segment": "rising" if phase < HALF_PERIOD else "falling",
            "price": Decimal(triangle_price(elapsed)),
        }
