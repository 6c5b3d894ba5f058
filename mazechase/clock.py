"""
Simulation clock.

Games that run on fixed ticks read time from a SimulationClock instead of
the wall clock. Timers (effects, cooldowns, respawns) store the clock's
millisecond timestamp when they start and compare against `now_ms` later,
which makes every timer deterministic under test: advance the clock and
the timers follow.

Usage:
    clock = SimulationClock(tick_ms=50)
    clock.tick()              # one fixed step
    clock.advance(3000)       # jump three seconds
    clock.elapsed_since(t0)
"""


class SimulationClock:
    """Monotonic millisecond clock advanced explicitly by the game loop.

    Attributes:
        tick_ms: Length of one fixed simulation step in milliseconds
    """

    def __init__(self, tick_ms: int = 50, start_ms: int = 0):
        """Initialize the clock.

        Args:
            tick_ms: Length of one tick in milliseconds (must be positive)
            start_ms: Initial timestamp

        Raises:
            ValueError: If tick_ms is not positive or start_ms is negative
        """
        if tick_ms <= 0:
            raise ValueError(f'Tick length must be positive, got {tick_ms}')
        if start_ms < 0:
            raise ValueError(f'Start time must be non-negative, got {start_ms}')
        self.tick_ms = tick_ms
        self._start_ms = start_ms
        self._now_ms = start_ms
        self._tick_count = 0

    @property
    def now_ms(self) -> int:
        """Current simulation time in milliseconds."""
        return self._now_ms

    @property
    def tick_count(self) -> int:
        """Number of whole ticks taken since the last reset."""
        return self._tick_count

    def tick(self) -> int:
        """Advance by one tick. Returns the new timestamp."""
        self._tick_count += 1
        self._now_ms += self.tick_ms
        return self._now_ms

    def advance(self, ms: int) -> int:
        """Advance by an arbitrary number of milliseconds.

        Does not count as a tick; used by tests and by callers that need to
        skip time.

        Raises:
            ValueError: If ms is negative (the clock never runs backwards)
        """
        if ms < 0:
            raise ValueError(f'Clock advance must be non-negative, got {ms}')
        self._now_ms += ms
        return self._now_ms

    def elapsed_since(self, timestamp_ms: int) -> int:
        """Milliseconds elapsed since a timestamp taken from this clock."""
        return self._now_ms - timestamp_ms

    def reset(self) -> None:
        """Return to the start time and zero the tick counter."""
        self._now_ms = self._start_ms
        self._tick_count = 0

    def __repr__(self) -> str:
        return f"SimulationClock(now_ms={self._now_ms}, ticks={self._tick_count})"
