import pytest
from ai import RateLimiter, RateLimitExceeded
from ai.rate_limit import DEFAULT_KEY

NOW = 1_800_000_000.0
HOUR = 3600.0


class FakeClock:
    def __init__(self, now: float = NOW):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestRateLimiter:

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def limiter(self, clock):
        return RateLimiter(limit=100, window=HOUR, clock=clock)

    def test_accepts_and_records(self, limiter):
        limiter.check()
        assert limiter.requests[DEFAULT_KEY] == [NOW]

    def test_rejects_when_window_full(self, limiter):
        recent = [NOW - i for i in range(1, 101)]
        limiter.requests[DEFAULT_KEY] = list(recent)

        with pytest.raises(RateLimitExceeded):
            limiter.check()

        # Rejection leaves stored state untouched
        assert limiter.requests[DEFAULT_KEY] == recent

    def test_stale_entries_are_pruned(self, limiter):
        limiter.requests[DEFAULT_KEY] = [NOW - HOUR - i for i in range(1, 101)]

        limiter.check()

        assert limiter.requests[DEFAULT_KEY] == [NOW]

    def test_entry_exactly_one_hour_old_has_expired(self, limiter):
        limiter.requests[DEFAULT_KEY] = [NOW - HOUR] + [NOW - 1] * 99
        limiter.check()
        assert len(limiter.requests[DEFAULT_KEY]) == 100

    def test_window_slides(self, limiter, clock):
        for _ in range(100):
            limiter.check()
        with pytest.raises(RateLimitExceeded):
            limiter.check()

        clock.now += HOUR + 1
        limiter.check()
        assert len(limiter.requests[DEFAULT_KEY]) == 1

    def test_recent_does_not_mutate(self, limiter):
        limiter.requests[DEFAULT_KEY] = [NOW - HOUR - 5, NOW - 5]
        assert limiter.recent() == [NOW - 5]
        assert len(limiter.requests[DEFAULT_KEY]) == 2
