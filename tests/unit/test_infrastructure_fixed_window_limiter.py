"""Unit tests for FixedWindowRateLimiter.

Tests cover:
- Admission up to the limit, denial after
- Window replacement once reset_at has passed
- Independent keys
- Argument validation (programming errors raise)
- reset() / clear()
- Lazy sweep of expired counters
- No lost updates under thread contention
"""

import threading
from datetime import timedelta

import pytest

from gatekeeper.infrastructure.rate_limit import FixedWindowRateLimiter
from tests.utils.clock import T0, ManualClock

WINDOW = timedelta(minutes=15)
KEY = "login:203.0.113.7"


@pytest.fixture
def limiter(clock):
    return FixedWindowRateLimiter(clock, sweep_interval=timedelta(seconds=60))


@pytest.mark.unit
class TestFixedWindowAdmission:
    def test_six_attempts_against_limit_five(self, limiter):
        # Act
        results = [limiter.attempt(KEY, 5, WINDOW) for _ in range(6)]

        # Assert
        assert [r.admitted for r in results] == [True] * 5 + [False]
        assert [r.remaining for r in results] == [4, 3, 2, 1, 0, 0]
        assert all(r.reset_at == T0 + timedelta(seconds=900) for r in results)
        assert all(r.limit == 5 for r in results)

    @pytest.mark.parametrize("limit", [1, 2, 7])
    def test_limit_plus_one_is_denied(self, limiter, limit):
        results = [limiter.attempt(KEY, limit, WINDOW) for _ in range(limit + 1)]

        assert all(r.admitted for r in results[:-1])
        assert not results[-1].admitted

    def test_window_does_not_slide_on_later_attempts(self, limiter, clock):
        first = limiter.attempt(KEY, 5, WINDOW)
        clock.advance(minutes=10)

        later = limiter.attempt(KEY, 5, WINDOW)

        assert later.reset_at == first.reset_at

    def test_denied_attempts_keep_counting(self, limiter):
        for _ in range(3):
            limiter.attempt(KEY, 1, WINDOW)

        result = limiter.attempt(KEY, 1, WINDOW)

        assert not result.admitted
        assert result.remaining == 0

    def test_new_window_after_reset_at(self, limiter, clock):
        # Arrange: exhaust the window
        for _ in range(6):
            limiter.attempt(KEY, 5, WINDOW)

        # Act
        clock.advance(WINDOW)
        result = limiter.attempt(KEY, 5, WINDOW)

        # Assert
        assert result.admitted
        assert result.remaining == 4
        assert result.reset_at == T0 + 2 * WINDOW

    def test_keys_are_independent(self, limiter):
        limiter.attempt(KEY, 1, WINDOW)

        other = limiter.attempt("login:198.51.100.1", 1, WINDOW)

        assert other.admitted

    def test_retry_after_rounds_up_to_whole_seconds(self, limiter, clock):
        limiter.attempt(KEY, 1, WINDOW)
        clock.advance(seconds=10.5)

        denied = limiter.attempt(KEY, 1, WINDOW)

        assert denied.retry_after_seconds(clock.now()) == 890


@pytest.mark.unit
class TestFixedWindowArguments:
    @pytest.mark.parametrize(
        ("key", "limit", "window"),
        [
            ("", 5, WINDOW),
            (KEY, 0, WINDOW),
            (KEY, 5, timedelta(0)),
            (KEY, 5, timedelta(seconds=-1)),
        ],
        ids=["empty-key", "zero-limit", "zero-window", "negative-window"],
    )
    def test_invalid_arguments_raise_value_error(self, limiter, key, limit, window):
        with pytest.raises(ValueError):
            limiter.attempt(key, limit, window)


@pytest.mark.unit
class TestFixedWindowLifecycle:
    def test_reset_drops_one_counter(self, limiter):
        limiter.attempt(KEY, 1, WINDOW)
        limiter.attempt("other", 1, WINDOW)

        limiter.reset(KEY)

        assert limiter.attempt(KEY, 1, WINDOW).admitted
        assert not limiter.attempt("other", 1, WINDOW).admitted

    def test_reset_unknown_key_is_noop(self, limiter):
        limiter.reset("never-seen")

        assert len(limiter) == 0

    def test_clear_drops_all_counters(self, limiter):
        limiter.attempt(KEY, 1, WINDOW)
        limiter.attempt("other", 1, WINDOW)

        limiter.clear()

        assert len(limiter) == 0
        assert limiter.attempt(KEY, 1, WINDOW).admitted

    def test_expired_counters_are_swept_lazily(self, limiter, clock):
        # Arrange
        limiter.attempt("a", 5, timedelta(seconds=30))
        limiter.attempt("b", 5, timedelta(seconds=30))
        assert len(limiter) == 2

        # Act: past both windows and the sweep interval
        clock.advance(seconds=61)
        limiter.attempt("c", 5, WINDOW)

        # Assert
        assert len(limiter) == 1

    def test_sweep_runs_at_most_once_per_interval(self, limiter, clock):
        limiter.attempt("a", 5, timedelta(seconds=1))
        clock.advance(seconds=2)

        # First attempt ran the sweep at T0; next one is not due until T0+60s
        limiter.attempt("b", 5, WINDOW)

        assert len(limiter) == 2


@pytest.mark.unit
class TestFixedWindowConcurrency:
    def test_no_lost_updates_across_threads(self):
        # Arrange
        limiter = FixedWindowRateLimiter(ManualClock())
        threads_count = 8
        attempts_per_thread = 250
        limit = 1000
        admitted = []
        lock = threading.Lock()
        barrier = threading.Barrier(threads_count)

        def worker():
            barrier.wait()
            local = 0
            for _ in range(attempts_per_thread):
                if limiter.attempt(KEY, limit, WINDOW).admitted:
                    local += 1
            with lock:
                admitted.append(local)

        # Act
        threads = [threading.Thread(target=worker) for _ in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        # Assert: 2000 attempts, exactly `limit` admitted
        assert sum(admitted) == limit
        final = limiter.attempt(KEY, limit, WINDOW)
        assert not final.admitted
        assert final.remaining == 0
