"""
Tests for the circuit breaker and rate limiter guarding the content source.
"""

from mealstream.guards import CircuitBreaker, RateLimiter


class FakeClock:
	def __init__(self, now=1000.0):
		self.now = now

	def __call__(self):
		return self.now


def test_circuit_opens_after_max_failures_and_resets_after_timeout():
	clock = FakeClock()
	breaker = CircuitBreaker(max_failures=2, reset_timeout=10.0, clock=clock)

	assert not breaker.is_open('src')
	breaker.record_failure('src')
	assert not breaker.is_open('src')
	breaker.record_failure('src')
	assert breaker.is_open('src')

	clock.now += 5
	assert breaker.is_open('src')
	clock.now += 6
	assert not breaker.is_open('src')
	assert breaker.failures('src') == 0


def test_success_clears_failures():
	breaker = CircuitBreaker(max_failures=2, clock=FakeClock())
	breaker.record_failure('src')
	breaker.record_success('src')
	breaker.record_failure('src')
	assert not breaker.is_open('src')


def test_breaker_tracks_sources_independently():
	breaker = CircuitBreaker(max_failures=1, clock=FakeClock())
	breaker.record_failure('tmdb')
	assert breaker.is_open('tmdb')
	assert not breaker.is_open('catalog')
	breaker.reset('tmdb')
	assert not breaker.is_open('tmdb')

	breaker.record_failure('a')
	breaker.record_failure('b')
	breaker.reset()
	assert not breaker.is_open('a') and not breaker.is_open('b')


def test_rate_limiter_window():
	clock = FakeClock()
	limiter = RateLimiter(requests_per_minute=2, clock=clock)

	assert limiter.can_make_request('src')
	assert limiter.can_make_request('src')
	assert not limiter.can_make_request('src')
	# urgent requests get floor(2 * 1.5) = 3 slots
	assert limiter.can_make_request('src', urgent=True)
	assert not limiter.can_make_request('src', urgent=True)

	clock.now += 61
	assert limiter.can_make_request('src')


def test_rate_limiter_reset():
	limiter = RateLimiter(requests_per_minute=1, clock=FakeClock())
	assert limiter.can_make_request('src')
	assert not limiter.can_make_request('src')
	limiter.reset('src')
	assert limiter.can_make_request('src')
