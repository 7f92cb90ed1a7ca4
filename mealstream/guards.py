"""
Guards for outbound content-source calls: a failure-counting circuit breaker
and a sliding-window rate limiter.

Both are plain per-instance objects handed to the recommendation service; they
keep no state across processes and are not thread-safe.
"""

import math
import time
from typing import Callable, Dict, List, Optional

from loguru import logger


class CircuitBreaker:
	"""Opens a source after `max_failures` consecutive failures, closes again after `reset_timeout` seconds."""

	def __init__(self, max_failures: int = 5, reset_timeout: float = 60.0, clock: Callable[[], float] = time.monotonic):
		self.max_failures = max_failures
		self.reset_timeout = reset_timeout
		self._clock = clock
		self._failures: Dict[str, int] = {}
		self._last_failure: Dict[str, float] = {}

	def is_open(self, source_id: str) -> bool:
		failures = self._failures.get(source_id, 0)
		if failures < self.max_failures:
			return False
		if self._clock() - self._last_failure.get(source_id, 0.0) > self.reset_timeout:
			logger.info(f"[Guards] Circuit for '{source_id}' reset after {self.reset_timeout}s")
			self._failures[source_id] = 0
			return False
		return True

	def record_failure(self, source_id: str) -> None:
		self._failures[source_id] = self._failures.get(source_id, 0) + 1
		self._last_failure[source_id] = self._clock()
		if self._failures[source_id] == self.max_failures:
			logger.warning(f"[Guards] Circuit for '{source_id}' opened after {self.max_failures} failures")

	def record_success(self, source_id: str) -> None:
		self._failures[source_id] = 0

	def failures(self, source_id: str) -> int:
		return self._failures.get(source_id, 0)

	def reset(self, source_id: Optional[str] = None) -> None:
		"""Forget failures for one source, or for all of them."""
		if source_id is None:
			self._failures.clear()
			self._last_failure.clear()
		else:
			self._failures.pop(source_id, None)
			self._last_failure.pop(source_id, None)


class RateLimiter:
	"""
	Allows at most `requests_per_minute` calls per source within a sliding window.
	Urgent calls (the user is about to run out of time) get a 1.5x burst allowance.
	"""

	def __init__(
		self,
		requests_per_minute: int = 100,
		urgent_multiplier: float = 1.5,
		window: float = 60.0,
		clock: Callable[[], float] = time.monotonic,
	):
		self.requests_per_minute = requests_per_minute
		self.urgent_multiplier = urgent_multiplier
		self.window = window
		self._clock = clock
		self._requests: Dict[str, List[float]] = {}

	def can_make_request(self, source_id: str, urgent: bool = False) -> bool:
		"""Record and allow the request if the source is under its limit."""
		now = self._clock()
		recent = [t for t in self._requests.get(source_id, []) if now - t < self.window]
		limit = math.floor(self.requests_per_minute * self.urgent_multiplier) if urgent else self.requests_per_minute

		if len(recent) >= limit:
			self._requests[source_id] = recent
			logger.warning(f"[Guards] Rate limit reached for '{source_id}' ({len(recent)}/{limit})")
			return False

		recent.append(now)
		self._requests[source_id] = recent
		return True

	def reset(self, source_id: Optional[str] = None) -> None:
		if source_id is None:
			self._requests.clear()
		else:
			self._requests.pop(source_id, None)
