"""
Recommendation service module.
Fetches content, filters by platform, classifies, ranks, and falls back to emergency picks.
"""

from typing import Callable, Iterable, List, Optional  # type annotations for clarity

# Import project modules for data structures and components
from .models import ContentMetadata, RecommendationResult, ViewingContext  # core data classes
from .classifier import FoodFriendlyClassifier  # food-friendly scoring
from .ranking import ContextMatcher  # context match + ordering
from .platforms import filter_by_platform  # availability filter
from .fallback import FALLBACK_NOTICE, emergency_picks  # static backup picks
from .guards import CircuitBreaker, RateLimiter  # source protection

# Import loguru for console logging
from loguru import logger  # simple structured logger

# A content source is anything that returns content metadata when called
ContentSource = Callable[[], Iterable[ContentMetadata]]


class RecommendationService:
	"""
	High-level API combining the content source, classifier, and context matcher.
	Guards are optional and scoped to this instance.
	"""
	def __init__(
		self,
		source: ContentSource,  # callable returning the candidate catalog
		classifier: Optional[FoodFriendlyClassifier] = None,  # defaults to standard weights
		matcher: Optional[ContextMatcher] = None,  # defaults to standard weights
		circuit_breaker: Optional[CircuitBreaker] = None,  # skip the source while it keeps failing
		rate_limiter: Optional[RateLimiter] = None,  # cap calls to the source
		source_id: str = "catalog",  # key used by the guards
	):
		self.source = source
		self.classifier = classifier or FoodFriendlyClassifier()
		self.matcher = matcher or ContextMatcher()
		self.circuit_breaker = circuit_breaker
		self.rate_limiter = rate_limiter
		self.source_id = source_id

	def fetch_content(self, urgent: bool = False) -> Optional[List[ContentMetadata]]:
		"""
		Pull content from the source through the guards.
		Returns None when the source is unavailable (open circuit, rate limit, or error).
		"""
		if self.circuit_breaker is not None and self.circuit_breaker.is_open(self.source_id):
			logger.warning(f"[Service] Circuit open for '{self.source_id}', skipping source")
			return None
		if self.rate_limiter is not None and not self.rate_limiter.can_make_request(self.source_id, urgent=urgent):
			logger.warning(f"[Service] Rate limited on '{self.source_id}', skipping source")
			return None

		try:
			contents = list(self.source())
		except Exception as e:
			logger.warning(f"[Service] Content source '{self.source_id}' failed: {e}")
			if self.circuit_breaker is not None:
				self.circuit_breaker.record_failure(self.source_id)
			return None

		if self.circuit_breaker is not None:
			self.circuit_breaker.record_success(self.source_id)
		logger.debug(f"[Service] Source '{self.source_id}' returned {len(contents)} items")
		return contents

	def recommend(
		self,
		context: ViewingContext,
		limit: int = 3,
		exclude_ids: Optional[Iterable[str]] = None,
		urgent: bool = False,
	) -> RecommendationResult:
		"""Rank the catalog for the context, or serve emergency picks if nothing can be ranked."""
		if limit <= 0:  # nothing requested; not a source problem
			return RecommendationResult(recommendations=[])

		excluded = set(exclude_ids or [])
		contents = self.fetch_content(urgent=urgent)
		if contents is None:
			return self._fallback(context, limit, excluded, set(), reason="content source unavailable")

		# Titles of shown content, so the matching emergency pick is skipped too
		excluded_titles = {c.title.lower() for c in contents if c.id in excluded}

		available = filter_by_platform(contents, context.platforms)
		logger.debug(f"[Service] {len(available)} of {len(contents)} items on platforms {context.platforms or 'any'}")

		candidates = [(c, self.classifier.classify(c)) for c in available]
		ranked = self.matcher.rank(candidates, context, limit=limit, exclude_ids=excluded)
		if not ranked:
			return self._fallback(context, limit, excluded, excluded_titles, reason="no candidates after filtering")

		logger.info(f"[Service] Recommending {len(ranked)} items for {context.meal_type.value}/{context.mood.value}")
		return RecommendationResult(recommendations=ranked)

	def _fallback(self, context: ViewingContext, limit: int, exclude_ids, exclude_titles, reason: str) -> RecommendationResult:
		picks = emergency_picks(context, limit=limit, exclude_ids=exclude_ids, exclude_titles=exclude_titles)
		logger.info(f"[Service] Falling back to {len(picks)} emergency picks ({reason})")
		return RecommendationResult(recommendations=picks, used_fallback=True, notice=FALLBACK_NOTICE)
