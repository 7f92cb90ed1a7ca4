"""
Ranking module.
Blends the food-friendly score with the user's viewing context to produce a ranked shortlist.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from .models import (
	ContentMetadata,
	EatingStyle,
	FoodFriendlyScore,
	MealType,
	Mood,
	Recommendation,
	ViewingContext,
)
from .genres import normalize_genres
from .platforms import direct_link


class ContextMatcher:
	"""
	Computes a 1..10 match score per candidate from:
	- duration fit against the time the user has
	- mood, meal type and eating style bonuses
	then orders candidates by food_weight * food-friendly + match_weight * match.
	"""

	def __init__(
		self,
		food_weight: float = 0.6,
		match_weight: float = 0.4,
		base_match_score: int = 5,
		duration_grace_minutes: int = 10,
		recent_year: int = 2015,
	):
		self.food_weight = food_weight
		self.match_weight = match_weight
		self.base_match_score = base_match_score
		self.duration_grace_minutes = duration_grace_minutes
		self.recent_year = recent_year

	def match_score(self, content: ContentMetadata, score: FoodFriendlyScore, context: ViewingContext) -> int:
		"""
		How well one candidate fits the context, clamped to [1..10].
		Content without a runtime gets no runtime-based adjustments.
		Genre labels are normalized first, so "Comedy" and "comedies" count as comedy.
		"""
		match = self.base_match_score
		match += self._duration_fit(content.runtime, context.duration)
		match += self._mood_fit(normalize_genres(content.genres), content.year, context.mood)
		match += self._meal_fit(content.runtime, context.meal_type)
		match += self._eating_style_fit(content.runtime, score, context.eating_style)
		return max(1, min(10, match))

	def rank(
		self,
		candidates: Sequence[Tuple[ContentMetadata, FoodFriendlyScore]],
		context: ViewingContext,
		limit: int = 3,
		exclude_ids: Optional[Iterable[str]] = None,
	) -> List[Recommendation]:
		"""
		Score every (content, food-friendly score) pair against the context and
		return the best `limit` recommendations, highest ranking key first.
		Equal keys keep their input order.
		"""
		if limit <= 0 or not candidates:
			return []

		excluded = set(exclude_ids or [])
		results: List[Recommendation] = []
		for content, score in candidates:
			if content.id in excluded:
				logger.debug(f"[Matcher] Skipping previously shown content {content.id}")
				continue
			match = self.match_score(content, score, context)
			results.append(
				Recommendation(
					content_id=content.id,
					title=content.title,
					food_friendly_score=score.overall_score,
					match_score=match,
					reasoning=list(score.reasoning),
					content_type=content.content_type,
					platform=content.platform,
					runtime=content.runtime,
					direct_link=direct_link(content.platform, content.title),
					genres=list(content.genres),
					year=content.year,
					thumbnail_url=content.thumbnail_url,
				)
			)
			logger.debug(
				f"[Matcher] Candidate {content.title!r} ({content.id}) | food={score.overall_score} match={match}"
			)

		# sort() is stable, so ties stay in input order
		results.sort(key=self.ranking_key, reverse=True)
		logger.info(f"[Matcher] Returning top {min(limit, len(results))} of {len(results)} ranked candidates")
		return results[:limit]

	def ranking_key(self, rec: Recommendation) -> float:
		return self.food_weight * rec.food_friendly_score + self.match_weight * rec.match_score

	def _duration_fit(self, runtime: Optional[int], duration: int) -> int:
		if not runtime:
			return 0
		if runtime <= duration:
			return 2
		if runtime <= duration + self.duration_grace_minutes:
			return 1
		return -1

	def _mood_fit(self, genres: List[str], year: Optional[int], mood: Mood) -> int:
		if mood is Mood.COMFORT:
			return 2 if 'comedy' in genres else 0
		if mood is Mood.DISCOVERY:
			return 1 if year and year > self.recent_year else 0
		if mood is Mood.BACKGROUND:
			return 2 if 'reality' in genres else 0
		if mood is Mood.FOCUS:
			return 0
		raise ValueError(f"Unhandled mood: {mood!r}")

	def _meal_fit(self, runtime: Optional[int], meal_type: MealType) -> int:
		if meal_type is MealType.BREAKFAST:
			return 1 if runtime and runtime <= 30 else 0
		if meal_type is MealType.DINNER:
			return 1 if runtime and runtime >= 45 else 0
		if meal_type in (MealType.LUNCH, MealType.SNACK):
			return 0
		raise ValueError(f"Unhandled meal type: {meal_type!r}")

	def _eating_style_fit(self, runtime: Optional[int], score: FoodFriendlyScore, style: EatingStyle) -> int:
		if style is EatingStyle.QUICK:
			return 2 if runtime and runtime <= 25 else 0
		if style is EatingStyle.MULTITASKING:
			return 1 if score.overall_score >= 7 else 0
		if style is EatingStyle.LEISURELY:
			return 0
		raise ValueError(f"Unhandled eating style: {style!r}")
