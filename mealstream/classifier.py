"""
Content classification module.
Turns content metadata into a 1..10 food-friendly score with human-readable reasoning.
"""

import math  # half-up rounding
from typing import Dict, List, Optional, Tuple  # type hints

from loguru import logger  # console logging

from .models import ContentMetadata, FoodFriendlyScore  # input and output records
from .genres import genre_score, normalize_genres  # genre table lookups
from . import features  # signal extractors


# Canonical runtimes (minutes) and their multipliers; shorter is friendlier
RUNTIME_MULTIPLIERS: Dict[int, float] = {
	15: 1.2,  # snack length
	30: 1.1,  # good meal length
	45: 1.0,  # standard meal
	60: 0.9,  # long meal
	90: 0.8,  # extended viewing
	120: 0.7,  # very long commitment
}

POSITIVE_TERMS: Tuple[str, ...] = ('cooking', 'food', 'restaurant', 'chef', 'recipe', 'calm', 'relaxing', 'gentle')
NEGATIVE_TERMS: Tuple[str, ...] = ('intense', 'violent', 'disturbing', 'complex', 'mystery', 'thriller', 'horror')

FOOD_GENRES = ('cooking', 'food')
ATTENTION_DEMANDING_GENRES = ('thriller', 'mystery', 'horror', 'complex-drama')


def clamp(value: float, low: float = 1.0, high: float = 10.0) -> float:
	return max(low, min(high, value))


def round_half_up(value: float, digits: int = 1) -> float:
	"""Round like a calculator (2.25 -> 2.3), not banker's rounding."""
	factor = 10 ** digits
	return math.floor(value * factor + 0.5) / factor


class FoodFriendlyClassifier:
	"""
	Scores content for the eating context from four weighted signals:
	- genre baseline (40%)
	- subtitle load (30%)
	- runtime fit (20%)
	- description/keyword hints (10%)
	followed by food-content and attention-demand adjustments.
	"""

	def __init__(
		self,
		genre_weight: float = 0.4,
		subtitle_weight: float = 0.3,
		runtime_weight: float = 0.2,
		content_weight: float = 0.1,
		runtime_base_score: float = 7.0,
		content_base_score: float = 7.0,
		positive_term_bonus: float = 0.5,
		negative_term_penalty: float = 0.8,
		food_genre_bonus: float = 1.5,
		attention_penalty: float = 1.0,
	):
		self.genre_weight = genre_weight
		self.subtitle_weight = subtitle_weight
		self.runtime_weight = runtime_weight
		self.content_weight = content_weight
		self.runtime_base_score = runtime_base_score
		self.content_base_score = content_base_score
		self.positive_term_bonus = positive_term_bonus
		self.negative_term_penalty = negative_term_penalty
		self.food_genre_bonus = food_genre_bonus
		self.attention_penalty = attention_penalty

	def classify(self, content: ContentMetadata) -> FoodFriendlyScore:
		"""
		Score one piece of content. Never raises: every field is optional and
		missing data falls back to neutral defaults.
		"""
		reasoning: List[str] = []  # filled in component order
		genres = normalize_genres(content.genres)  # canonical lowercase labels
		text = features.content_text(content.description, content.keywords)

		genre_component = self._genre_component(genres, reasoning)
		penalty = self._subtitle_component(content.language, reasoning)
		runtime_component = self._runtime_component(content.runtime, reasoning)
		text_component = self._content_component(text, reasoning)

		base_score = clamp(
			self.genre_weight * genre_component +
			self.subtitle_weight * (10 - penalty) +
			self.runtime_weight * runtime_component +
			self.content_weight * text_component
		)
		adjusted = self._apply_eating_adjustments(base_score, genres, reasoning)
		overall = clamp(round_half_up(adjusted))

		score = FoodFriendlyScore(
			overall_score=overall,
			subtitle_density=penalty / 10,
			plot_complexity=features.plot_complexity(genres),
			visual_intensity=features.visual_intensity(genres),
			dialogue_pace=features.dialogue_pace(genres),
			eating_scenes=features.has_eating_scenes(text),
			confidence=self._confidence(content),
			reasoning=reasoning,
		)
		logger.debug(
			f"[Classifier] {content.title!r} ({content.id}) | genre={genre_component:.2f} subtitle_penalty={penalty} "
			f"runtime={runtime_component:.2f} text={text_component:.2f} -> overall={overall}"
		)
		return score

	def _genre_component(self, genres: List[str], reasoning: List[str]) -> float:
		"""Average of per-genre baseline scores; neutral 5.0 when there are no genres."""
		if not genres:
			return 5.0

		scores = []
		for g in genres:
			s = genre_score(g)
			if s >= 8:
				reasoning.append(f"{g} is excellent for eating")
			elif s <= 4:
				reasoning.append(f"{g} requires focused attention")
			scores.append(s)
		return clamp(sum(scores) / len(scores))

	def _subtitle_component(self, language: Optional[str], reasoning: List[str]) -> int:
		penalty = features.subtitle_penalty(language)
		if penalty == features.FOREIGN_SUBTITLE_PENALTY:
			reasoning.append("Non-English content requires subtitle reading")
		return penalty

	def _runtime_component(self, runtime: Optional[int], reasoning: List[str]) -> float:
		"""Base score scaled by the multiplier of the closest canonical runtime."""
		if not runtime:  # missing or zero
			return self.runtime_base_score

		# min() keeps the first of equally distant keys, i.e. the shorter runtime
		closest = min(RUNTIME_MULTIPLIERS, key=lambda r: abs(runtime - r))
		if runtime <= 30:
			reasoning.append("Perfect length for a quick meal")
		elif runtime >= 120:
			reasoning.append("Long runtime - better for extended viewing")
		return clamp(self.runtime_base_score * RUNTIME_MULTIPLIERS[closest])

	def _content_component(self, text: str, reasoning: List[str]) -> float:
		score = self.content_base_score
		for term in POSITIVE_TERMS:
			if term in text:
				score += self.positive_term_bonus
				reasoning.append(f"Contains {term} - good for eating context")
		for term in NEGATIVE_TERMS:
			if term in text:
				score -= self.negative_term_penalty
				reasoning.append(f"Contains {term} - may be distracting while eating")
		return clamp(score)

	def _apply_eating_adjustments(self, base_score: float, genres: List[str], reasoning: List[str]) -> float:
		adjusted = base_score
		if any(g in FOOD_GENRES for g in genres):
			adjusted = clamp(adjusted + self.food_genre_bonus)
			reasoning.append("Food-related content - perfect while eating")
		if any(g in ATTENTION_DEMANDING_GENRES for g in genres):
			adjusted = clamp(adjusted - self.attention_penalty)
			reasoning.append("Requires focused attention - not ideal while eating")
		return adjusted

	def _confidence(self, content: ContentMetadata) -> float:
		"""More metadata means a more trustworthy score."""
		confidence = 0.5
		if content.genres:
			confidence += 0.2
		if content.description:
			confidence += 0.2
		if content.runtime:
			confidence += 0.1
		if content.year and content.year > 2000:  # recent metadata is more reliable
			confidence += 0.1
		return round(min(1.0, confidence), 2)
