"""
Feature extraction module.
Pure functions that derive eating-context signals from genre tags and free text.
"""

from typing import Iterable, List, Optional, Set, Tuple  # type hints


# Language codes treated as English (no subtitles needed)
ENGLISH_LANGUAGES: Set[str] = {'en', 'english', 'en-us', 'en-gb'}

# Subtitle penalties on a 0..10 scale
ENGLISH_SUBTITLE_PENALTY = 1  # minimal
UNKNOWN_LANGUAGE_SUBTITLE_PENALTY = 2  # language missing: assume some subtitles
FOREIGN_SUBTITLE_PENALTY = 8  # non-English: constant subtitle reading

# Genre sets for the three-bucket signals: (high set, high value), (low set, low value), default
PLOT_COMPLEXITY_RULES = ({'thriller', 'mystery', 'sci-fi', 'drama'}, 0.8, {'comedy', 'documentary', 'reality', 'cooking'}, 0.2, 0.5)
VISUAL_INTENSITY_RULES = ({'action', 'horror', 'thriller'}, 0.9, {'documentary', 'cooking', 'nature'}, 0.1, 0.4)
DIALOGUE_PACE_RULES = ({'comedy', 'action', 'thriller'}, 0.8, {'documentary', 'drama', 'nature'}, 0.3, 0.5)

# Words in the description that suggest food or eating on screen
EATING_TERMS: Tuple[str, ...] = ('food', 'eating', 'restaurant', 'cooking', 'meal', 'dinner', 'lunch')


def content_text(description: Optional[str], keywords: Optional[Iterable[str]] = None) -> str:
	"""Lowercased description and keywords joined into one searchable string."""
	return f"{description or ''} {' '.join(keywords or [])}".lower()


def is_english(language: Optional[str]) -> bool:
	return bool(language) and language.strip().lower() in ENGLISH_LANGUAGES


def subtitle_penalty(language: Optional[str]) -> int:
	"""
	Penalty for how much subtitle reading the content needs (0..10).
	English -> 1, missing language -> 2, anything else -> 8.
	"""
	if not language or not language.strip():
		return UNKNOWN_LANGUAGE_SUBTITLE_PENALTY
	if is_english(language):
		return ENGLISH_SUBTITLE_PENALTY
	return FOREIGN_SUBTITLE_PENALTY


def _bucket(genres: Iterable[str], rules) -> float:
	high_set, high_value, low_set, low_value, default = rules
	genre_set = set(genres or [])
	if genre_set & high_set:  # high set wins when both intersect
		return high_value
	if genre_set & low_set:
		return low_value
	return default


def plot_complexity(genres: List[str]) -> float:
	return _bucket(genres, PLOT_COMPLEXITY_RULES)


def visual_intensity(genres: List[str]) -> float:
	return _bucket(genres, VISUAL_INTENSITY_RULES)


def dialogue_pace(genres: List[str]) -> float:
	return _bucket(genres, DIALOGUE_PACE_RULES)


def has_eating_scenes(text: str) -> bool:
	"""True when the text mentions food or eating."""
	return any(term in text for term in EATING_TERMS)
