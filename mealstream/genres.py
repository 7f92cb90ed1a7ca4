"""
Genre score table and genre label normalization.
Maps free-form genre labels onto the canonical lowercase labels used for scoring.
"""

from typing import Dict, Iterable, List  # type hints

from rapidfuzz import process, fuzz  # fuzzy matching for misspelled labels

from loguru import logger  # console logging


# Baseline food-friendliness per genre (1..10, higher = easier to watch while eating)
GENRE_SCORES: Dict[str, float] = {
	# High food-friendly (7-10)
	'documentary': 8.5,  # usually narrated, steady pace
	'cooking': 9.0,  # made for the eating context
	'nature': 8.8,  # calm, beautiful visuals
	'comedy': 7.5,  # light, entertaining
	'sitcom': 8.0,  # familiar format, easy to follow
	# Medium food-friendly (5-7)
	'drama': 6.0,
	'romance': 6.5,
	'animation': 7.0,
	'reality': 6.8,
	# Low food-friendly (1-5)
	'thriller': 4.0,  # requires attention
	'horror': 2.0,  # disturbing while eating
	'action': 3.5,  # fast-paced
	'mystery': 4.5,  # plot-heavy
	'foreign': 2.0,  # subtitle-heavy
	'anime': 3.0,  # usually subtitled
}

# Score for any genre not in the table
DEFAULT_GENRE_SCORE = 5.0

# Common phrasings → canonical label
GENRE_SYNONYMS: Dict[str, str] = {
	'sci fi': 'sci-fi',
	'scifi': 'sci-fi',
	'science fiction': 'sci-fi',
	'science-fiction': 'sci-fi',
	'documentaries': 'documentary',
	'docuseries': 'documentary',
	'docs': 'documentary',
	'comedies': 'comedy',
	'funny': 'comedy',
	'sitcoms': 'sitcom',
	'cookery': 'cooking',
	'food & drink': 'food',
	'food and drink': 'food',
	'baking': 'cooking',
	'dramas': 'drama',
	'romantic': 'romance',
	'animated': 'animation',
	'cartoon': 'animation',
	'reality tv': 'reality',
	'reality-tv': 'reality',
	'thrillers': 'thriller',
	'suspense': 'thriller',
	'scary': 'horror',
	'action & adventure': 'action',
	'mysteries': 'mystery',
	'whodunit': 'mystery',
	'international': 'foreign',
	'world cinema': 'foreign',
}

# Labels the scoring rules know about (table + feature sets); fuzzy matching targets these
KNOWN_GENRES: List[str] = sorted(set(GENRE_SCORES) | {
	'food', 'sci-fi', 'complex-drama', 'crime', 'sports', 'competition', 'mockumentary', 'family',
})

# Minimum rapidfuzz ratio to accept a typo correction
FUZZY_THRESHOLD = 90


def normalize_genre(genre: str) -> str:
	"""
	Map a raw genre to its canonical lowercase form.
	Exact labels and synonyms win; otherwise close misspellings are fuzzy-matched.
	Anything unrecognised is returned trimmed and lowercased.
	"""
	if not genre:  # missing genre
		return ''

	g = ' '.join(str(genre).strip().lower().split())  # collapse whitespace
	if g in GENRE_SCORES or g in KNOWN_GENRES:
		return g
	if g in GENRE_SYNONYMS:
		return GENRE_SYNONYMS[g]

	match = process.extractOne(g, KNOWN_GENRES, scorer=fuzz.ratio)
	if match and match[1] >= FUZZY_THRESHOLD:
		logger.debug(f"[Genres] Fuzzy match: '{g}' -> '{match[0]}' (score={match[1]:.0f})")
		return match[0]
	return g


def normalize_genres(genres: Iterable[str]) -> List[str]:
	"""Normalize a list of genres, dropping blanks and duplicates while keeping order."""
	seen = set()
	out = []
	for raw in genres or []:
		g = normalize_genre(raw)
		if g and g not in seen:
			seen.add(g)
			out.append(g)
	return out


def genre_score(genre: str) -> float:
	"""Baseline score for one canonical genre label."""
	return GENRE_SCORES.get(genre, DEFAULT_GENRE_SCORE)
