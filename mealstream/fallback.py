"""
Emergency picks: a static, pre-classified shortlist served when live scoring is unavailable.
"""

from typing import Iterable, List, Optional

from .models import Recommendation, ViewingContext

FALLBACK_NOTICE = "Showing backup recommendations"

EMERGENCY_PICKS: List[Recommendation] = [
	Recommendation(
		content_id='emergency-office',
		title='The Office (US)',
		content_type='series',
		platform='netflix',
		food_friendly_score=9.0,
		match_score=8,
		runtime=22,
		thumbnail_url='/emergency-thumbnails/office.jpg',
		direct_link='https://www.netflix.com/search?q=the%20office',
		reasoning=['Perfect background viewing', 'Light comedy', 'No complex plot'],
		genres=['comedy', 'mockumentary'],
		year=2005,
	),
	Recommendation(
		content_id='emergency-friends',
		title='Friends',
		content_type='series',
		platform='hbo',
		food_friendly_score=9.0,
		match_score=8,
		runtime=22,
		thumbnail_url='/emergency-thumbnails/friends.jpg',
		direct_link='https://www.hbomax.com/search?q=friends',
		reasoning=['Comfort viewing', 'Easy to follow', 'Great for meals'],
		genres=['comedy', 'sitcom'],
		year=1994,
	),
	Recommendation(
		content_id='emergency-nature',
		title='Planet Earth',
		content_type='series',
		platform='netflix',
		food_friendly_score=8.0,
		match_score=7,
		runtime=50,
		thumbnail_url='/emergency-thumbnails/planet-earth.jpg',
		direct_link='https://www.netflix.com/search?q=planet%20earth',
		reasoning=['Beautiful visuals', 'Relaxing narration', 'No plot to follow'],
		genres=['documentary', 'nature'],
		year=2006,
	),
]


def emergency_picks(
	context: ViewingContext,
	limit: int = 3,
	exclude_ids: Optional[Iterable[str]] = None,
	exclude_titles: Optional[Iterable[str]] = None,
) -> List[Recommendation]:
	"""
	Emergency picks available on the user's platforms (all of them if none are listed).
	Picks whose id is excluded, or whose title matches an excluded title, are skipped.
	"""
	platforms = {p.lower() for p in (context.platforms or [])}
	ids = set(exclude_ids or [])
	titles = {t.lower() for t in (exclude_titles or [])}
	picks = [
		p for p in EMERGENCY_PICKS
		if (not platforms or p.platform in platforms)
		and p.content_id not in ids
		and p.title.lower() not in titles
	]
	return picks[:max(0, limit)]
