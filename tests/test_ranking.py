"""
Unit tests for ContextMatcher: match score rules, ordering, limits and exclusions.
Run: pytest tests/test_ranking.py
"""

import pytest

from conftest import make_score
from mealstream.models import ContentMetadata, EatingStyle, MealType, Mood, ViewingContext
from mealstream.ranking import ContextMatcher


def item(content_id, runtime=None, genres=None, year=None, platform='netflix'):
	return ContentMetadata(
		id=content_id,
		title=content_id.title(),
		runtime=runtime,
		genres=genres or [],
		year=year,
		platform=platform,
	)


def ctx(meal='lunch', duration=30, mood='focus', style='leisurely', platforms=None):
	return ViewingContext(meal_type=meal, duration=duration, mood=mood, eating_style=style, platforms=platforms or [])


def test_quick_breakfast_prefers_short_content(matcher: ContextMatcher):
	context = ctx(meal='breakfast', duration=20, mood='background', style='quick')
	candidates = [
		(item('long', runtime=50), make_score(7.0)),
		(item('short', runtime=15), make_score(7.0)),
	]
	ranked = matcher.rank(candidates, context)
	assert [r.content_id for r in ranked] == ['short', 'long']
	assert [r.match_score for r in ranked] == [10, 4]


def test_duration_fit(matcher: ContextMatcher):
	context = ctx(duration=30)
	score = make_score(5.0)
	assert matcher.match_score(item('a', runtime=30), score, context) == 7
	assert matcher.match_score(item('b', runtime=40), score, context) == 6
	assert matcher.match_score(item('c', runtime=41), score, context) == 4


def test_mood_bonuses(matcher: ContextMatcher):
	score = make_score(5.0)
	comedy = item('comedy', genres=['comedy'])
	reality = item('reality', genres=['reality'])
	assert matcher.match_score(comedy, score, ctx(mood='comfort')) == 7
	assert matcher.match_score(comedy, score, ctx(mood='focus')) == 5
	assert matcher.match_score(reality, score, ctx(mood='background')) == 7
	assert matcher.match_score(item('new', year=2020), score, ctx(mood='discovery')) == 6
	assert matcher.match_score(item('old', year=2015), score, ctx(mood='discovery')) == 5


def test_mood_bonus_reads_normalized_genres(matcher: ContextMatcher):
	score = make_score(5.0)
	comfort = ctx(mood='comfort')
	for label in ('Comedy', 'COMEDY', 'comedies'):
		assert matcher.match_score(item('x', genres=[label]), score, comfort) == 7
	assert matcher.match_score(item('y', genres=['Reality TV']), score, ctx(mood='background')) == 7

	lower, mixed = matcher.rank(
		[(item('lower', genres=['comedy']), score), (item('mixed', genres=['Comedy']), score)],
		comfort,
	)
	assert lower.match_score == mixed.match_score == 7
	assert mixed.genres == ['Comedy']

def test_meal_and_eating_style_bonuses(matcher: ContextMatcher):
	score = make_score(5.0)
	# runtime 60 > 30 + 10 -> -1, dinner + long runtime -> +1
	assert matcher.match_score(item('film', runtime=60), score, ctx(meal='dinner')) == 5
	assert matcher.match_score(item('film', runtime=60), score, ctx(meal='snack')) == 4
	assert matcher.match_score(item('ep', runtime=25), score, ctx(style='quick')) == 9
	assert matcher.match_score(item('x'), make_score(7.0), ctx(style='multitasking')) == 6
	assert matcher.match_score(item('x'), make_score(6.9), ctx(style='multitasking')) == 5


def test_missing_runtime_gets_no_runtime_adjustments(matcher: ContextMatcher):
	context = ctx(meal='breakfast', style='quick')
	assert matcher.match_score(item('x'), make_score(5.0), context) == 5


def test_match_score_is_clamped():
	high = ContextMatcher()
	context = ctx(meal='breakfast', duration=30, mood='comfort', style='quick')
	assert high.match_score(item('x', runtime=10, genres=['comedy']), make_score(9.0), context) == 10

	low = ContextMatcher(base_match_score=1)
	assert low.match_score(item('y', runtime=200), make_score(1.0), ctx(duration=10)) == 1


def test_rank_sorted_by_combined_key(matcher: ContextMatcher):
	context = ctx(meal='dinner', duration=45, mood='comfort', style='multitasking')
	candidates = [
		(item('a', runtime=22, genres=['comedy']), make_score(8.2)),
		(item('b', runtime=120, genres=['horror']), make_score(2.1)),
		(item('c', runtime=50, genres=['documentary']), make_score(8.8)),
		(item('d', runtime=45, genres=['drama']), make_score(6.0)),
	]
	ranked = matcher.rank(candidates, context, limit=10)
	keys = [0.6 * r.food_friendly_score + 0.4 * r.match_score for r in ranked]
	assert keys == sorted(keys, reverse=True)
	assert len(ranked) == 4
	assert matcher.rank(candidates, context, limit=10) == ranked


def test_rank_returns_all_when_fewer_than_limit(matcher: ContextMatcher):
	candidates = [(item('a', runtime=20), make_score(6.0)), (item('b', runtime=20), make_score(7.0))]
	assert len(matcher.rank(candidates, ctx(), limit=5)) == 2


def test_rank_respects_limit(matcher: ContextMatcher):
	candidates = [(item(f'c{i}', runtime=20), make_score(float(i + 1))) for i in range(6)]
	ranked = matcher.rank(candidates, ctx())
	assert [r.content_id for r in ranked] == ['c5', 'c4', 'c3']


def test_rank_empty_and_zero_limit(matcher: ContextMatcher):
	assert matcher.rank([], ctx()) == []
	assert matcher.rank([(item('a'), make_score(5.0))], ctx(), limit=0) == []


def test_ties_keep_input_order(matcher: ContextMatcher):
	candidates = [(item(name, runtime=20), make_score(7.0)) for name in ('x', 'y', 'z')]
	assert [r.content_id for r in matcher.rank(candidates, ctx())] == ['x', 'y', 'z']


def test_rank_excludes_previously_shown(matcher: ContextMatcher):
	candidates = [(item(name, runtime=20), make_score(7.0)) for name in ('x', 'y', 'z')]
	ranked = matcher.rank(candidates, ctx(), exclude_ids=['x'])
	assert [r.content_id for r in ranked] == ['y', 'z']


def test_recommendation_carries_display_fields(matcher: ContextMatcher):
	content = ContentMetadata(id='friends', title='Friends', runtime=22, genres=['comedy'], year=1994, platform='hbo')
	[rec] = matcher.rank([(content, make_score(8.0, reasoning=['comedy is light']))], ctx())
	assert rec.title == 'Friends'
	assert rec.reasoning == ['comedy is light']
	assert rec.direct_link == 'https://www.hbomax.com/search?q=Friends'
	assert rec.food_friendly_score == 8.0
	assert rec.runtime == 22


def test_viewing_context_accepts_strings():
	context = ViewingContext(meal_type='dinner', duration=30, mood='comfort', eating_style='quick')
	assert context.meal_type is MealType.DINNER
	assert context.mood is Mood.COMFORT
	assert context.eating_style is EatingStyle.QUICK
	with pytest.raises(ValueError):
		ViewingContext(meal_type='brunch', duration=30, mood='comfort', eating_style='quick')
