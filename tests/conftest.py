"""
Shared fixtures for the MealStream tests.
"""

from pathlib import Path

import pytest

from mealstream.classifier import FoodFriendlyClassifier
from mealstream.models import FoodFriendlyScore
from mealstream.ranking import ContextMatcher

ROOT = Path(__file__).resolve().parents[1]
CATALOG_PATH = ROOT / 'data' / 'content.jsonl'


@pytest.fixture
def classifier():
	return FoodFriendlyClassifier()


@pytest.fixture
def matcher():
	return ContextMatcher()


@pytest.fixture
def catalog_path():
	return CATALOG_PATH


def make_score(overall: float, reasoning=None) -> FoodFriendlyScore:
	"""A FoodFriendlyScore with neutral signals, for ranking tests."""
	return FoodFriendlyScore(
		overall_score=overall,
		subtitle_density=0.1,
		plot_complexity=0.5,
		visual_intensity=0.4,
		dialogue_pace=0.5,
		eating_scenes=False,
		confidence=0.5,
		reasoning=list(reasoning or []),
	)
