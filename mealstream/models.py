"""
Data models for MealStream.
Defines the content, score, context and recommendation records shared by the scoring pipeline.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Enum gives us a closed set of values for the context fields
from enum import Enum  # fixed enumerations
# Import typing helpers for precise and self-documenting types
from typing import List, Optional  # lists and optional values


class MealType(str, Enum):
	"""Which meal the user is eating."""
	BREAKFAST = "breakfast"
	LUNCH = "lunch"
	DINNER = "dinner"
	SNACK = "snack"


class Mood(str, Enum):
	"""What the user wants out of the viewing."""
	COMFORT = "comfort"
	DISCOVERY = "discovery"
	BACKGROUND = "background"
	FOCUS = "focus"


class EatingStyle(str, Enum):
	"""How the user is eating."""
	QUICK = "quick"
	LEISURELY = "leisurely"
	MULTITASKING = "multitasking"


@dataclass(frozen=True)
class ContentMetadata:
	"""
	Represents one series/movie/episode and everything we know about it.
	Sourced externally per request; never mutated once loaded.
	"""
	id: str  # unique identifier of the content
	title: str  # display title
	description: Optional[str] = None  # free-text synopsis
	genres: List[str] = field(default_factory=list)  # normalized genre labels (lowercase)
	language: Optional[str] = None  # language code, e.g. "en" or "ko"
	runtime: Optional[int] = None  # runtime in minutes (episode length for series)
	year: Optional[int] = None  # release year
	rating: Optional[str] = None  # content rating, e.g. "TV-14"
	content_type: str = "series"  # movie | series | episode
	platform: Optional[str] = None  # streaming platform id, e.g. "netflix"
	keywords: List[str] = field(default_factory=list)  # extra free-form tags
	thumbnail_url: Optional[str] = None  # optional image for UI


@dataclass(frozen=True)
class FoodFriendlyScore:
	"""
	How suitable a piece of content is for watching while eating.
	Derived deterministically from a ContentMetadata instance.
	"""
	overall_score: float  # 1..10, one decimal place
	subtitle_density: float  # 0..1
	plot_complexity: float  # 0..1
	visual_intensity: float  # 0..1
	dialogue_pace: float  # 0..1
	eating_scenes: bool  # description mentions food/eating
	confidence: float  # 0..1, grows with available metadata
	reasoning: List[str] = field(default_factory=list)  # human-readable explanations, in order


@dataclass(frozen=True)
class ViewingContext:
	"""
	The user's self-declared situation for one recommendation request.
	"""
	meal_type: MealType  # breakfast/lunch/dinner/snack
	duration: int  # minutes the user has available
	mood: Mood  # comfort/discovery/background/focus
	eating_style: EatingStyle  # quick/leisurely/multitasking
	platforms: List[str] = field(default_factory=list)  # available platform ids (empty = any)

	def __post_init__(self):
		# Accept raw strings ("dinner") as well as enum members
		object.__setattr__(self, 'meal_type', MealType(self.meal_type))
		object.__setattr__(self, 'mood', Mood(self.mood))
		object.__setattr__(self, 'eating_style', EatingStyle(self.eating_style))


@dataclass(frozen=True)
class Recommendation:
	"""A ranked content item ready for display."""
	content_id: str
	title: str
	food_friendly_score: float  # copied from FoodFriendlyScore.overall_score
	match_score: int  # 1..10 fit against the viewing context
	reasoning: List[str] = field(default_factory=list)
	content_type: str = "series"
	platform: Optional[str] = None
	runtime: Optional[int] = None
	direct_link: str = "#"
	genres: List[str] = field(default_factory=list)
	year: Optional[int] = None
	thumbnail_url: Optional[str] = None


@dataclass
class RecommendationResult:
	"""What the recommendation service hands back to its caller."""
	recommendations: List[Recommendation]  # ranked shortlist
	used_fallback: bool = False  # True when emergency picks were substituted
	notice: Optional[str] = None  # message to surface when falling back
