"""
FastAPI server exposing the MealStream recommendation API.
Endpoints:
- GET /health: basic health check
- POST /recommendations?limit=3: ranked food-friendly picks for a viewing context
- POST /classify: food-friendly score for one piece of content

Startup builds a RecommendationService over the JSONL catalog at
$MEALSTREAM_CONTENT_PATH (default data/content.jsonl).

Run: uvicorn api:app --reload
"""

# Import standard libraries for env-based settings and timing
import os  # read catalog path from the environment
import time  # measure startup and request latencies
from functools import partial  # bind the catalog path into the content source
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for request/response models
from fastapi import FastAPI, Query  # FastAPI primitives
from pydantic import BaseModel, Field  # schema definitions

# Import our internal modules for loading, scoring and ranking
from mealstream.data_loader import ContentLoader  # loads and normalizes content
from mealstream.classifier import FoodFriendlyClassifier  # food-friendly scoring
from mealstream.fallback import FALLBACK_NOTICE, emergency_picks  # backup picks
from mealstream.guards import CircuitBreaker, RateLimiter  # source protection
from mealstream.models import EatingStyle, MealType, Mood, Recommendation, ViewingContext  # core records
from mealstream.recommendation_service import RecommendationService  # orchestration

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

DEFAULT_CONTENT_PATH = 'data/content.jsonl'  # catalog shipped with the repo

# Instantiate the FastAPI application with metadata
app = FastAPI(title="MealStream Recommendation API", version="1.0.0")  # web app

# Globals that hold the service instance and measured startup time
SERVICE: Optional[RecommendationService] = None  # will point to the initialized service
CATALOG_SIZE: int = 0  # items found at startup
STARTUP_TIME_S: float = 0.0  # measures how long startup took


class ViewingContextIn(BaseModel):
	mealType: MealType  # breakfast/lunch/dinner/snack
	duration: int = Field(30, ge=0, le=600)  # minutes available
	platforms: List[str] = []  # empty = any platform
	mood: Mood  # comfort/discovery/background/focus
	eatingStyle: EatingStyle  # quick/leisurely/multitasking
	excludeIds: List[str] = []  # content already shown to the user
	urgent: bool = False  # time is almost up


class RecommendationOut(BaseModel):
	contentId: str
	title: str
	type: str
	platform: Optional[str] = None
	foodFriendlyScore: float
	matchScore: int
	duration: Optional[int] = None
	thumbnailUrl: str = '#'
	directLink: str = '#'
	reasoning: List[str]
	genres: List[str]
	year: Optional[int] = None


class RecommendationsResponse(BaseModel):
	recommendations: List[RecommendationOut]  # ranked items
	usedFallback: bool  # True when emergency picks were served
	notice: Optional[str] = None  # message for the user when falling back
	elapsed_ms: float  # server-side time in ms


class ContentIn(BaseModel):
	id: str = 'adhoc'
	title: str = ''
	description: Optional[str] = None
	genres: List[str] = []
	language: Optional[str] = None
	runtime: Optional[int] = Field(None, ge=0)
	year: Optional[int] = None
	rating: Optional[str] = None
	keywords: List[str] = []


class FoodFriendlyScoreOut(BaseModel):
	overallScore: float
	subtitleDensity: float
	plotComplexity: float
	visualIntensity: float
	dialoguePace: float
	eatingScenes: bool
	confidence: float
	reasoning: List[str]


def build_service(content_path: str) -> RecommendationService:
	"""Wire a service whose source re-reads the catalog file on every request."""
	loader = ContentLoader()
	return RecommendationService(
		source=partial(loader.load_content_from_jsonl, content_path),
		circuit_breaker=CircuitBreaker(),
		rate_limiter=RateLimiter(requests_per_minute=100),
		source_id='local-catalog',
	)


def to_out(rec: Recommendation) -> RecommendationOut:
	return RecommendationOut(
		contentId=rec.content_id,
		title=rec.title,
		type=rec.content_type,
		platform=rec.platform,
		foodFriendlyScore=rec.food_friendly_score,
		matchScore=rec.match_score,
		duration=rec.runtime,
		thumbnailUrl=rec.thumbnail_url or '#',
		directLink=rec.direct_link,
		reasoning=rec.reasoning,
		genres=rec.genres,
		year=rec.year,
	)


# FastAPI startup hook to initialize the service once
@app.on_event("startup")
async def startup_event():
	"""Initialize the recommendation service and log the catalog it will serve."""
	global SERVICE, CATALOG_SIZE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()

	content_path = os.getenv('MEALSTREAM_CONTENT_PATH', DEFAULT_CONTENT_PATH)
	logger.info(f"[API] Startup: using content catalog '{content_path}'")

	try:
		CATALOG_SIZE = len(ContentLoader().load_content_from_jsonl(content_path))
	except FileNotFoundError as e:
		# Keep serving: requests will fall back to emergency picks
		logger.warning(f"[API] {e}")
		CATALOG_SIZE = 0

	SERVICE = build_service(content_path)
	STARTUP_TIME_S = time.time() - start
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {CATALOG_SIZE} catalog items")


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",
		"service_ready": SERVICE is not None,
		"catalog_size": CATALOG_SIZE,
		"startup_seconds": round(STARTUP_TIME_S, 2),
	}


@app.post("/recommendations", response_model=RecommendationsResponse)
async def recommendations(body: ViewingContextIn, limit: int = Query(3, ge=1, le=20)):
	"""Rank the catalog for the posted viewing context."""
	start = time.time()
	context = ViewingContext(
		meal_type=body.mealType,
		duration=body.duration,
		mood=body.mood,
		eating_style=body.eatingStyle,
		platforms=body.platforms,
	)
	logger.debug(f"[API] /recommendations context={context} limit={limit}")

	if SERVICE is None:
		logger.warning("[API] Recommendations requested but service not initialized")
		picks = emergency_picks(context, limit=limit, exclude_ids=body.excludeIds)
		return RecommendationsResponse(
			recommendations=[to_out(p) for p in picks],
			usedFallback=True,
			notice=FALLBACK_NOTICE,
			elapsed_ms=0.0,
		)

	result = SERVICE.recommend(context, limit=limit, exclude_ids=body.excludeIds, urgent=body.urgent)
	elapsed_ms = (time.time() - start) * 1000
	logger.info(f"[API] /recommendations served {len(result.recommendations)} items in {elapsed_ms:.2f} ms")

	return RecommendationsResponse(
		recommendations=[to_out(r) for r in result.recommendations],
		usedFallback=result.used_fallback,
		notice=result.notice,
		elapsed_ms=round(elapsed_ms, 2),
	)


@app.post("/classify", response_model=FoodFriendlyScoreOut)
async def classify(body: ContentIn):
	"""Score one piece of content without ranking it."""
	content = ContentLoader().parse_content(body.model_dump())
	score = FoodFriendlyClassifier().classify(content)
	return FoodFriendlyScoreOut(
		overallScore=score.overall_score,
		subtitleDensity=score.subtitle_density,
		plotComplexity=score.plot_complexity,
		visualIntensity=score.visual_intensity,
		dialoguePace=score.dialogue_pace,
		eatingScenes=score.eating_scenes,
		confidence=score.confidence,
		reasoning=score.reasoning,
	)
