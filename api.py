"""
FastAPI server exposing the movie recommender.
Endpoints:
- GET /health: basic health check
- GET /recommend?title=...&top_n=8: movies similar to the first title match, with explanations
- GET /movies?genre=&min_rating=&year=&sort_by=: filtered and sorted catalogue
- GET /movies/{movie_id}: a single movie
- GET /genres: sorted distinct genres
- GET /stats: collection statistics
- GET /analytics: genre, rating, yearly and budget/revenue breakdowns

Startup loads the dataset and builds the TF-IDF index once.
"""

# Import standard libraries for timing
import time  # measure startup and request latencies
from contextlib import asynccontextmanager  # lifespan hook
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for data loading and recommendation
from recommender import config  # env-driven settings
from recommender.data_loader import DataLoader  # loads movies from disk
from recommender.engine import ContentBasedRecommendationEngine  # core engine
from recommender.models import Movie  # movie record

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Globals that hold the engine instance and measured startup time
ENGINE: Optional[ContentBasedRecommendationEngine] = None  # will point to the initialized engine
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: int
	title: str
	overview: str
	genres: List[str]
	cast: List[str]
	director: str
	keywords: List[str]
	rating: float
	runtime: int
	release_date: str
	year: Optional[int] = None
	budget: float
	revenue: float
	poster_path: Optional[str] = None


class RecommendationOut(BaseModel):
	movie: MovieOut  # recommended movie
	similarity: float  # raw cosine similarity, may fall outside 0..1
	explanation: List[str]  # why it was recommended


class RecommendResponse(BaseModel):
	query: str  # original title query
	matched: Optional[MovieOut] = None  # the movie the query resolved to
	top_n: int  # number of results requested
	elapsed_ms: float  # server-side time in ms
	results: List[RecommendationOut]


class MoviesResponse(BaseModel):
	count: int
	results: List[MovieOut]


class StatsOut(BaseModel):
	total_movies: int
	total_genres: int
	average_rating: float
	average_runtime: float
	vocabulary_size: int
	genres: List[str]


class GenreCountOut(BaseModel):
	genre: str
	count: int


class RatingBucketOut(BaseModel):
	label: str
	count: int


class YearCountOut(BaseModel):
	year: int
	count: int


class BudgetRevenueOut(BaseModel):
	title: str
	budget: float
	revenue: float
	rating: float


class AnalyticsResponse(BaseModel):
	genres: List[GenreCountOut]
	ratings: List[RatingBucketOut]
	releases_per_year: List[YearCountOut]
	budget_vs_revenue: List[BudgetRevenueOut]


def to_movie_out(m: Movie) -> MovieOut:
	"""Convert an engine Movie into the response schema."""
	return MovieOut(
		id=m.id,
		title=m.title,
		overview=m.overview,
		genres=list(m.genres),
		cast=list(m.cast),
		director=m.director,
		keywords=list(m.keywords),
		rating=m.rating,
		runtime=m.runtime,
		release_date=m.release_date,
		year=m.year,
		budget=m.budget,
		revenue=m.revenue,
		poster_path=m.poster_path,
	)


def get_engine() -> ContentBasedRecommendationEngine:
	"""Return the engine or answer 503 while it isn't built yet."""
	if ENGINE is None:
		logger.warning("[API] Request received but engine not initialized")
		raise HTTPException(status_code=503, detail="Recommendation engine is not ready")
	return ENGINE


# Lifespan hook to initialize the engine once at startup
@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Load the catalogue and build the TF-IDF index before serving requests."""
	global ENGINE, STARTUP_TIME_S  # refer to module-level globals
	config.configure_logging()  # apply configured log level
	start = time.time()  # start timer for startup latency

	logger.info(f"[API] Startup: loading movies from {config.DATA_PATH}")
	movies = DataLoader().load_movies(config.DATA_PATH)  # read dataset
	ENGINE = ContentBasedRecommendationEngine(movies)  # eager vocabulary + vectors

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(movies)} movies")
	yield
	logger.info("[API] Shutting down")


# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Recommender API", version="1.0.0", lifespan=lifespan)  # web app


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",
		"engine_ready": ENGINE is not None,
		"startup_seconds": round(STARTUP_TIME_S, 2),
	}


@app.get("/recommend", response_model=RecommendResponse)
async def recommend(
	title: str = Query(..., min_length=1, description="Part of a movie title"),
	top_n: int = Query(config.DEFAULT_TOP_N, ge=1, le=100),
):
	"""Recommend movies similar to the first movie whose title contains `title`."""
	engine = get_engine()
	start = time.time()
	logger.debug(f"[API] /recommend title='{title}' top_n={top_n}")

	matched = engine.find_by_title(title)
	results = engine.recommend(title, top_n=top_n)
	elapsed_ms = (time.time() - start) * 1000
	logger.info(f"[API] /recommend served {len(results)} results in {elapsed_ms:.2f} ms")

	return RecommendResponse(
		query=title,
		matched=to_movie_out(matched) if matched else None,
		top_n=top_n,
		elapsed_ms=round(elapsed_ms, 2),
		results=[
			RecommendationOut(
				movie=to_movie_out(r.movie),
				similarity=round(r.similarity, 4),
				explanation=r.explanation,
			)
			for r in results
		],
	)


@app.get("/movies", response_model=MoviesResponse)
async def movies(
	genre: Optional[str] = None,
	min_rating: float = Query(0.0, ge=0.0, le=10.0),
	year: Optional[int] = None,
	sort_by: str = "rating",
):
	"""Browse the catalogue with optional genre, rating and year filters."""
	engine = get_engine()
	try:
		found = engine.browse(genre=genre, min_rating=min_rating, year=year, sort_by=sort_by)
	except ValueError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return MoviesResponse(count=len(found), results=[to_movie_out(m) for m in found])


@app.get("/movies/{movie_id}", response_model=MovieOut)
async def movie_detail(movie_id: int):
	"""Return one movie by id."""
	movie = get_engine().get_movie(movie_id)
	if movie is None:
		raise HTTPException(status_code=404, detail=f"Movie {movie_id} not found")
	return to_movie_out(movie)


@app.get("/genres", response_model=List[str])
async def genres():
	return get_engine().all_genres()


@app.get("/stats", response_model=StatsOut)
async def stats():
	s = get_engine().stats()
	return StatsOut(
		total_movies=s.total_movies,
		total_genres=s.total_genres,
		average_rating=s.average_rating,
		average_runtime=s.average_runtime,
		vocabulary_size=s.vocabulary_size,
		genres=s.genres,
	)


@app.get("/analytics", response_model=AnalyticsResponse)
async def analytics():
	"""Breakdowns used by the analytics dashboard."""
	engine = get_engine()
	return AnalyticsResponse(
		genres=[GenreCountOut(genre=g.genre, count=g.count) for g in engine.genre_distribution()],
		ratings=[RatingBucketOut(label=b.label, count=b.count) for b in engine.rating_distribution()],
		releases_per_year=[
			YearCountOut(year=y.year, count=y.count)
			for y in engine.releases_per_year(since=config.ANALYTICS_SINCE_YEAR)
		],
		budget_vs_revenue=[
			BudgetRevenueOut(title=p.title, budget=p.budget, revenue=p.revenue, rating=p.rating)
			for p in engine.budget_vs_revenue()
		],
	)
