"""
Data models for the content-based movie recommender.
Defines the core data structures shared by the engine, the API and the UI.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Parse ISO release dates to derive calendar years
from datetime import date  # calendar date parsing
# Import typing helpers for precise and self-documenting types
from typing import List, Optional  # lists and optional values


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie as supplied by the dataset.
	Instances are never mutated once the engine has been built from them.
	"""
	id: int  # unique, stable identifier (uniqueness is assumed, not enforced)
	title: str  # display title
	overview: str  # short synopsis
	genres: List[str] = field(default_factory=list)  # ordered genre names, e.g. ["Action", "Crime"]
	cast: List[str] = field(default_factory=list)  # ordered cast names, billing order
	director: str = ''  # director name
	keywords: List[str] = field(default_factory=list)  # ordered theme keywords
	rating: float = 0.0  # average vote on a 0-10 scale
	runtime: int = 0  # minutes
	release_date: str = ''  # ISO date string, e.g. "2008-07-16"
	budget: float = 0.0  # production budget (non-negative)
	revenue: float = 0.0  # box office revenue (non-negative)
	poster_path: Optional[str] = None  # opaque poster reference, only used by the UI

	@property
	def year(self) -> Optional[int]:
		"""Calendar year of the release date, or None when the date cannot be parsed."""
		try:
			return date.fromisoformat(self.release_date[:10]).year
		except (TypeError, ValueError):
			return None


@dataclass
class RecommendationResult:
	movie: Movie  # recommended movie
	similarity: float  # raw cosine similarity (not clamped, may fall outside 0..1)
	explanation: List[str]  # human-readable overlap reasons


@dataclass
class DatasetStats:
	"""Aggregate counters over the whole collection."""
	total_movies: int
	total_genres: int
	average_rating: float
	average_runtime: float
	vocabulary_size: int
	genres: List[str]  # sorted distinct genre names


@dataclass
class GenreCount:
	genre: str
	count: int


@dataclass
class RatingBucket:
	label: str  # e.g. "6-8"
	count: int


@dataclass
class YearCount:
	year: int
	count: int


@dataclass
class BudgetRevenuePoint:
	title: str
	budget: float  # millions
	revenue: float  # millions
	rating: float
