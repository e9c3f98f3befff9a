"""
Recommendation engine module.
Builds the vocabulary and TF-IDF vectors once, then answers recommendation,
filtering and statistics queries as pure reads over that precomputed state.
"""

from typing import Dict, List, Optional  # type annotations for clarity

# Import project modules for data structures and components
from .models import (  # core data classes
	BudgetRevenuePoint,
	DatasetStats,
	GenreCount,
	Movie,
	RatingBucket,
	RecommendationResult,
	YearCount,
)
from .tokenizer import tokenize_movie  # content -> terms
from .vocabulary import build_vocabulary  # terms -> vocabulary + document frequency
from .vectorizer import build_tfidf_matrix  # vocabulary -> dense TF-IDF matrix
from .similarity import Ranker, cosine_similarity  # cosine ranking
from .explanation import explain  # "why recommended" heuristic

# Import loguru for console logging
from loguru import logger  # simple structured logger

# Rating histogram used by the analytics view: (label, low, high, high is inclusive)
RATING_BUCKETS = [
	('0-2', 0.0, 2.0, False),
	('2-4', 2.0, 4.0, False),
	('4-6', 4.0, 6.0, False),
	('6-8', 6.0, 8.0, False),
	('8-10', 8.0, 10.0, True),
]

# Browse sort orders: key function and whether the order is descending
BROWSE_SORTS = {
	'rating': (lambda m: m.rating, True),
	'year': (lambda m: m.release_date if m.year is not None else '', True),  # ISO dates sort as strings; undated last
	'title': (lambda m: m.title.casefold(), False),
	'revenue': (lambda m: m.revenue, True),
}


class ContentBasedRecommendationEngine:
	"""
	High-level API over a fixed movie collection.
	All vocabulary and vector work happens in __init__; nothing mutates afterwards,
	so one instance can be shared by any number of readers.
	"""
	def __init__(self, movies: List[Movie]):
		if movies is None:
			raise ValueError("Movie collection is required")
		if len(movies) == 0:
			raise ValueError("Movie collection must not be empty")

		# Keep our own copy so later changes to the caller's list can't leak in
		self.movies: List[Movie] = list(movies)
		logger.info(f"[Engine] Building content index for {len(self.movies)} movies")

		# Exact id lookup; the first movie wins when ids collide
		self._by_id: Dict[int, int] = {}
		for i, movie in enumerate(self.movies):
			self._by_id.setdefault(movie.id, i)
		if len(self._by_id) != len(self.movies):
			logger.warning(
				f"[Engine] {len(self.movies) - len(self._by_id)} movies share an id with an earlier movie and cannot be looked up by id"
			)

		token_lists = [tokenize_movie(m) for m in self.movies]  # one token sequence per movie
		empty = sum(1 for tokens in token_lists if not tokens)
		if empty:
			logger.warning(f"[Engine] {empty} movies have no usable content and get a zero vector")

		self.vocabulary = build_vocabulary(token_lists)  # global term set + DF
		self.tfidf = build_tfidf_matrix(token_lists, self.vocabulary)  # dense vectors
		self.ranker = Ranker(explain)  # cosine ranking with explanations
		logger.info(f"[Engine] Index ready | vocabulary={len(self.vocabulary)} | matrix={self.tfidf.shape}")

	def _find_index_by_title(self, title: str) -> Optional[int]:
		"""Position of the first movie whose title contains `title` (case-insensitive)."""
		needle = title.lower()
		for i, movie in enumerate(self.movies):
			if needle in movie.title.lower():
				return i
		return None

	def find_by_title(self, title: str) -> Optional[Movie]:
		"""Return the first movie (collection order) whose title contains the query."""
		index = self._find_index_by_title(title)
		return self.movies[index] if index is not None else None

	def get_movie(self, movie_id: int) -> Optional[Movie]:
		"""Return the movie with this exact id, or None."""
		index = self._by_id.get(movie_id)
		return self.movies[index] if index is not None else None

	def vector(self, movie_id: int) -> Optional[Dict[str, float]]:
		"""Return a movie's TF-IDF vector as a term -> weight mapping over the whole vocabulary."""
		index = self._by_id.get(movie_id)
		return self.tfidf.as_mapping(index) if index is not None else None

	def similarity(self, first_id: int, second_id: int) -> Optional[float]:
		"""Cosine similarity between two movies by id; None if either id is unknown."""
		first = self._by_id.get(first_id)
		second = self._by_id.get(second_id)
		if first is None or second is None:
			return None
		return cosine_similarity(self.tfidf.row(first), self.tfidf.row(second))

	def recommend(self, title: str, top_n: int = 5) -> List[RecommendationResult]:
		"""
		Recommend movies similar to the first movie whose title contains `title`.
		Returns an empty list when no title matches.
		"""
		index = self._find_index_by_title(title)
		if index is None:
			logger.debug(f"[Engine] No movie title matches '{title}'")
			return []

		logger.debug(f"[Engine] '{title}' matched '{self.movies[index].title}' ({self.movies[index].id})")
		return self.ranker.rank(index, self.tfidf.matrix, self.movies, top_n)

	def by_genre(self, genre: str) -> List[Movie]:
		"""Movies having any genre that contains `genre` as a case-insensitive substring."""
		needle = genre.lower()
		return [m for m in self.movies if any(needle in g.lower() for g in m.genres)]

	def by_rating(self, min_rating: float) -> List[Movie]:
		"""Movies rated at least `min_rating` (inclusive)."""
		return [m for m in self.movies if m.rating >= min_rating]

	def by_year(self, year: int) -> List[Movie]:
		"""Movies released in the given calendar year."""
		return [m for m in self.movies if m.year == year]

	def all_genres(self) -> List[str]:
		"""Distinct genre names across the collection, sorted ascending."""
		genres = set()  # unique genres
		for movie in self.movies:
			genres.update(movie.genres)
		return sorted(genres)

	def browse(
		self,
		genre: Optional[str] = None,
		min_rating: float = 0.0,
		year: Optional[int] = None,
		sort_by: str = 'rating',
	) -> List[Movie]:
		"""
		Combine the genre, rating and year filters and sort the result.
		sort_by: 'rating' (desc), 'year' (newest first), 'title' (A-Z) or 'revenue' (desc).
		"""
		if sort_by not in BROWSE_SORTS:
			raise ValueError(f"Unknown sort order '{sort_by}'. Expected one of {sorted(BROWSE_SORTS)}")

		movies = self.by_genre(genre) if genre else list(self.movies)
		movies = [m for m in movies if m.rating >= min_rating]
		if year is not None:
			movies = [m for m in movies if m.year == year]

		key, descending = BROWSE_SORTS[sort_by]
		return sorted(movies, key=key, reverse=descending)

	def stats(self) -> DatasetStats:
		"""Aggregate counters over the collection."""
		genres = self.all_genres()
		count = len(self.movies)
		return DatasetStats(
			total_movies=count,
			total_genres=len(genres),
			average_rating=sum(m.rating for m in self.movies) / count,
			average_runtime=sum(m.runtime for m in self.movies) / count,
			vocabulary_size=len(self.vocabulary),
			genres=genres,
		)

	def genre_distribution(self) -> List[GenreCount]:
		"""Number of movies per genre (substring match), most common first."""
		counts = [GenreCount(genre=g, count=len(self.by_genre(g))) for g in self.all_genres()]
		return sorted(counts, key=lambda c: c.count, reverse=True)

	def rating_distribution(self) -> List[RatingBucket]:
		"""Histogram of ratings in five 2-point buckets."""
		buckets = []
		for label, low, high, inclusive in RATING_BUCKETS:
			if inclusive:
				count = sum(1 for m in self.movies if low <= m.rating <= high)
			else:
				count = sum(1 for m in self.movies if low <= m.rating < high)
			buckets.append(RatingBucket(label=label, count=count))
		return buckets

	def releases_per_year(self, since: int = 1990) -> List[YearCount]:
		"""Number of releases per calendar year from `since` onwards, oldest first."""
		counts: Dict[int, int] = {}
		for movie in self.movies:
			year = movie.year
			if year is not None and year >= since:
				counts[year] = counts.get(year, 0) + 1
		return [YearCount(year=y, count=counts[y]) for y in sorted(counts)]

	def budget_vs_revenue(self) -> List[BudgetRevenuePoint]:
		"""Budget and revenue in millions for movies where both are known."""
		return [
			BudgetRevenuePoint(
				title=m.title,
				budget=m.budget / 1_000_000,
				revenue=m.revenue / 1_000_000,
				rating=m.rating,
			)
			for m in self.movies
			if m.budget > 0 and m.revenue > 0
		]
