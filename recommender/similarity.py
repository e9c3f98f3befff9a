"""
Ranking module.
Scores candidate movies against a target by cosine similarity of their TF-IDF vectors.
"""

from typing import Callable, List, Sequence

import numpy as np
from loguru import logger

from .models import Movie, RecommendationResult


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
	"""
	dot(a, b) / (|a| * |b|), or exactly 0.0 when either vector has zero norm.
	The value is not clamped: negative IDF weights can push it outside 0..1.
	"""
	norm_a = float(np.sqrt(np.dot(a, a)))
	norm_b = float(np.sqrt(np.dot(b, b)))
	magnitude = norm_a * norm_b
	if magnitude == 0:
		return 0.0
	return float(np.dot(a, b)) / magnitude


class Ranker:
	"""
	Ranks every other movie in the collection against a target movie.
	- explain: callable producing the "why recommended" lines for (target, candidate)
	"""

	def __init__(self, explain: Callable[[Movie, Movie], List[str]]):
		self.explain = explain

	def rank(
		self,
		target_index: int,
		matrix: np.ndarray,
		movies: Sequence[Movie],
		top_n: int,
	) -> List[RecommendationResult]:
		"""
		Compare the target row with every other row and return the top_n results,
		highest similarity first. Equal similarities keep collection order.
		"""
		if top_n <= 0:
			return []

		target = movies[target_index]
		target_vector = matrix[target_index]

		candidates: List[RecommendationResult] = []
		for i, movie in enumerate(movies):
			if i == target_index:  # never recommend the movie itself
				continue
			similarity = cosine_similarity(target_vector, matrix[i])
			candidates.append(
				RecommendationResult(
					movie=movie,
					similarity=similarity,
					explanation=self.explain(target, movie),
				)
			)

		# sorted() is stable, including with reverse=True
		candidates = sorted(candidates, key=lambda r: r.similarity, reverse=True)
		logger.debug(
			f"[Ranker] Ranked {len(candidates)} candidates for '{target.title}' | returning {min(top_n, len(candidates))}"
		)
		return candidates[:top_n]
