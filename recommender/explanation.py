"""
Explanation module.
Builds the human-readable "why recommended" lines from raw movie attributes.
These lines are a coarse overlap heuristic and do not look at the TF-IDF vectors,
so they can disagree with the terms that actually drive the similarity score.
"""

from typing import List

from .models import Movie


def _shared(first: List[str], second: List[str]) -> List[str]:
	"""Items of `first` that also appear in `second`, in `first`'s order."""
	return [item for item in first if item in second]


def explain(target: Movie, candidate: Movie) -> List[str]:
	"""
	Return overlap reasons in a fixed order: genres, director, cast, keywords.
	A reason is included only when its overlap is non-empty.
	"""
	reasons: List[str] = []

	common_genres = _shared(target.genres, candidate.genres)
	if common_genres:
		reasons.append(f"Shares genres: {', '.join(common_genres)}")

	# Exact string comparison
	if target.director == candidate.director:
		reasons.append(f"Same director: {target.director}")

	common_cast = _shared(target.cast, candidate.cast)
	if common_cast:
		reasons.append(f"Common cast: {', '.join(common_cast[:2])}")

	common_keywords = _shared(target.keywords, candidate.keywords)
	if common_keywords:
		reasons.append(f"Similar themes: {', '.join(common_keywords[:3])}")

	return reasons
