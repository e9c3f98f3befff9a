"""
Unit tests for cosine similarity and the ranker.
"""

import numpy as np
import pytest

from recommender.similarity import Ranker, cosine_similarity

from conftest import make_movie


def test_self_similarity_is_one():
	v = np.array([0.3, -0.2, 0.0, 1.5])
	assert cosine_similarity(v, v) == pytest.approx(1.0)


def test_symmetric():
	a = np.array([0.1, 0.4, -0.3])
	b = np.array([0.7, 0.0, 0.2])
	assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))


def test_zero_vector_gives_exactly_zero():
	zero = np.zeros(3)
	assert cosine_similarity(zero, np.array([1.0, 2.0, 3.0])) == 0.0
	assert cosine_similarity(np.array([1.0, 2.0, 3.0]), zero) == 0.0
	assert cosine_similarity(zero, zero) == 0.0


def test_negative_similarity_is_not_clamped():
	a = np.array([1.0, 0.0])
	b = np.array([-1.0, 0.0])
	assert cosine_similarity(a, b) == pytest.approx(-1.0)


def test_ranker_excludes_target_and_breaks_ties_by_collection_order():
	movies = [make_movie(id=i, title=f'm{i}') for i in range(4)]
	matrix = np.array([
		[1.0, 0.0],
		[0.0, 1.0],  # orthogonal -> 0
		[1.0, 0.0],  # identical -> 1
		[0.0, 2.0],  # orthogonal -> 0
	])
	ranker = Ranker(lambda target, candidate: [])
	results = ranker.rank(0, matrix, movies, top_n=3)
	assert [r.movie.id for r in results] == [2, 1, 3]
	assert results[0].similarity == pytest.approx(1.0)


def test_ranker_non_positive_top_n():
	movies = [make_movie(id=i) for i in range(2)]
	matrix = np.eye(2)
	ranker = Ranker(lambda target, candidate: [])
	assert ranker.rank(0, matrix, movies, top_n=0) == []
	assert ranker.rank(0, matrix, movies, top_n=-3) == []
