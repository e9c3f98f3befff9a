"""
Unit tests for TF, IDF and the dense TF-IDF matrix.
"""

import math

import numpy as np
import pytest

from recommender.vectorizer import build_tfidf_matrix, inverse_document_frequency, term_frequencies
from recommender.vocabulary import build_vocabulary


def test_term_frequencies_normalised_by_total_tokens():
	tf = term_frequencies(['aaa', 'aaa', 'bbb'])
	assert tf == pytest.approx({'aaa': 2 / 3, 'bbb': 1 / 3})


def test_term_frequencies_of_empty_sequence():
	assert term_frequencies([]) == {}


def test_idf_formula_and_negative_weights():
	vocab = build_vocabulary([['common', 'rare'], ['common'], ['common', 'other']])
	idf = dict(zip(vocab.terms, inverse_document_frequency(vocab)))
	assert idf['rare'] == pytest.approx(math.log(3 / 2))
	# present in every document: ln(3 / 4) < 0, kept as-is
	assert idf['common'] == pytest.approx(math.log(3 / 4))
	assert idf['common'] < 0


def test_matrix_weights():
	token_lists = [['aaa', 'aaa', 'bbb'], ['ccc'], ['ddd']]
	vocab = build_vocabulary(token_lists)
	tfidf = build_tfidf_matrix(token_lists, vocab)

	assert tfidf.shape == (3, 4)
	row = tfidf.as_mapping(0)
	assert row['aaa'] == pytest.approx(2 / 3 * math.log(3 / 2))
	assert row['bbb'] == pytest.approx(1 / 3 * math.log(3 / 2))
	assert row['ccc'] == 0.0
	assert row['ddd'] == 0.0


def test_every_vector_covers_the_whole_vocabulary():
	token_lists = [['aaa'], ['bbb', 'ccc'], []]
	vocab = build_vocabulary(token_lists)
	tfidf = build_tfidf_matrix(token_lists, vocab)
	for i in range(len(token_lists)):
		assert set(tfidf.as_mapping(i)) == set(vocab.terms)


def test_empty_token_list_gives_zero_vector():
	token_lists = [['aaa'], []]
	vocab = build_vocabulary(token_lists)
	tfidf = build_tfidf_matrix(token_lists, vocab)
	assert not np.any(tfidf.row(1))


def test_matrix_is_read_only():
	token_lists = [['aaa'], ['bbb']]
	tfidf = build_tfidf_matrix(token_lists, build_vocabulary(token_lists))
	with pytest.raises(ValueError):
		tfidf.matrix[0, 0] = 1.0


def test_mismatched_inputs_rejected():
	vocab = build_vocabulary([['aaa'], ['bbb']])
	with pytest.raises(ValueError):
		build_tfidf_matrix([['aaa']], vocab)
