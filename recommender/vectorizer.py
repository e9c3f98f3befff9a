"""
TF-IDF vectorizer module using NumPy.
Builds one dense weight vector per movie over the global vocabulary.
"""

# Import NumPy for dense, fixed-order weight arrays
import numpy as np  # numeric arrays
# Import dataclass for the immutable matrix bundle
from dataclasses import dataclass  # generated __init__/__repr__
# Typing hints for clarity of public API
from typing import Dict, List  # type hints
# Collections helper to count raw token occurrences
from collections import Counter  # multiset counting

# Vocabulary bundle built from the same token lists
from .vocabulary import Vocabulary  # term table + document frequencies

# Console logging
from loguru import logger  # console logger


def term_frequencies(tokens: List[str]) -> Dict[str, float]:
	"""
	Raw count of each token divided by the total token count (duplicates included).
	An empty token list yields an empty mapping, i.e. a zero vector.
	"""
	total = len(tokens)  # includes duplicates
	if total == 0:
		return {}
	return {token: count / total for token, count in Counter(tokens).items()}


def inverse_document_frequency(vocabulary: Vocabulary) -> np.ndarray:
	"""
	IDF per vocabulary column: ln(N / (DF + 1)).
	Terms present in (nearly) every document get a negative weight; this is kept as-is.
	"""
	df = np.array([vocabulary.document_frequency[t] for t in vocabulary.terms], dtype=np.float64)
	return np.log(vocabulary.num_documents / (df + 1.0))


@dataclass(frozen=True)
class TfidfMatrix:
	"""
	Dense TF-IDF weights for the whole collection.
	- matrix: shape (num_movies, vocabulary_size); row i belongs to the i-th movie in collection order
	- idf: shape (vocabulary_size,)
	"""
	vocabulary: Vocabulary
	idf: np.ndarray
	matrix: np.ndarray

	@property
	def shape(self):
		return self.matrix.shape

	def row(self, index: int) -> np.ndarray:
		"""Return the (read-only) weight vector of the movie at a collection position."""
		return self.matrix[index]

	def as_mapping(self, index: int) -> Dict[str, float]:
		"""Return a movie's vector as term -> weight; keys are exactly the vocabulary."""
		row = self.matrix[index]
		return {term: float(row[i]) for i, term in enumerate(self.vocabulary.terms)}


def build_tfidf_matrix(token_lists: List[List[str]], vocabulary: Vocabulary) -> TfidfMatrix:
	"""
	Compute TF(t) x IDF(t) for every movie and every vocabulary term.
	Costs O(N*V) time and memory, which limits this to small and moderate collections.
	"""
	if len(token_lists) != vocabulary.num_documents:
		raise ValueError(
			f"Number of token lists ({len(token_lists)}) doesn't match vocabulary documents ({vocabulary.num_documents})"
		)

	idf = inverse_document_frequency(vocabulary)  # one weight per column
	matrix = np.zeros((len(token_lists), len(vocabulary)), dtype=np.float64)  # absent terms stay 0

	logger.info(f"[Vectorizer] Computing TF-IDF matrix | shape={matrix.shape}")
	for row, tokens in enumerate(token_lists):
		for term, tf in term_frequencies(tokens).items():
			col = vocabulary.term_index[term]  # every token is in the vocabulary
			matrix[row, col] = tf * idf[col]

	# Freeze the arrays so readers can share them without copying
	idf.setflags(write=False)
	matrix.setflags(write=False)

	negative = int(np.count_nonzero(idf < 0))
	if negative:
		logger.debug(f"[Vectorizer] {negative} near-ubiquitous terms have negative IDF")
	return TfidfMatrix(vocabulary=vocabulary, idf=idf, matrix=matrix)
