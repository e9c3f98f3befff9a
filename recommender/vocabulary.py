"""
Vocabulary module.
Derives the global term set and per-term document frequency from the whole collection.
"""

# Import dataclass for the immutable vocabulary bundle
from dataclasses import dataclass  # generated __init__/__repr__
# Typing helpers for the public API
from typing import Dict, Iterable, List, Optional, Tuple  # type hints

# Console logging
from loguru import logger  # console logger


@dataclass(frozen=True)
class Vocabulary:
	"""
	Every distinct term seen in the collection, in first-seen order.
	- terms: ordered tuple of terms; position == column in the TF-IDF matrix
	- term_index: term -> column lookup built once
	- document_frequency: term -> number of documents containing it at least once
	- num_documents: collection size N
	"""
	terms: Tuple[str, ...]
	term_index: Dict[str, int]
	document_frequency: Dict[str, int]
	num_documents: int

	def __len__(self) -> int:
		return len(self.terms)

	def __contains__(self, term: object) -> bool:
		return term in self.term_index

	def index_of(self, term: str) -> Optional[int]:
		"""Return the column of a term, or None if it never occurs in the collection."""
		return self.term_index.get(term)


def build_vocabulary(token_lists: Iterable[List[str]]) -> Vocabulary:
	"""
	Build the vocabulary and document frequencies from one token list per document.
	Each document contributes at most 1 to a term's document frequency.
	"""
	document_frequency: Dict[str, int] = {}  # insertion order doubles as column order
	num_documents = 0  # collection size

	for tokens in token_lists:  # one entry per movie
		num_documents += 1
		# dict.fromkeys keeps first-seen order while deduplicating
		for token in dict.fromkeys(tokens):
			document_frequency[token] = document_frequency.get(token, 0) + 1

	terms = tuple(document_frequency)  # stable column order
	term_index = {term: i for i, term in enumerate(terms)}  # term -> column

	logger.info(f"[Vocabulary] Built vocabulary | documents={num_documents} | terms={len(terms)}")
	return Vocabulary(
		terms=terms,
		term_index=term_index,
		document_frequency=document_frequency,
		num_documents=num_documents,
	)
