"""
Tokenization module.
Turns a movie's textual and categorical fields into the term sequence used for TF-IDF.
"""

import re  # regex for punctuation stripping
from typing import List  # type annotations

from .models import Movie  # movie record

# Any character that is neither a word character (letter, digit, underscore) nor whitespace
RE_NON_WORD = re.compile(r"[^\w\s]")

# Tokens of this length or shorter are discarded ("of", "a", "2"...)
MIN_TOKEN_LENGTH = 3


def build_content(movie: Movie) -> str:
	"""
	Concatenate the fields that describe a movie's content, space-joined in a fixed order:
	title, overview, genres, cast, director, keywords.
	"""
	return ' '.join([
		movie.title,
		movie.overview,
		' '.join(movie.genres),
		' '.join(movie.cast),
		movie.director,
		' '.join(movie.keywords),
	])


def tokenize(text: str) -> List[str]:
	"""
	Lowercase the text, blank out punctuation and split on whitespace.
	Duplicates and order are kept because term frequency depends on them.
	"""
	cleaned = RE_NON_WORD.sub(' ', text.lower())  # punctuation -> space
	return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


def tokenize_movie(movie: Movie) -> List[str]:
	"""Shortcut for tokenize(build_content(movie))."""
	return tokenize(build_content(movie))
