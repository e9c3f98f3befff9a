"""
Data loading module.
Reads movie records from JSON Lines or JSON array files and turns them into Movie objects.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON lines / arrays
from typing import Any, Dict, List  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Loads movie catalogues. Accepts TMDB-style field names
	(vote_average, poster_path) as well as the plain ones (rating, poster_url).
	"""

	def load_movies_from_jsonl(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a JSON Lines (JSONL) file where each line is one JSON object.
		Invalid lines are logged and skipped.
		"""
		movies = []  # accumulator for parsed Movie objects
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# Read line-by-line, keeping track of line numbers for diagnostics
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):
				if not line.strip():  # tolerate blank lines
					continue
				try:
					data = json.loads(line)  # parse JSON object per line
					movies.append(self.parse_movie(data))  # dict -> Movie
				except json.JSONDecodeError as e:
					logger.warning(f"[DataLoader] Skipping invalid JSON at line {line_num}: {e}")
				except (TypeError, ValueError, AttributeError) as e:
					logger.warning(f"[DataLoader] Error parsing movie at line {line_num}: {e}")

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def load_movies_from_json(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a JSON file holding a list of movie objects
		(or an object with a "movies" list).
		"""
		filepath = Path(filepath)
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")
		with open(filepath, 'r', encoding='utf-8') as f:
			payload = json.load(f)

		records = payload.get('movies', []) if isinstance(payload, dict) else payload
		movies = []
		for position, data in enumerate(records):
			try:
				movies.append(self.parse_movie(data))
			except (TypeError, ValueError, AttributeError) as e:
				logger.warning(f"[DataLoader] Error parsing movie #{position}: {e}")

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")
		return movies

	def load_movies(self, filepath: str) -> List[Movie]:
		"""Dispatch on file extension: .jsonl -> JSON Lines, anything else -> JSON array."""
		if str(filepath).endswith('.jsonl'):
			return self.load_movies_from_jsonl(filepath)
		return self.load_movies_from_json(filepath)

	def parse_movie(self, data: Dict[str, Any]) -> Movie:
		"""
		Convert a raw dictionary (from file) into a Movie.
		Text is kept as written; only surrounding whitespace is trimmed.
		"""
		if 'id' not in data:
			raise ValueError("movie record has no 'id'")

		rating = data.get('vote_average', data.get('rating'))  # TMDB name first

		return Movie(
			id=int(data['id']),
			title=self._clean_text(data.get('title')),
			overview=self._clean_text(data.get('overview')),
			genres=self._parse_comma_separated(data.get('genres')),
			cast=self._parse_comma_separated(data.get('cast')),
			director=self._clean_text(data.get('director')),
			keywords=self._parse_comma_separated(data.get('keywords')),
			rating=float(rating) if rating else 0.0,
			runtime=int(data['runtime']) if data.get('runtime') else 0,
			release_date=self._clean_text(data.get('release_date')),
			budget=float(data['budget']) if data.get('budget') else 0.0,
			revenue=float(data['revenue']) if data.get('revenue') else 0.0,
			poster_path=data.get('poster_path') or data.get('poster_url'),
		)

	def _parse_comma_separated(self, value) -> List[str]:
		"""
		Normalize a value that may be None, a list, or a comma-separated string
		into a list of clean strings.
		"""
		if value is None:  # missing field
			return []
		if isinstance(value, list):  # already a list
			return [str(item).strip() for item in value if item]
		if isinstance(value, str):  # comma-separated string
			return [item.strip() for item in value.split(',') if item.strip()]
		return []  # any other type becomes empty

	def _clean_text(self, text) -> str:
		"""Trim whitespace; None becomes the empty string."""
		if not text:
			return ''
		return str(text).strip()
