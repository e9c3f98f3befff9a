"""
Project settings.
Module-level defaults that can be overridden through environment variables.
"""

import os
import sys

from loguru import logger

# Base paths
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_PATH = os.getenv('RECOMMENDER_DATA_PATH', os.path.join(PROJECT_ROOT, 'data', 'movies.jsonl'))

# Recommendation defaults
DEFAULT_TOP_N = int(os.getenv('RECOMMENDER_TOP_N', '8'))  # cards shown per search
ANALYTICS_SINCE_YEAR = int(os.getenv('RECOMMENDER_ANALYTICS_SINCE', '1990'))

# Logging
LOG_LEVEL = os.getenv('RECOMMENDER_LOG_LEVEL', 'INFO')

# Where the Streamlit client looks for the API
API_URL = os.getenv('RECOMMENDER_API_URL', 'http://localhost:8000')


def configure_logging(level: str = LOG_LEVEL) -> None:
	"""Replace loguru's default sink with a stderr sink at the given level."""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())
