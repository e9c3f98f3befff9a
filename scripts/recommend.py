"""
Print content-based recommendations for a movie title.

This script:
1) Loads movies from the configured dataset (data/movies.jsonl by default)
2) Builds the vocabulary and TF-IDF vectors
3) Prints the top matches with their similarity and explanation

Usage:
    python -m scripts.recommend "dark knight" --top-n 5
    python -m scripts.recommend --stats
"""

import argparse  # command line options
import time  # measure step timings

from loguru import logger  # console logging

from recommender import config  # env-driven settings
from recommender.data_loader import DataLoader  # data ingestion
from recommender.engine import ContentBasedRecommendationEngine  # TF-IDF recommender


def main(argv=None):
	parser = argparse.ArgumentParser(description="Content-based movie recommendations")
	parser.add_argument('title', nargs='?', help="part of a movie title")
	parser.add_argument('--top-n', type=int, default=config.DEFAULT_TOP_N, help="number of recommendations")
	parser.add_argument('--data', default=config.DATA_PATH, help="JSONL or JSON movie catalogue")
	parser.add_argument('--stats', action='store_true', help="print collection statistics")
	parser.add_argument('--log-level', default=config.LOG_LEVEL)
	args = parser.parse_args(argv)

	config.configure_logging(args.log_level)

	# 1) Load data
	movies = DataLoader().load_movies(args.data)

	# 2) Build engine
	t0 = time.time()
	engine = ContentBasedRecommendationEngine(movies)
	logger.info(f"[OK] Engine built in {time.time() - t0:.2f}s")

	if args.stats:
		s = engine.stats()
		print(f"Movies: {s.total_movies}")
		print(f"Genres: {s.total_genres} ({', '.join(s.genres)})")
		print(f"Average rating: {s.average_rating:.2f}")
		print(f"Average runtime: {s.average_runtime:.1f} min")
		print(f"Vocabulary size: {s.vocabulary_size}")

	if not args.title:
		return 0

	# 3) Recommend
	matched = engine.find_by_title(args.title)
	if matched is None:
		print(f'No movie found matching "{args.title}".')
		return 1

	print(f"Because you liked {matched.title} ({matched.year}):")
	for i, r in enumerate(engine.recommend(args.title, top_n=args.top_n), 1):
		print(f"  {i}. [{r.similarity:.3f}] {r.movie.title} ({r.movie.year}) - {', '.join(r.movie.genres[:3])}")
		for reason in r.explanation:
			print(f"       {reason}")
	return 0


if __name__ == '__main__':
	raise SystemExit(main())
