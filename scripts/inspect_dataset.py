"""
Inspect the movie dataset.

This script:
1) Loads movies from the configured dataset (MOVIES_DATA_PATH, default data/movies.json)
2) Reports the derived genre list
3) Counts movies per MPAA rating
4) Counts movies missing each field used by the filters

Usage:
    python -m scripts.inspect_dataset [path]

A malformed or missing dataset makes the script fail, the same way the API fails at startup.
"""

import sys  # optional path argument
from collections import Counter  # per-rating counts

from loguru import logger  # console logging

from catalog.config import Config, configure_logging  # env-driven settings
from catalog.search_engine import MovieDatabase  # dataset loader + pipeline


FILTER_FIELDS = ('title', 'major_genre', 'mpaa_rating', 'imdb_rating', 'rotten_tomatoes_rating')


def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	path = argv[0] if argv else Config.DATA_PATH

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Movie Dataset Inspection")
	logger.info("=" * 60)

	# 1) Load data
	logger.info(f"[1/4] Loading movies from {path}...")
	database = MovieDatabase.from_json(path)  # raises if missing/malformed
	logger.info(f"[OK] Loaded {len(database)} movies")

	# 2) Genres
	logger.info(f"[2/4] {len(database.genres)} genres: {', '.join(database.genres)}")

	# 3) MPAA ratings, including values outside the fixed list
	logger.info("[3/4] Movies per MPAA rating:")
	counts = Counter(m.mpaa_rating for m in database.movies)
	for rating in database.mpaa_ratings:
		logger.info(f"  {rating:<8} {counts.pop(rating, 0)}")
	for rating, count in sorted(counts.items(), key=lambda kv: str(kv[0])):
		logger.info(f"  {str(rating):<8} {count} (not a filter choice)")

	# 4) Missing filter fields
	logger.info("[4/4] Movies missing filter fields:")
	for field in FILTER_FIELDS:
		missing = sum(1 for m in database.movies if getattr(m, field) is None)
		logger.info(f"  {field:<24} {missing}")

	logger.info("=" * 60)
	return database


if __name__ == '__main__':
	configure_logging()
	main()  # invoke inspection
