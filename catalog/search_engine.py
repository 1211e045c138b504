"""
Search engine module.
Title search and filters over an in-memory movie collection, plus the MovieDatabase
that owns the loaded dataset and runs the query pipeline in a fixed order.
"""

import time  # measure query latency for debug logs
from typing import Iterable, List, Optional, Sequence, Set, Union  # type annotations for clarity

# Import project modules for data structures and loading
from .models import MPAA_RATINGS, Movie, MovieQuery  # core data classes
from .data_loader import DataLoader  # dataset reader

# Import loguru for console logging
from loguru import logger  # simple structured logger


def search(movies: Sequence[Movie], terms: Optional[str]) -> Sequence[Movie]:
	"""
	Keep movies whose title contains `terms`, ignoring case.
	No terms (None or "") means no restriction and returns the input unchanged.
	"""
	if not terms:
		return movies
	needle = terms.lower()  # compare in lowercase
	return [m for m in movies if m.title is not None and needle in m.title.lower()]


def _as_choices(values: Union[str, Iterable[str], None]) -> Set[str]:
	# a bare string is one choice, not a set of characters
	if isinstance(values, str):
		return {values} if values else set()
	return set(values or [])


def filter_by_mpaa_rating(movies: Sequence[Movie], ratings: Union[str, Iterable[str], None]) -> Sequence[Movie]:
	"""Keep movies whose MPAA rating is one of `ratings`; empty `ratings` keeps everything."""
	allowed = _as_choices(ratings)
	if not allowed:
		return movies
	return [m for m in movies if m.mpaa_rating is not None and m.mpaa_rating in allowed]


def filter_by_genre(movies: Sequence[Movie], genres: Union[str, Iterable[str], None]) -> Sequence[Movie]:
	"""Keep movies whose major genre is one of `genres`; empty `genres` keeps everything."""
	allowed = _as_choices(genres)
	if not allowed:
		return movies
	return [m for m in movies if m.major_genre is not None and m.major_genre in allowed]


def filter_by_numeric_range(
	movies: Sequence[Movie],
	field: str,
	min_value: Optional[float] = None,
	max_value: Optional[float] = None,
) -> Sequence[Movie]:
	"""
	Keep movies whose numeric `field` lies within the given bounds (inclusive).
	Each bound applies only when present; with both absent the input is returned unchanged.
	Movies with no value for `field` are kept.
	"""
	if min_value is None and max_value is None:
		return movies

	def in_range(movie: Movie) -> bool:
		value = getattr(movie, field)
		if value is None:  # unrated movies are not excluded by a range
			return True
		if min_value is not None and value < min_value:
			return False
		if max_value is not None and value > max_value:
			return False
		return True

	return [m for m in movies if in_range(m)]


def filter_by_imdb_rating(movies: Sequence[Movie], min_value: Optional[float], max_value: Optional[float]) -> Sequence[Movie]:
	"""Range filter on the IMDB rating (0-10)."""
	return filter_by_numeric_range(movies, 'imdb_rating', min_value, max_value)


def filter_by_rotten_tomatoes_rating(movies: Sequence[Movie], min_value: Optional[float], max_value: Optional[float]) -> Sequence[Movie]:
	"""Range filter on the Rotten Tomatoes rating (0-100)."""
	return filter_by_numeric_range(movies, 'rotten_tomatoes_rating', min_value, max_value)


class MovieDatabase:
	"""
	Read-only catalog of movies loaded once at startup.
	Build it explicitly (or with `from_json`) and hand it to whatever serves requests.
	"""

	def __init__(self, movies: Iterable[Movie]):
		# Store as a tuple so the dataset cannot be modified after load
		self._movies = tuple(movies)
		# Derive the genre list once; sorted for deterministic display
		self._genres = DataLoader().get_all_genres(self._movies)
		logger.info(f"[Database] Ready with {len(self._movies)} movies and {len(self._genres)} genres")

	@classmethod
	def from_json(cls, filepath: str) -> 'MovieDatabase':
		"""Load the dataset file and build the database; raises if the file is missing or malformed."""
		loader = DataLoader()
		return cls(loader.load_movies_from_json(filepath))

	def __len__(self) -> int:
		return len(self._movies)

	@property
	def movies(self) -> Sequence[Movie]:
		"""All movies, in load order."""
		return self._movies

	@property
	def genres(self) -> List[str]:
		"""Distinct major genres present in the dataset."""
		return list(self._genres)

	@property
	def mpaa_ratings(self) -> List[str]:
		"""The fixed list of MPAA ratings offered as filter choices."""
		return list(MPAA_RATINGS)

	def search(self, terms: Optional[str]) -> Sequence[Movie]:
		"""Search the whole dataset by title."""
		return search(self._movies, terms)

	def filter_by_mpaa_rating(self, movies: Sequence[Movie], ratings: Union[str, Iterable[str], None]) -> Sequence[Movie]:
		return filter_by_mpaa_rating(movies, ratings)

	def filter_by_genre(self, movies: Sequence[Movie], genres: Union[str, Iterable[str], None]) -> Sequence[Movie]:
		return filter_by_genre(movies, genres)

	def filter_by_imdb_rating(self, movies: Sequence[Movie], min_value: Optional[float], max_value: Optional[float]) -> Sequence[Movie]:
		return filter_by_imdb_rating(movies, min_value, max_value)

	def filter_by_rotten_tomatoes_rating(self, movies: Sequence[Movie], min_value: Optional[float], max_value: Optional[float]) -> Sequence[Movie]:
		return filter_by_rotten_tomatoes_rating(movies, min_value, max_value)

	def query(self, query: MovieQuery) -> List[Movie]:
		"""
		Run the full pipeline: search, then MPAA rating, genre, IMDB range and
		Rotten Tomatoes range filters, each narrowing the previous step's output.
		"""
		start = time.time()  # start timer
		results = self.search(query.terms)
		results = self.filter_by_mpaa_rating(results, query.mpaa_ratings)
		results = self.filter_by_genre(results, query.genres)
		results = self.filter_by_imdb_rating(results, query.imdb_min, query.imdb_max)
		results = self.filter_by_rotten_tomatoes_rating(results, query.rotten_tomatoes_min, query.rotten_tomatoes_max)
		elapsed_ms = (time.time() - start) * 1000  # compute ms
		logger.debug(f"[Database] Query {query} matched {len(results)} of {len(self._movies)} movies in {elapsed_ms:.2f} ms")
		return list(results)  # fresh list, never the stored tuple
