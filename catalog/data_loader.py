"""
Data loading module.
Reads the static movie dataset (a JSON array) into Movie records and derives the genre list.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # parse the dataset file
import math  # reject NaN/Infinity literals
from typing import Any, Dict, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


class DatasetError(ValueError):
	"""Raised when the dataset file exists but cannot be turned into movie records."""


class DataLoader:
	"""
	Handles loading of the movie dataset.
	Any problem with the file is fatal: no partially loaded dataset is ever returned.
	"""

	# Movie attribute -> accepted keys in the raw record (property-style key first, then the spaced key)
	FIELD_KEYS = {
		'title': ('Title',),
		'us_gross': ('USGross', 'US Gross'),
		'worldwide_gross': ('WorldwideGross', 'Worldwide Gross'),
		'us_dvd_sales': ('USDVDSales', 'US DVD Sales'),
		'production_budget': ('ProductionBudget', 'Production Budget'),
		'release_date': ('ReleaseDate', 'Release Date'),
		'mpaa_rating': ('MPAARating', 'MPAA Rating'),
		'running_time': ('RunningTime', 'Running Time min'),
		'distributor': ('Distributor',),
		'source': ('Source',),
		'major_genre': ('MajorGenre', 'Major Genre'),
		'creative_type': ('CreativeType', 'Creative Type'),
		'director': ('Director',),
		'rotten_tomatoes_rating': ('RottenTomatoesRating', 'Rotten Tomatoes Rating'),
		'imdb_rating': ('IMDBRating', 'IMDB Rating'),
		'imdb_votes': ('IMDBVotes', 'IMDB Votes'),
	}

	# Attributes holding numbers; everything else is text
	NUMERIC_FIELDS = {
		'us_gross', 'worldwide_gross', 'us_dvd_sales', 'production_budget',
		'running_time', 'rotten_tomatoes_rating', 'imdb_rating', 'imdb_votes',
	}

	def load_movies_from_json(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a JSON file holding one array of movie objects.
		Returns the movies in file order.
		"""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[Loader] Loading movies from {filepath}...")  # log action

		try:
			with open(filepath, 'r', encoding='utf-8') as f:
				data = json.load(f)  # whole file is one JSON document
		except (json.JSONDecodeError, UnicodeDecodeError) as e:  # bad syntax or not UTF-8
			raise DatasetError(f"Invalid JSON in {filepath}: {e}") from e

		if not isinstance(data, list):
			raise DatasetError(f"Expected a JSON array of movies in {filepath}, got {type(data).__name__}")

		movies = []  # accumulator for parsed Movie objects
		for index, record in enumerate(data):  # keep the position for diagnostics
			if not isinstance(record, dict):
				raise DatasetError(f"Movie #{index} in {filepath} is not a JSON object")
			try:
				movies.append(self._parse_movie_data(record))
			except DatasetError as e:
				raise DatasetError(f"Movie #{index} in {filepath}: {e}") from e

		logger.info(f"[Loader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def _parse_movie_data(self, data: Dict[str, Any]) -> Movie:
		"""
		Convert a raw dictionary (from file) into a Movie, validating each field's type.
		Missing keys and JSON nulls both become None.
		"""
		values = {}
		for attr, keys in self.FIELD_KEYS.items():
			raw = self._first_present(data, keys)  # look up under any accepted key
			if attr in self.NUMERIC_FIELDS:
				values[attr] = self._parse_number(raw, keys[0])
			else:
				values[attr] = self._parse_text(raw, keys[0])
		return Movie(**values)

	def _first_present(self, data: Dict[str, Any], keys) -> Any:
		for key in keys:
			if key in data:
				return data[key]
		return None

	def _parse_number(self, value: Any, key: str) -> Optional[float]:
		if value is None:
			return None
		# bool is an int subclass but never a valid score
		if isinstance(value, bool) or not isinstance(value, (int, float)):
			raise DatasetError(f"field '{key}' must be a number or null, got {value!r}")
		# json accepts NaN and Infinity, which no bound can compare against
		if not math.isfinite(value):
			raise DatasetError(f"field '{key}' must be a finite number, got {value!r}")
		return float(value)

	def _parse_text(self, value: Any, key: str) -> Optional[str]:
		if value is None:
			return None
		if isinstance(value, str):
			return value
		# Some titles in the raw data are bare numbers (e.g. 1776)
		if isinstance(value, (int, float)) and not isinstance(value, bool):
			return str(value)
		raise DatasetError(f"field '{key}' must be a string or null, got {value!r}")

	def get_all_genres(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all distinct non-null major genres in the dataset."""
		genres = set()  # unique genres
		for movie in movies:  # iterate
			if movie.major_genre is not None:  # nulls are not a genre
				genres.add(movie.major_genre)
		return sorted(genres)  # sorted for stable display
