"""
Shared fixtures: small hand-built datasets and temporary dataset files.
"""

import json

import pytest

from catalog.models import Movie
from catalog.search_engine import MovieDatabase


@pytest.fixture
def jaws_movies():
	"""The two-movie example: one horror classic, one comedy."""
	return [
		Movie(title="Jaws", major_genre="Horror", mpaa_rating="PG", imdb_rating=8.0, rotten_tomatoes_rating=97),
		Movie(title="Jawbreaker", major_genre="Comedy", mpaa_rating="R", imdb_rating=5.2, rotten_tomatoes_rating=44),
	]


@pytest.fixture
def sample_movies(jaws_movies):
	"""Adds movies with missing fields to the two-movie example."""
	return jaws_movies + [
		Movie(title="Toy Story", major_genre="Adventure", mpaa_rating="G", imdb_rating=8.2, rotten_tomatoes_rating=100),
		Movie(title=None, major_genre="Horror", mpaa_rating=None, imdb_rating=6.5, rotten_tomatoes_rating=None),
		Movie(title="Scream", major_genre="Horror", mpaa_rating="R", imdb_rating=None, rotten_tomatoes_rating=78),
		Movie(title="Hoop Dreams", major_genre=None, mpaa_rating="PG-13", imdb_rating=8.3, rotten_tomatoes_rating=None),
	]


@pytest.fixture
def database(sample_movies):
	return MovieDatabase(sample_movies)


@pytest.fixture
def write_dataset(tmp_path):
	"""Return a helper that writes `content` (JSON-encoded unless already text or bytes) to a temp file."""
	def _write(content, name='movies.json'):
		path = tmp_path / name
		if isinstance(content, bytes):
			path.write_bytes(content)
			return path
		text = content if isinstance(content, str) else json.dumps(content)
		path.write_text(text, encoding='utf-8')
		return path
	return _write
