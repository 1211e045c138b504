"""
Tests for dataset loading: parsing, key aliases, genre derivation and fatal errors.
Run: pytest tests/test_data_loader.py
"""

from pathlib import Path

import pytest

from catalog.data_loader import DataLoader, DatasetError
from catalog.models import Movie
from catalog.search_engine import MovieDatabase

ROOT = Path(__file__).resolve().parents[1]


def test_loads_property_style_records(write_dataset):
	path = write_dataset([
		{"Title": "Jaws", "MajorGenre": "Horror", "MPAARating": "PG", "IMDBRating": 8.0, "RottenTomatoesRating": 97,
		 "Director": "Steven Spielberg", "RunningTime": 124},
	])
	movies = DataLoader().load_movies_from_json(str(path))
	assert movies == [Movie(
		title="Jaws", major_genre="Horror", mpaa_rating="PG", imdb_rating=8.0,
		rotten_tomatoes_rating=97.0, director="Steven Spielberg", running_time=124.0,
	)]


def test_loads_spaced_keys(write_dataset):
	path = write_dataset([
		{"Title": "Jawbreaker", "Major Genre": "Comedy", "MPAA Rating": "R", "IMDB Rating": 5.2,
		 "Rotten Tomatoes Rating": 44, "Running Time min": 87, "US Gross": 3076820},
	])
	movie = DataLoader().load_movies_from_json(str(path))[0]
	assert movie.major_genre == "Comedy"
	assert movie.mpaa_rating == "R"
	assert movie.imdb_rating == 5.2
	assert movie.rotten_tomatoes_rating == 44.0
	assert movie.running_time == 87.0
	assert movie.us_gross == 3076820.0


def test_missing_and_null_fields_become_none(write_dataset):
	path = write_dataset([{"Title": None, "IMDBRating": None}, {}])
	movies = DataLoader().load_movies_from_json(str(path))
	assert movies == [Movie(), Movie()]


def test_numeric_titles_are_text(write_dataset):
	path = write_dataset([{"Title": 1776}])
	assert DataLoader().load_movies_from_json(str(path))[0].title == "1776"


def test_preserves_file_order(write_dataset):
	path = write_dataset([{"Title": t} for t in ["b", "a", "c"]])
	assert [m.title for m in DataLoader().load_movies_from_json(str(path))] == ["b", "a", "c"]


def test_empty_array_is_an_empty_dataset(write_dataset):
	db = MovieDatabase.from_json(str(write_dataset([])))
	assert len(db) == 0
	assert db.genres == []


def test_missing_file_is_fatal(tmp_path):
	with pytest.raises(FileNotFoundError):
		DataLoader().load_movies_from_json(str(tmp_path / "nope.json"))


@pytest.mark.parametrize("content", [
	"{not json",
	'{"Title": "Jaws"}',
	'[1, 2]',
	'[{"Title": "Jaws", "IMDBRating": "high"}]',
	'[{"Title": "Jaws", "IMDBRating": true}]',
	'[{"Title": ["Jaws"]}]',
	'[{"Title": "Odd", "IMDBRating": NaN}]',
	'[{"Title": "Odd", "RottenTomatoesRating": -Infinity}]',
	b'[{"Title": "\xff"}]',
])
def test_malformed_dataset_is_fatal(write_dataset, content):
	with pytest.raises(DatasetError):
		DataLoader().load_movies_from_json(str(write_dataset(content)))


def test_one_bad_record_fails_the_whole_load(write_dataset):
	path = write_dataset([{"Title": "Jaws"}, {"Title": "Bad", "RottenTomatoesRating": "97%"}])
	with pytest.raises(DatasetError, match="#1"):
		MovieDatabase.from_json(str(path))


def test_dataset_error_is_a_value_error():
	assert issubclass(DatasetError, ValueError)


def test_get_all_genres_distinct_sorted_non_null():
	movies = [Movie(major_genre=g) for g in [None, "Horror", "Comedy", "Horror"]]
	assert DataLoader().get_all_genres(movies) == ["Comedy", "Horror"]


def test_bundled_dataset_loads():
	db = MovieDatabase.from_json(str(ROOT / 'data' / 'movies.json'))
	assert len(db) > 0
	assert "Horror" in db.genres
	assert None not in db.genres
	assert [m.title for m in db.search("jaw")] == ["Jaws", "Jawbreaker"]


def test_non_finite_score_names_the_field(write_dataset):
	path = write_dataset('[{"Title": "Low", "IMDBRating": 3.0}, {"Title": "Odd", "IMDBRating": NaN}]')
	with pytest.raises(DatasetError, match="IMDBRating"):
		MovieDatabase.from_json(str(path))
