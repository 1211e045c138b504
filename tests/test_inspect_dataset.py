"""
Tests for the dataset inspection script.
Run: pytest tests/test_inspect_dataset.py
"""

import pytest
from loguru import logger

from scripts.inspect_dataset import main


def test_inspect_reports_counts(write_dataset):
	path = write_dataset([
		{"Title": "Jaws", "MajorGenre": "Horror", "MPAARating": "PG", "IMDBRating": 8.0},
		{"Title": "1776", "MajorGenre": "Musical", "MPAARating": "Not Rated"},
		{"Title": None},
	])
	messages = []
	sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="INFO")
	try:
		database = main([str(path)])
	finally:
		logger.remove(sink_id)

	assert len(database) == 3
	text = "\n".join(messages)
	assert "Loaded 3 movies" in text
	assert "2 genres: Horror, Musical" in text
	assert "(not a filter choice)" in text


def test_inspect_fails_on_missing_dataset(tmp_path):
	with pytest.raises(FileNotFoundError):
		main([str(tmp_path / "missing.json")])

