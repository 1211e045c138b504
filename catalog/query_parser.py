"""
Query parsing module.
Turns raw request parameters (strings from a URL or a form) into a MovieQuery.
Malformed values never fail a request: they are treated as if they were absent.
"""

import math  # reject nan/inf bounds
from typing import Iterable, List, Optional, Union  # type annotations

from loguru import logger  # console logging

from .models import MovieQuery  # structured query representation


def parse_optional_float(value: Union[str, float, int, None]) -> Optional[float]:
	"""Return `value` as a float, or None when it is missing, blank, or not a finite number."""
	if value is None or isinstance(value, bool):
		return None
	if isinstance(value, str):
		value = value.strip()
		if not value:  # blank form field
			return None
	try:
		number = float(value)
	except (TypeError, ValueError):
		logger.debug(f"[Parser] Ignoring malformed number: {value!r}")
		return None
	if not math.isfinite(number):
		logger.debug(f"[Parser] Ignoring non-finite number: {value!r}")
		return None
	return number


def clean_choices(values: Union[str, Iterable[str], None]) -> List[str]:
	"""
	Normalize a multi-select parameter into a list of distinct, non-blank strings.
	Accepts None, a single string, or any iterable of strings; order is preserved.
	"""
	if values is None:
		return []
	if isinstance(values, str):  # a single selected value
		values = [values]
	seen = set()
	cleaned = []
	for v in values:
		if not isinstance(v, str):  # ignore anything that is not text
			continue
		v = v.strip()
		if v and v not in seen:
			seen.add(v)
			cleaned.append(v)
	return cleaned


class QueryParser:
	"""Builds a MovieQuery from loosely-typed request parameters."""

	def parse(
		self,
		search: Optional[str] = None,
		mpaa_ratings: Union[str, Iterable[str], None] = None,
		genres: Union[str, Iterable[str], None] = None,
		imdb_min=None,
		imdb_max=None,
		rotten_tomatoes_min=None,
		rotten_tomatoes_max=None,
	) -> MovieQuery:
		"""Main entry: produce a MovieQuery; never raises for bad input."""
		# Whitespace-only search means no search; otherwise the text is kept as typed
		terms = search if isinstance(search, str) and search.strip() else None
		query = MovieQuery(
			terms=terms,
			mpaa_ratings=clean_choices(mpaa_ratings),
			genres=clean_choices(genres),
			imdb_min=parse_optional_float(imdb_min),
			imdb_max=parse_optional_float(imdb_max),
			rotten_tomatoes_min=parse_optional_float(rotten_tomatoes_min),
			rotten_tomatoes_max=parse_optional_float(rotten_tomatoes_max),
		)
		logger.debug(f"[Parser] Parsed query: {query}")
		return query
