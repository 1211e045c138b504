"""
Data models for the Movie Catalog.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import List, Optional  # lists and optional values


# Fixed MPAA rating choices, independent of what the dataset contains
MPAA_RATINGS = ['G', 'PG', 'PG-13', 'R', 'NC-17']


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie record as loaded from the dataset.
	Records are never modified after load, hence frozen.
	"""
	title: Optional[str] = None  # display title
	major_genre: Optional[str] = None  # primary genre, e.g. "Horror"
	mpaa_rating: Optional[str] = None  # content rating code, e.g. "PG-13"
	imdb_rating: Optional[float] = None  # IMDB score on a 0-10 scale
	rotten_tomatoes_rating: Optional[float] = None  # Rotten Tomatoes score on a 0-100 scale
	# Descriptive fields, shown but never filtered on
	us_gross: Optional[float] = None
	worldwide_gross: Optional[float] = None
	us_dvd_sales: Optional[float] = None
	production_budget: Optional[float] = None
	release_date: Optional[str] = None
	running_time: Optional[float] = None  # minutes
	distributor: Optional[str] = None
	source: Optional[str] = None
	creative_type: Optional[str] = None
	director: Optional[str] = None
	imdb_votes: Optional[float] = None


@dataclass
class MovieQuery:
	"""
	The criteria of one catalog query.
	Absent values (None or empty lists) mean "no restriction".
	"""
	terms: Optional[str] = None  # free-text title search
	mpaa_ratings: List[str] = field(default_factory=list)  # allowed MPAA ratings
	genres: List[str] = field(default_factory=list)  # allowed major genres
	imdb_min: Optional[float] = None
	imdb_max: Optional[float] = None
	rotten_tomatoes_min: Optional[float] = None
	rotten_tomatoes_max: Optional[float] = None
