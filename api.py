"""
FastAPI server exposing the movie catalog.
Endpoints:
- GET /health: basic health check
- GET /filters: genre and MPAA rating choices for building filter controls
- GET /movies?search=...&mpaa=PG&genre=Horror&imdb_min=6: movies matching all given filters

Startup loads the dataset once (path from MOVIES_DATA_PATH); if it is missing or
malformed the exception propagates and the server does not start.
"""

# Import standard libraries for timing
import time  # measure startup and request latencies
from contextlib import asynccontextmanager  # lifespan handler
from dataclasses import asdict  # dataclass -> dict for response models
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import Depends, FastAPI, HTTPException, Query, Request  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration, parsing and querying
from catalog.config import Config, configure_logging  # env-driven settings
from catalog.models import Movie  # movie record
from catalog.query_parser import QueryParser  # request parameters -> MovieQuery
from catalog.search_engine import MovieDatabase  # loaded dataset + pipeline

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	title: Optional[str] = None
	major_genre: Optional[str] = None
	mpaa_rating: Optional[str] = None
	imdb_rating: Optional[float] = None
	rotten_tomatoes_rating: Optional[float] = None
	release_date: Optional[str] = None
	running_time: Optional[float] = None
	director: Optional[str] = None
	distributor: Optional[str] = None
	creative_type: Optional[str] = None
	source: Optional[str] = None
	us_gross: Optional[float] = None
	worldwide_gross: Optional[float] = None
	us_dvd_sales: Optional[float] = None
	production_budget: Optional[float] = None
	imdb_votes: Optional[float] = None

	@classmethod
	def from_movie(cls, movie: Movie) -> 'MovieOut':
		return cls(**asdict(movie))


# The criteria actually applied, echoed back so clients see what was ignored
class QueryOut(BaseModel):
	terms: Optional[str] = None
	mpaa_ratings: List[str]
	genres: List[str]
	imdb_min: Optional[float] = None
	imdb_max: Optional[float] = None
	rotten_tomatoes_min: Optional[float] = None
	rotten_tomatoes_max: Optional[float] = None


# Pydantic model for the complete /movies response payload
class MoviesResponse(BaseModel):
	query: QueryOut  # parsed criteria
	count: int  # number of matching movies
	elapsed_ms: float  # server-side query time in ms
	results: List[MovieOut]  # matching movies in dataset order


class FiltersResponse(BaseModel):
	genres: List[str]
	mpaa_ratings: List[str]


def get_database(request: Request) -> MovieDatabase:
	"""Dependency returning the database loaded at startup."""
	database = getattr(request.app.state, 'database', None)
	if database is None:  # only possible if startup did not run
		logger.warning("[API] Request received but database not loaded")
		raise HTTPException(status_code=503, detail="Movie database not loaded")
	return database


def create_app(database: Optional[MovieDatabase] = None, data_path: Optional[str] = None) -> FastAPI:
	"""
	Build the FastAPI application.
	Pass `database` to serve an already-loaded dataset; otherwise it is loaded
	from `data_path` (or the configured path) when the server starts.
	"""
	# Lifespan handler to load the dataset once, before any request is served
	@asynccontextmanager
	async def lifespan(app: FastAPI):
		"""Load the dataset unless one was injected; failures abort startup."""
		configure_logging()  # server processes log at MOVIES_LOG_LEVEL
		if app.state.database is None:
			start = time.time()  # start timer for startup latency
			path = data_path or Config.DATA_PATH
			logger.info(f"[API] Startup: loading movies from {path}...")  # log intent
			try:
				app.state.database = MovieDatabase.from_json(path)
			except (FileNotFoundError, ValueError) as e:
				logger.error(f"[API] Cannot start without a dataset: {e}")
				raise
			app.state.startup_seconds = time.time() - start  # elapsed seconds
			logger.info(f"[API] Startup complete in {app.state.startup_seconds:.2f}s.")  # summary log
		yield

	app = FastAPI(title="Movie Catalog API", version="1.0.0", lifespan=lifespan)  # web app
	app.state.database = database
	app.state.startup_seconds = 0.0
	parser = QueryParser()  # stateless, shared by all requests

	# Simple health endpoint for readiness checks
	@app.get("/health")
	async def health():
		"""Return minimal health info for liveness/readiness probes."""
		database = app.state.database
		return {
			"status": "ok",  # constant indicator
			"movies_loaded": len(database) if database is not None else 0,
			"startup_seconds": round(app.state.startup_seconds, 2),  # startup latency
		}

	@app.get("/filters", response_model=FiltersResponse)
	async def filters(database: MovieDatabase = Depends(get_database)):
		"""Return the choices for the genre and MPAA rating filters."""
		return FiltersResponse(genres=database.genres, mpaa_ratings=database.mpaa_ratings)

	# Main query endpoint; numeric bounds arrive as text so bad values can be ignored
	@app.get("/movies", response_model=MoviesResponse)
	async def movies(
		search: Optional[str] = Query(None, description="Case-insensitive title substring"),
		mpaa: List[str] = Query([], description="Allowed MPAA ratings (repeatable)"),
		genre: List[str] = Query([], description="Allowed major genres (repeatable)"),
		imdb_min: Optional[str] = Query(None, description="Minimum IMDB rating"),
		imdb_max: Optional[str] = Query(None, description="Maximum IMDB rating"),
		rt_min: Optional[str] = Query(None, description="Minimum Rotten Tomatoes rating"),
		rt_max: Optional[str] = Query(None, description="Maximum Rotten Tomatoes rating"),
		database: MovieDatabase = Depends(get_database),
	):
		"""Filter the catalog and return the matching movies."""
		start = time.time()  # start timer
		query = parser.parse(
			search=search,
			mpaa_ratings=mpaa,
			genres=genre,
			imdb_min=imdb_min,
			imdb_max=imdb_max,
			rotten_tomatoes_min=rt_min,
			rotten_tomatoes_max=rt_max,
		)
		results = database.query(query)  # run pipeline
		elapsed_ms = (time.time() - start) * 1000  # compute ms
		logger.info(f"[API] /movies served {len(results)} results in {elapsed_ms:.2f} ms")  # summary

		return MoviesResponse(
			query=QueryOut(**asdict(query)),
			count=len(results),
			elapsed_ms=round(elapsed_ms, 2),
			results=[MovieOut.from_movie(m) for m in results],
		)

	return app


# Module-level app for `uvicorn api:app`
app = create_app()
