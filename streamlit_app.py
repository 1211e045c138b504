"""
Streamlit UI for the Movie Catalog.
Calls the local FastAPI server (MOVIES_API_URL, default http://localhost:8000) to fetch
matching movies, or runs the query pipeline locally on the dataset like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None
from dataclasses import asdict  # Movie -> dict, same shape as API results

# Local imports for fallback/local mode (when API isn't used)
from catalog.config import Config  # env-driven settings
from catalog.models import MPAA_RATINGS  # fixed rating choices
from catalog.query_parser import QueryParser  # form values -> MovieQuery
from catalog.search_engine import MovieDatabase  # loaded dataset + pipeline

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Catalog", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Catalog")  # friendly header

# Cache the local database so we only read the dataset once per session
@st.cache_resource(show_spinner=True)
def init_local_database() -> Optional[MovieDatabase]:
	"""Load the dataset from the configured path."""
	try:
		return MovieDatabase.from_json(Config.DATA_PATH)  # success
	except (FileNotFoundError, ValueError) as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to load movie dataset: {e}")
		return None  # signal failure

# Sidebar settings for where queries run
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", Config.API_URL)  # where the API lives
	use_local = st.toggle("Use local dataset", value=False, help="If enabled or API is unreachable, queries run in this process.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		st.sidebar.info("API not reachable; will use local dataset.")  # inform user

# Load local database only when needed (user toggle or API not available)
local_db: Optional[MovieDatabase] = None  # placeholder
if use_local or not api_available:
	local_db = init_local_database()
	if local_db is None:
		st.stop()  # nothing to show without a dataset

# Filter choices come from the dataset (genres) and the fixed rating list
if local_db is not None:
	genre_choices = local_db.genres
	rating_choices = local_db.mpaa_ratings
else:
	try:
		choices = requests.get(f"{api_url}/filters", timeout=10).json()
		genre_choices = choices.get('genres', [])
		rating_choices = choices.get('mpaa_ratings', MPAA_RATINGS)
	except requests.RequestException as e:
		st.error(f"API request failed: {e}")
		st.stop()

# Filter controls
with st.sidebar:
	st.header("Filters")
	ratings = st.multiselect("MPAA Rating", rating_choices)
	genres = st.multiselect("Genre", genre_choices)
	st.subheader("IMDB Rating")
	c1, c2 = st.columns(2)
	imdb_min = c1.number_input("Min", min_value=0.0, max_value=10.0, value=None, step=0.1, key="imdb_min")
	imdb_max = c2.number_input("Max", min_value=0.0, max_value=10.0, value=None, step=0.1, key="imdb_max")
	st.subheader("Rotten Tomatoes Rating")
	c1, c2 = st.columns(2)
	rt_min = c1.number_input("Min", min_value=0.0, max_value=100.0, value=None, step=1.0, key="rt_min")
	rt_max = c2.number_input("Max", min_value=0.0, max_value=100.0, value=None, step=1.0, key="rt_max")

# Main text input for the title search
terms = st.text_input("Search titles", placeholder="e.g., jaws")

try:
	if local_db is not None:
		# Local mode: run the pipeline inside this process
		query = QueryParser().parse(
			search=terms,
			mpaa_ratings=ratings,
			genres=genres,
			imdb_min=imdb_min,
			imdb_max=imdb_max,
			rotten_tomatoes_min=rt_min,
			rotten_tomatoes_max=rt_max,
		)
		movies = [asdict(m) for m in local_db.query(query)]
	else:
		# API mode: call the server and let it run the query
		params = {"search": terms, "mpaa": ratings, "genre": genres}
		for name, value in (("imdb_min", imdb_min), ("imdb_max", imdb_max), ("rt_min", rt_min), ("rt_max", rt_max)):
			if value is not None:
				params[name] = value
		resp = requests.get(f"{api_url}/movies", params=params, timeout=30)
		resp.raise_for_status()  # raise error if server responded with an error code
		movies = resp.json().get('results', [])  # parse JSON returned by API
except requests.RequestException as e:  # network/API errors
	st.error(f"API request failed: {e}")  # show human-friendly message
	st.stop()

st.caption(f"{len(movies)} movies")
st.divider()  # visual separator

# Render each movie as a details row
for movie in movies:
	st.subheader(movie.get('title') or "(untitled)")
	details = [movie.get('major_genre'), movie.get('mpaa_rating')]
	st.write(" | ".join(d for d in details if d))
	scores = []
	if movie.get('imdb_rating') is not None:
		scores.append(f"IMDB: {movie['imdb_rating']:.1f}")
	if movie.get('rotten_tomatoes_rating') is not None:
		scores.append(f"Rotten Tomatoes: {movie['rotten_tomatoes_rating']:.0f}%")
	if scores:
		st.caption(" · ".join(scores))
	st.divider()  # separator

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_db is not None:
	st.sidebar.caption(f"Mode: Local dataset ({Config.DATA_PATH})")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
