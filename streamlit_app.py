"""
Streamlit UI for the movie recommender.
Calls the local FastAPI server at http://localhost:8000 when it is reachable,
or builds the engine in-process from the bundled dataset like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Tabular data for the analytics charts
import pandas as pd  # chart input frames
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Any, Dict, List, Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from recommender import config  # env-driven settings
from recommender.data_loader import DataLoader  # load movies from file
from recommender.engine import ContentBasedRecommendationEngine  # TF-IDF recommender
from recommender.models import Movie  # movie record

TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p/w300"  # poster_path is relative to this
SUGGESTED_TITLES = ['The Dark Knight', 'Inception', 'Pulp Fiction', 'The Matrix', 'Forrest Gump']

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Recommender", layout="wide")

st.title("🎬 Content-Based Movie Recommender")


# Cache the local engine so vocabulary and vectors are built once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> Optional[ContentBasedRecommendationEngine]:
	"""Create a local engine from the configured dataset."""
	try:
		movies = DataLoader().load_movies(config.DATA_PATH)
		return ContentBasedRecommendationEngine(movies)
	except (OSError, ValueError) as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to initialize local recommendation engine: {e}")
		return None


def movie_to_dict(m: Movie) -> Dict[str, Any]:
	"""Same shape as the API's MovieOut so both modes render identically."""
	return {
		"id": m.id,
		"title": m.title,
		"overview": m.overview,
		"genres": list(m.genres),
		"cast": list(m.cast),
		"director": m.director,
		"rating": m.rating,
		"runtime": m.runtime,
		"year": m.year,
		"poster_path": m.poster_path,
	}


def render_movie(movie: Dict[str, Any], similarity: Optional[float] = None, explanation: Optional[List[str]] = None):
	"""Poster on the left, details on the right."""
	c1, c2 = st.columns([1, 4])
	with c1:
		if movie.get('poster_path'):
			st.image(f"{TMDB_IMAGE_BASE}{movie['poster_path']}", width='stretch')
	with c2:
		st.subheader(f"{movie['title']} ({movie.get('year') or 'n/a'})")
		caption = f"Rating: {movie['rating']:.1f} | {movie['runtime']} min"
		if similarity is not None:
			# raw cosine; negative IDF weights can push it outside 0..1
			caption += f" | Similarity: {similarity:.3f}"
		st.caption(caption)
		st.write(f"Genres: {', '.join(movie['genres'][:3])}")
		if movie.get('director'):
			st.write(f"Director: {movie['director']}")
		if movie.get('cast'):
			st.write(f"Cast: {', '.join(movie['cast'][:2])}")
		for reason in (explanation or [])[:3]:
			st.write(f"• {reason}")
	st.divider()


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")
	top_n = st.slider("Recommendations", min_value=1, max_value=20, value=config.DEFAULT_TOP_N)
	api_url = st.text_input("API URL", config.API_URL)
	use_local = st.toggle("Use local engine", value=False, help="If enabled or the API is unreachable, the app runs fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)
		api_available = h.ok and h.json().get('engine_ready', False)
	except requests.RequestException:
		api_available = False
		st.sidebar.info("API not reachable; will use local engine.")

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[ContentBasedRecommendationEngine] = None
if use_local or not api_available:
	with st.spinner("Building local TF-IDF index..."):
		local_engine = init_local_engine()
		if local_engine is not None:
			st.sidebar.success("Local engine ready.")
		else:
			st.sidebar.error("Local engine failed to initialize.")


def fetch_recommendations(title: str) -> Dict[str, Any]:
	"""Uniform payload: {'matched': movie-or-None, 'results': [...]}."""
	if local_engine is not None:
		matched = local_engine.find_by_title(title)
		return {
			"matched": movie_to_dict(matched) if matched else None,
			"results": [
				{"movie": movie_to_dict(r.movie), "similarity": r.similarity, "explanation": r.explanation}
				for r in local_engine.recommend(title, top_n=top_n)
			],
		}
	resp = requests.get(f"{api_url}/recommend", params={"title": title, "top_n": top_n}, timeout=30)
	resp.raise_for_status()
	return resp.json()


def fetch_genres() -> List[str]:
	if local_engine is not None:
		return local_engine.all_genres()
	resp = requests.get(f"{api_url}/genres", timeout=30)
	resp.raise_for_status()
	return resp.json()


def fetch_movies(genre: Optional[str], min_rating: float, sort_by: str) -> List[Dict[str, Any]]:
	if local_engine is not None:
		return [movie_to_dict(m) for m in local_engine.browse(genre=genre, min_rating=min_rating, sort_by=sort_by)]
	params = {"min_rating": min_rating, "sort_by": sort_by}
	if genre:
		params["genre"] = genre
	resp = requests.get(f"{api_url}/movies", params=params, timeout=30)
	resp.raise_for_status()
	return resp.json()['results']


def fetch_analytics() -> Dict[str, Any]:
	if local_engine is not None:
		s = local_engine.stats()
		return {
			"stats": vars(s),
			"genres": [vars(g) for g in local_engine.genre_distribution()],
			"ratings": [vars(b) for b in local_engine.rating_distribution()],
			"releases_per_year": [vars(y) for y in local_engine.releases_per_year(since=config.ANALYTICS_SINCE_YEAR)],
			"budget_vs_revenue": [vars(p) for p in local_engine.budget_vs_revenue()],
		}
	stats = requests.get(f"{api_url}/stats", timeout=30)
	stats.raise_for_status()
	breakdowns = requests.get(f"{api_url}/analytics", timeout=30)
	breakdowns.raise_for_status()
	return {"stats": stats.json(), **breakdowns.json()}


tab_recs, tab_browse, tab_analytics = st.tabs(["Recommendations", "Browse", "Analytics"])

with tab_recs:
	query = st.text_input("Movie title", placeholder="e.g., The Dark Knight")
	st.caption(f"Try: {', '.join(SUGGESTED_TITLES)}")
	if st.button("Recommend", type="primary"):
		if not query.strip():
			st.warning("Please enter a movie title to discover your next favorite film")
		else:
			with st.spinner("Finding similar movies..."):
				try:
					payload = fetch_recommendations(query.strip())
					if not payload.get('results'):
						st.error(f'No movie found matching "{query}".')
					else:
						st.success(f"Because you searched for {payload['matched']['title']}:")
						st.divider()
						for item in payload['results']:
							render_movie(item['movie'], item['similarity'], item['explanation'])
				except requests.RequestException as e:
					st.error(f"API request failed: {e}")

with tab_browse:
	try:
		genre_options = [""] + fetch_genres()
		b1, b2, b3 = st.columns(3)
		with b1:
			genre = st.selectbox("Genre", genre_options, format_func=lambda g: g or "All genres")
		with b2:
			min_rating = st.slider("Min rating", min_value=0.0, max_value=10.0, value=0.0, step=0.5)
		with b3:
			sort_by = st.selectbox("Sort by", ["rating", "year", "title", "revenue"])
		found = fetch_movies(genre or None, min_rating, sort_by)
		st.caption(f"{len(found)} movies found")
		for movie in found:
			render_movie(movie)
	except requests.RequestException as e:
		st.error(f"API request failed: {e}")

with tab_analytics:
	try:
		data = fetch_analytics()
		stats = data['stats']
		m1, m2, m3, m4, m5 = st.columns(5)
		m1.metric("Movies", stats['total_movies'])
		m2.metric("Genres", stats['total_genres'])
		m3.metric("Avg rating", f"{stats['average_rating']:.1f}")
		m4.metric("Avg runtime", f"{stats['average_runtime']:.0f} min")
		m5.metric("Vocabulary", stats['vocabulary_size'])

		st.subheader("Movies per genre")
		st.bar_chart(pd.DataFrame(data['genres'], columns=['genre', 'count']), x='genre', y='count')
		st.subheader("Rating distribution")
		st.bar_chart(pd.DataFrame(data['ratings'], columns=['label', 'count']), x='label', y='count')
		st.subheader(f"Releases per year (since {config.ANALYTICS_SINCE_YEAR})")
		st.line_chart(pd.DataFrame(data['releases_per_year'], columns=['year', 'count']), x='year', y='count')
		st.subheader("Budget vs revenue (millions)")
		st.scatter_chart(pd.DataFrame(data['budget_vs_revenue'], columns=['title', 'budget', 'revenue', 'rating']), x='budget', y='revenue')
	except requests.RequestException as e:
		st.error(f"API request failed: {e}")

# Show a footer indicator of current mode
st.sidebar.markdown("---")
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")
