"""openfootball - Elo Ratings Dashboard.

Replay a season, watch ratings move, and price any round.

Usage:
    streamlit run app/streamlit_app.py
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import streamlit as st

from openfootball.config import DEFAULT_INITIAL_RATING, DEFAULT_K, DEFAULT_SCORE_FACTOR, SEASONS_DIR
from openfootball.data import Season, load_season, records_to_frame
from openfootball.exceptions import FetchError, ParseError
from openfootball.ratings import EloEngine, OddsCalculator, league_table, rating_history

# -----------------------------------------------------------------------------
# Config
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="openfootball Elo",
    page_icon="⚽",
    layout="wide",
    initial_sidebar_state="expanded",
)

# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

@st.cache_data(ttl=3600)
def load_text_season(text: str) -> Season:
    return Season.from_text(text)


@st.cache_data(ttl=3600)
def load_source_season(source: str) -> Season:
    return load_season(source)


def local_season_files() -> list:
    if not SEASONS_DIR.exists():
        return []
    return sorted(str(p) for p in SEASONS_DIR.glob("*/*.txt"))


# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------

st.sidebar.title("⚽ openfootball Elo")
st.sidebar.caption("Ratings and odds from openfootball season files")

uploaded = st.sidebar.file_uploader("Season file", type=["txt"])
choices = local_season_files()
source = st.sidebar.selectbox("...or a downloaded season", [""] + choices) if choices else ""
url = st.sidebar.text_input("...or a raw URL", value="")

st.sidebar.divider()
initial_rating = st.sidebar.number_input("Initial rating", value=DEFAULT_INITIAL_RATING, step=50)
k = st.sidebar.slider("K", min_value=4.0, max_value=64.0, value=float(DEFAULT_K), step=1.0)
score_factor = st.sidebar.slider(
    "Score factor", min_value=0.0, max_value=0.5, value=float(DEFAULT_SCORE_FACTOR), step=0.01
)

# -----------------------------------------------------------------------------
# Load
# -----------------------------------------------------------------------------

season = None
try:
    if uploaded is not None:
        season = load_text_season(uploaded.getvalue().decode("utf-8"))
    elif url:
        season = load_source_season(url)
    elif source:
        season = load_source_season(source)
except (ParseError, FetchError, OSError) as e:
    st.error(f"**Could not load season**: {e}")
    st.stop()

if season is None:
    st.title("⚽ openfootball Elo")
    st.markdown("""
    Upload an openfootball season text file, pick one downloaded with
    ```
    PYTHONPATH=src python scripts/ops/pull_season.py --season 2018-19
    ```
    or paste a raw URL in the sidebar.
    """)
    st.stop()

engine = EloEngine(initial_rating=int(initial_rating), k=k, score_factor=score_factor)
standings = engine.standings(season)

# -----------------------------------------------------------------------------
# Pages
# -----------------------------------------------------------------------------

st.title(season.name or "Season")
col1, col2, col3 = st.columns(3)
col1.metric("Teams", len(season.teams()))
col2.metric("Fixtures", len(season))
col3.metric("Played", len(season.played()))

tab_table, tab_history, tab_odds, tab_fixtures = st.tabs(
    ["📊 Table", "📈 Rating history", "🎲 Round odds", "📅 Fixtures"]
)

with tab_table:
    rounds = season.rounds()
    through = st.select_slider("Through round", options=rounds, value=rounds[-1]) if rounds else None
    st.dataframe(league_table(standings, through_round=through), hide_index=True, use_container_width=True)

with tab_history:
    history = rating_history(standings)
    if history.empty:
        st.warning("No played fixtures yet.")
    else:
        teams = st.multiselect("Teams", list(history.columns), default=list(history.columns)[:6])
        st.line_chart(history[teams] if teams else history)

with tab_odds:
    rounds = season.rounds()
    if rounds:
        target = st.selectbox("Round", rounds, index=len(rounds) - 1)
        odds = OddsCalculator(engine).odds(season, target)
        st.dataframe(records_to_frame(odds), hide_index=True, use_container_width=True)

with tab_fixtures:
    st.dataframe(season.to_frame(), hide_index=True, use_container_width=True)
