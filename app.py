"""Streamlit UI for trying out the community recommendation scorer."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parent))

from src.recommendation.config import settings  # noqa: E402
from src.recommendation.engine import (  # noqa: E402
    load_communities_from_json,
    load_sample_communities,
    load_sample_user,
    load_user_from_json,
    rank,
)
from src.recommendation.models import (  # noqa: E402
    Community,
    RankedCommunity,
    UserProfile,
)

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Community Recommender", layout="wide")
st.title("The Connection — Community Recommendations")

FACTORS = [
    "interests", "location", "demographics", "denomination",
    "popularity", "profession", "recovery",
]

_UPLOAD_HELP = """\
Upload a JSON object with a `user` and a list of `communities`
(storage field names, camelCase):

```json
{
  "user": {
    "interests": "bible study, prayer",
    "city": "Austin",
    "state": "TX",
    "denomination": "Baptist"
  },
  "communities": [
    {
      "name": "Austin Bible Study",
      "interestTags": ["bible study"],
      "ministryTypes": ["Baptist"],
      "city": "Austin",
      "state": "TX",
      "memberCount": 30
    }
  ]
}
```

Optional community fields: `activities`, `professions`, `recoverySupport`,
`lifeStages`, `latitude`, `longitude`, `meetingType`, `ageGroup`, `gender`.
"""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _label(community: Community) -> str:
    return str(getattr(community, "name", None) or getattr(community, "id", "Community"))


def _render_user(user: UserProfile) -> None:
    cols = st.columns(2)
    with cols[0]:
        st.markdown(f"**Interests:** {user.interests or '—'}")
        st.markdown(f"**Denomination:** {user.denomination or '—'}")
    with cols[1]:
        place = ", ".join(p for p in (user.city, user.state) if p)
        st.markdown(f"**Location:** {place or '—'}")
        if user.latitude and user.longitude:
            st.caption(f"{user.latitude:.4f}, {user.longitude:.4f}")


def _render_results(ranked: list[RankedCommunity]) -> None:
    st.markdown("---")
    st.header("Recommendations")
    if not ranked:
        st.info("No communities to rank.")
        return

    rows = []
    for position, rc in enumerate(ranked, 1):
        row = {"#": position, "Community": _label(rc), "Score": rc.recommendation_score}
        if rc.breakdown:
            row.update(rc.breakdown.model_dump())
        rows.append(row)
    df = pd.DataFrame(rows).set_index("#")
    numeric = [c for c in df.columns if c != "Community"]
    st.dataframe(df.style.format("{:.1f}", subset=numeric), use_container_width=True)

    for position, rc in enumerate(ranked, 1):
        with st.expander(f"#{position}: {_label(rc)} — {rc.recommendation_score:.1f}"):
            st.caption(
                f"{rc.meeting_type} · {rc.member_count} members"
                + (f" · {rc.city}, {rc.state}" if rc.city and rc.state else "")
            )
            if rc.breakdown:
                cols = st.columns(len(FACTORS))
                for col, factor in zip(cols, FACTORS):
                    col.metric(factor.title(), f"{getattr(rc.breakdown, factor):.0f}")


def _run(user: UserProfile, communities: list[Community]) -> None:
    ranked = rank(
        user,
        communities,
        limit=st.session_state.get("top_k", settings.top_k),
        include_breakdown=st.session_state.get("show_breakdown", True),
    )
    _render_results(ranked)


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

with st.sidebar:
    st.header("Settings")
    st.session_state["top_k"] = st.slider(
        "Communities to show", min_value=1, max_value=50, value=settings.top_k,
    )
    st.session_state["show_breakdown"] = st.checkbox(
        "Show per-factor breakdown", value=True,
    )
    st.markdown("---")
    st.caption("Factor weights")
    st.table(pd.Series(settings.factor_weights.model_dump(), name="weight"))


# ---------------------------------------------------------------------------
# Main tabs
# ---------------------------------------------------------------------------

tab_sample, tab_upload, tab_builder = st.tabs([
    "Sample Data", "Upload JSON", "Interactive User",
])

# --- Tab 1: Sample data ---
with tab_sample:
    st.subheader("Rank the bundled communities for the sample user")
    sample_user = load_sample_user()
    sample_communities = load_sample_communities()
    _render_user(sample_user)
    st.caption(f"{len(sample_communities)} candidate communities")

    if st.button("Recommend", key="run_sample", type="primary"):
        _run(sample_user, sample_communities)


# --- Tab 2: Upload JSON ---
with tab_upload:
    st.subheader("Upload a user and candidate communities")
    st.markdown(_UPLOAD_HELP)
    uploaded = st.file_uploader("Upload JSON", type=["json"])
    if uploaded:
        try:
            raw = json.loads(uploaded.read())
            user = load_user_from_json(raw.get("user") or {})
            communities = load_communities_from_json(raw.get("communities") or [])
            st.success(f"Loaded {len(communities)} communities")
            _render_user(user)

            if st.button("Recommend", key="run_upload", type="primary"):
                _run(user, communities)
        except Exception as e:
            st.error(f"Error loading JSON: {e}")


# --- Tab 3: Interactive user ---
with tab_builder:
    st.subheader("Describe a user and rank the bundled communities")

    with st.form("user_profile"):
        interests_raw = st.text_input(
            "Interests", help="Comma-separated, e.g. bible study, prayer",
        )
        col1, col2 = st.columns(2)
        with col1:
            city = st.text_input("City")
            denom = st.text_input("Denomination")
        with col2:
            state = st.text_input("State")
        with st.expander("Coordinates (optional)"):
            lat = st.text_input("Latitude")
            lon = st.text_input("Longitude")
        submitted = st.form_submit_button("Recommend", type="primary")

    if submitted:
        user = UserProfile(
            interests=interests_raw,
            city=city,
            state=state,
            denomination=denom,
            latitude=lat,
            longitude=lon,
        )
        _render_user(user)
        _run(user, load_sample_communities())
