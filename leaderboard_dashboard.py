"""
Streamlit leaderboard page.

Run: streamlit run leaderboard_dashboard.py

Character and region filters live in the URL (?character=1205&region=NA) so
views can be shared; any change, or the Refresh button, refetches the rows.
"""

import asyncio
import sys
from pathlib import Path

_src = str(Path(__file__).resolve().parent / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

import pandas as pd
import streamlit as st

from showcase_client.api_client import LeaderboardApiClient
from showcase_client.config import get_client_settings
from showcase_client.game_data import load_game_data
from showcase_client.leaderboard_view import REGION_LABELS, load_entries, table_rows

st.set_page_config(page_title="Build Leaderboard", page_icon="🏆", layout="wide")

ALL = "All"


@st.cache_data
def _game_data(path, asset_base_url):
    return load_game_data(path, asset_base_url)


def _fetch(character_id, region):
    async def _run():
        async with LeaderboardApiClient() as api:
            return await load_entries(api, character_id=character_id, region=region)

    return asyncio.run(_run())


def _query_int(name):
    raw = st.query_params.get(name)
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


def main():
    settings = get_client_settings()
    game_data = _game_data(settings.game_data_path, settings.asset_base_url)

    st.title("🏆 Leaderboard")

    character_options = game_data.character_options()
    character_ids = [None] + [cid for cid, _ in character_options]
    character_labels = {cid: label for cid, label in character_options}
    current_character = _query_int("character")
    if current_character is not None and current_character not in character_labels:
        character_ids.append(current_character)

    region_values = [None] + list(REGION_LABELS)
    current_region = st.query_params.get("region") or None
    if current_region not in region_values:
        current_region = None

    col_character, col_region, col_refresh = st.columns([3, 2, 1])
    with col_character:
        character_id = st.selectbox(
            "Character",
            character_ids,
            index=character_ids.index(current_character),
            format_func=lambda cid: ALL if cid is None else character_labels.get(cid, f"#{cid}"),
        )
    with col_region:
        region = st.selectbox(
            "Region",
            region_values,
            index=region_values.index(current_region),
            format_func=lambda value: ALL if value is None else REGION_LABELS[value],
        )
    with col_refresh:
        st.button("Refresh", use_container_width=True)

    if character_id is None:
        st.query_params.pop("character", None)
    else:
        st.query_params["character"] = str(character_id)
    if region is None:
        st.query_params.pop("region", None)
    else:
        st.query_params["region"] = region

    entries = _fetch(character_id, region)
    if not entries:
        st.info("No builds yet for this selection.")
        return

    df = pd.DataFrame(table_rows(entries, game_data))
    df.insert(0, "rank", range(1, len(df) + 1))
    st.dataframe(
        df,
        use_container_width=True,
        hide_index=True,
        column_config={
            "rank": st.column_config.NumberColumn("#", format="%d"),
            "avatar": st.column_config.ImageColumn("", width="small"),
            "character": st.column_config.TextColumn("Character"),
            "light_cone_icon": st.column_config.ImageColumn("", width="small"),
            "details": st.column_config.TextColumn("Build"),
            "cv": st.column_config.TextColumn("CV"),
            "cr": st.column_config.TextColumn("CR"),
            "cd": st.column_config.TextColumn("CD"),
            "atk": st.column_config.TextColumn("ATK"),
            "spd": st.column_config.TextColumn("SPD"),
            "uid": st.column_config.TextColumn("UID"),
            "region": st.column_config.TextColumn("Region"),
        },
    )


main()
