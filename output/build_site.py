"""Render merged team rankings to a static tabbed HTML page."""

import os
from html import escape

import pandas as pd

from config import TEAMS, RANK_COLORS, UNRANKED_COLOR, SITE_DIR
from data.fetch_player_rankings import team_players, format_ranking_type
from features.rankings import category_rankings

# Table columns on the page; the last one stacks Defence and General
COLUMN_LAYOUT = [
    ("Construction", ["Construction"]),
    ("Attack", ["Attack"]),
    ("Defence", ["Defence", "General"]),
]

CSS = """
body { font-family: -apple-system, Segoe UI, Roboto, sans-serif; margin: 0; background: #fafafa; }
.tabs { display: flex; overflow-x: auto; border-bottom: 1px solid #ddd; background: #fff; }
.tab { padding: 12px 16px; cursor: pointer; border: none; background: none; font-size: 14px; white-space: nowrap; }
.tab.active { border-bottom: 2px solid #1976d2; color: #1976d2; }
.panel { display: none; padding: 24px; }
.panel.active { display: flex; flex-wrap: wrap; gap: 16px; }
table { border-collapse: collapse; background: #fff; flex: 1; min-width: 280px; box-shadow: 0 1px 3px rgba(0,0,0,.2); }
th, td { padding: 6px 10px; border-bottom: 1px solid #eee; font-size: 13px; }
td.num { text-align: center; }
td.rank { text-align: center; font-weight: bold; }
tr.section td { font-weight: bold; background: #f5f5f5; }
.players { flex-basis: 100%; }
.players h3 { margin: 16px 0 4px; }
"""

SCRIPT = """
document.querySelectorAll('.tab').forEach(function (tab) {
  tab.addEventListener('click', function () {
    document.querySelectorAll('.tab, .panel').forEach(function (el) { el.classList.remove('active'); });
    tab.classList.add('active');
    document.getElementById(tab.dataset.panel).classList.add('active');
  });
});
"""


def rank_color(rank) -> tuple[str, str]:
    """(background, text) colour for a rank: 1 is dark green, 10 bright red."""
    if rank is None or pd.isna(rank):
        return UNRANKED_COLOR
    rank = int(rank)
    if 1 <= rank <= len(RANK_COLORS):
        return RANK_COLORS[rank - 1]
    return UNRANKED_COLOR


def _rank_rows(rows: pd.DataFrame, category: str) -> str:
    html = f"<tr class='section'><td colspan='3'>{escape(category)}</td></tr>"
    for _, r in rows.iterrows():
        bg, fg = rank_color(r["rank"])
        html += (
            f"<tr>"
            f"<td>{escape(str(r['subcategory']))}</td>"
            f"<td class='num'>{float(r['value']):.2f}</td>"
            f"<td class='rank' style='background:{bg};color:{fg}'>{int(r['rank'])}</td>"
            f"</tr>"
        )
    return html


def _build_team_tables(df: pd.DataFrame) -> str:
    tables = ""
    for heading, categories in COLUMN_LAYOUT:
        body = "".join(_rank_rows(category_rankings(df, c), c) for c in categories)
        tables += (
            f"<table><thead><tr><th>{escape(heading)}</th><th>Value</th><th>Rank</th></tr></thead>"
            f"<tbody>{body}</tbody></table>"
        )
    return tables


def _build_players_section(player_results: list[dict] | None, team_name: str) -> str:
    if not player_results:
        return ""
    html = ""
    for result in player_results:
        players = team_players(result, team_name)
        if not players:
            continue
        rows = "".join(
            f"<tr><td>{p['rank']}</td><td>{escape(str(p.get('name', '')))}</td>"
            f"<td class='num'>{float(p.get('value') or 0):.2f}</td></tr>"
            for p in players
        )
        html += (
            f"<h3>{escape(format_ranking_type(result['ranking_type']))}</h3>"
            f"<table><thead><tr><th>Rank</th><th>Player</th><th>Value</th></tr></thead>"
            f"<tbody>{rows}</tbody></table>"
        )
    if not html:
        return ""
    return f"<div class='players'>{html}</div>"


def build_html(rankings: pd.DataFrame, player_results: list[dict] | None = None,
               teams: dict | None = None) -> str:
    """Return the full page: one tab per team, sorted by display name."""
    teams = teams or TEAMS
    ordered = sorted(teams.items(), key=lambda kv: kv[1].lower())

    tabs = ""
    panels = ""
    for i, (key, name) in enumerate(ordered):
        active = " active" if i == 0 else ""
        tabs += f"<button class='tab{active}' data-panel='panel-{key}'>{escape(name)}</button>"

        df = rankings[rankings["team"] == name]
        if df.empty:
            content = f"<p>No rankings fetched for {escape(name)}.</p>"
        else:
            content = _build_team_tables(df) + _build_players_section(player_results, name)
        panels += f"<div class='panel{active}' id='panel-{key}'>{content}</div>"

    return (
        "<!DOCTYPE html><html><head><meta charset='utf-8'>"
        "<title>League Rankings</title>"
        f"<style>{CSS}</style></head><body>"
        f"<div class='tabs'>{tabs}</div>{panels}"
        f"<script>{SCRIPT}</script></body></html>"
    )


def build(rankings: pd.DataFrame, player_results: list[dict] | None = None,
          site_dir: str | None = None) -> str:
    """Write index.html into site_dir (default SITE_DIR) and return its path."""
    site_dir = site_dir or SITE_DIR
    os.makedirs(site_dir, exist_ok=True)
    path = os.path.join(site_dir, "index.html")
    with open(path, "w", encoding="utf-8") as f:
        f.write(build_html(rankings, player_results))
    return path
