"""Interactive preference graph for a matching run."""
from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx
from pyvis.network import Network

from .models import MatchOutcome, PersonRecord

_PALETTE = [
    "#FFB347", "#77DD77", "#AEC6CF", "#C23B22", "#F49AC2", "#B39EB5",
    "#03C03C", "#779ECB", "#966FD6", "#FFD700", "#FF6961", "#CB99C9",
    "#CFCFC4", "#FDFD96", "#84B6F4", "#FDCAE1",
]
_UNMATCHED_COLOR = "#777777"
_MUTUAL_EDGE_COLOR = "#3CB371"
_ONE_WAY_EDGE_COLOR = "#A9A9A9"


# ---------------------------
# Public API
# ---------------------------

def build_preference_graph(
    records: Iterable[PersonRecord],
    outcome: Optional[MatchOutcome] = None,
) -> nx.DiGraph:
    """Directed graph with an edge from each person to each of their choices.

    Edges carry ``rank`` (1 = first choice). When ``outcome`` is given, nodes
    get ``matched``/``partner`` attributes and edges between matched
    partners are flagged ``mutual``.
    """
    G = nx.DiGraph()
    records = list(records)
    partner_by_name = outcome.partners() if outcome else {}
    for person in records:
        partner = partner_by_name.get(person.name)
        G.add_node(person.name, matched=partner is not None, partner=partner)
    for person in records:
        for rank, choice in enumerate(person.preferences, start=1):
            mutual = partner_by_name.get(person.name) == choice
            G.add_edge(person.name, choice, rank=rank, mutual=mutual)
    return G


def generate_preference_mind_map(
    records: Iterable[PersonRecord],
    outcome: MatchOutcome,
    max_rank: int = 1,
    canvas_size: Tuple[int, int] = (1600, 1000),
) -> str:
    """
    Build an interactive preference visualization.

    Parameters:
      records: parsed people.
      outcome: result of matching those people.
      max_rank: only draw choices ranked this high or better.
      canvas_size: width, height in pixels for layout scaling.

    Returns:
      HTML string with embedded network.
    """
    G = build_preference_graph(records, outcome)

    pair_color = {}
    for i, pair in enumerate(outcome.matches):
        for name in pair:
            pair_color[name] = _PALETTE[i % len(_PALETTE)]

    width, height = canvas_size
    positions = _circle_positions(sorted(G.nodes), width, height)

    view = nx.DiGraph()
    for name, data in G.nodes(data=True):
        x, y = positions[name]
        view.add_node(
            name,
            label=name,
            title=_node_tooltip(name, data.get("partner"), G.out_degree(name)),
            color=pair_color.get(name, _UNMATCHED_COLOR),
            x=x,
            y=y,
            physics=False,
            borderWidth=4 if data.get("matched") else 2,
            shape="dot",
            size=18,
        )
    for a, b, data in G.edges(data=True):
        rank = data["rank"]
        if rank > max_rank:
            continue
        view.add_edge(
            a,
            b,
            color=_MUTUAL_EDGE_COLOR if data["mutual"] else _ONE_WAY_EDGE_COLOR,
            weight=_edge_width(rank),
            label=f"#{rank}",
            arrows="to",
        )

    net = Network(height="700px", width="100%", bgcolor="#111111", font_color="#EEEEEE", directed=True)
    net.toggle_physics(False)  # positions are fixed
    net.from_nx(view)

    return _inject_legend_html(net.generate_html())

# ---------------------------
# Internals
# ---------------------------

def _circle_positions(names: List[str], width: int, height: int) -> Dict[str, Tuple[int, int]]:
    """Spread people evenly on one circle filling the canvas."""
    n = max(1, len(names))
    cx, cy = width // 2, height // 2
    r = max(60, min(width, height) // 2 - 120)
    pts = {}
    for i, name in enumerate(names):
        theta = 2 * math.pi * i / n
        pts[name] = (int(cx + r * math.cos(theta)), int(cy + r * math.sin(theta)))
    return pts


def _edge_width(rank: int) -> int:
    return max(1, 6 - rank)


def _node_tooltip(name: str, partner: Optional[str], choices: int) -> str:
    partner_txt = partner or "unmatched"
    return (
        f"<b>{name}</b><br>"
        f"Roommate: {partner_txt}<br>"
        f"Choices listed: {choices}"
    )


def _inject_legend_html(page: str) -> str:
    css = """
    <style>
    .legend-box{
      position:absolute;right:12px;bottom:12px;
      background:#222;color:#eee;border:1px solid #444;border-radius:8px;
      padding:8px 12px;font-family:system-ui, -apple-system, Segoe UI, Roboto, Arial;font-size:12px;
      z-index:10;
    }
    .legend-swatch{display:inline-block;width:12px;height:12px;margin-right:6px;vertical-align:middle;border:1px solid #444;}
    </style>
    """
    html = f"""
    {css}
    <div class="legend-box">
      <div><span class="legend-swatch" style="background:{_MUTUAL_EDGE_COLOR}"></span>matched choice</div>
      <div><span class="legend-swatch" style="background:{_ONE_WAY_EDGE_COLOR}"></span>one way choice</div>
      <div><span class="legend-swatch" style="background:{_UNMATCHED_COLOR}"></span>unmatched person</div>
      <div style="margin-top:6px;">node color: roommate pair</div>
      <div>edge label: choice rank</div>
    </div>
    """
    if "</body>" in page:
        return page.replace("</body>", html + "</body>", 1)
    return page + html
