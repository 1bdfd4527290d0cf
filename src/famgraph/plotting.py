"""Render a built family graph at its computed positions."""

from pathlib import Path

import networkx as nx
import pydot

from famgraph.graph import SPOUSE_OF, result_graph
from famgraph.models import MALE, BuildResult, CoupleEdge

POINTS_PER_UNIT = 0.5  # layout units -> graphviz points


def _screen_pos(x: float, y: float) -> tuple[float, float]:
    # Generation runs along the layout x axis; draw it vertically with
    # ancestors at the top.
    return (y * POINTS_PER_UNIT, x * POINTS_PER_UNIT)


def to_dot(result: BuildResult) -> pydot.Dot:
    """
    Build a pydot graph with every person pinned at its layout position.

    Intended for `neato -n2`, which keeps the given coordinates.
    """
    P = pydot.Dot(graph_type="digraph")
    P.set("splines", "line")
    P.set("outputorder", "edgesfirst")

    for node in result.nodes:
        sx, sy = _screen_pos(node.x, node.y)
        label = node.name if node.birth_year is None else f"{node.name}\n{node.birth_year}"
        P.add_node(
            pydot.Node(
                node.id,
                label=label,
                pos=f"{sx:.1f},{sy:.1f}!",
                shape="box" if node.gender == MALE else "ellipse",
                style="filled" if node.is_blood else "dashed",
                fillcolor="lightgray",
                fontsize="10",
            )
        )

    for edge in result.edges:
        if isinstance(edge, CoupleEdge):
            P.add_edge(pydot.Edge(edge.a, edge.b, dir="none", color="darkgray"))
        else:
            P.add_edge(pydot.Edge(edge.source, edge.target, color="darkgray"))

    return P


def plot_result(result: BuildResult, output_path: Path | None = None):
    """
    Plot the family at its computed layout.

    Args:
        result: output of build_family_graph
        output_path: Path to save the output image (PNG, SVG or PDF). If None,
            displays interactively with matplotlib.
    """
    if output_path:
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"

        to_dot(result).write(str(output_path), prog=["neato", "-n2"], format=ext)
        return output_path

    import matplotlib.pyplot as plt

    G = result_graph(result)
    pos = {n: _screen_pos(*data["pos"]) for n, data in G.nodes(data=True)}
    spouse_edges = [(u, v) for u, v, d in G.edges(data=True) if d["relationship_type"] == SPOUSE_OF]
    parent_edges = [(u, v) for u, v, d in G.edges(data=True) if d["relationship_type"] != SPOUSE_OF]

    plt.figure(figsize=(20, 16))
    nx.draw_networkx_nodes(G, pos, node_color="lightgray", node_size=900)
    nx.draw_networkx_labels(G, pos, labels=nx.get_node_attributes(G, "person_name"), font_size=8)
    nx.draw_networkx_edges(G, pos, edgelist=parent_edges, edge_color="darkgray")
    nx.draw_networkx_edges(G, pos, edgelist=spouse_edges, edge_color="darkgray", style="dashed", arrows=False)
    plt.axis("off")
    plt.tight_layout()
    plt.show()
    return None
