"""NetworkX views of a built family."""

import networkx as nx

from famgraph.models import BuildResult, CoupleEdge, FamilyContext

PARENT_OF = "PARENT_OF"
SPOUSE_OF = "SPOUSE_OF"


def build_graph(ctx: FamilyContext) -> nx.DiGraph:
    """
    Build a directed graph from a family context.

    Person nodes carry `person_name` (not `name`, which clashes with pydot),
    `sex`, `birth_year`, `is_blood` and, once computed, `depth` and `pos`.
    Edges are PARENT_OF (parent -> child) plus one SPOUSE_OF per couple.
    """
    G = nx.DiGraph()

    for person in ctx.people.values():
        attrs = {
            "person_name": person.name,
            "sex": person.gender,
            "birth_year": person.birth_year,
            "is_blood": person.is_blood,
        }
        if person.id in ctx.depth_of:
            attrs["depth"] = ctx.depth_of[person.id]
        pos = ctx.position_of.get(person.id)
        if pos is not None:
            attrs["pos"] = (pos.x, pos.y)
        G.add_node(person.id, **attrs)

    for child_id, parents in ctx.parents_of.items():
        for parent_id in parents:
            G.add_edge(parent_id, child_id, relationship_type=PARENT_OF)

    for couple in ctx.couples.values():
        G.add_edge(couple.spouse_a, couple.spouse_b, relationship_type=SPOUSE_OF)

    return G


def result_graph(result: BuildResult) -> nx.DiGraph:
    """Build the same graph shape from emitted nodes and edges."""
    G = nx.DiGraph()

    for node in result.nodes:
        G.add_node(
            node.id,
            person_name=node.name,
            sex=node.gender,
            birth_year=node.birth_year,
            is_blood=node.is_blood,
            depth=node.depth,
            pos=(node.x, node.y),
        )

    for edge in result.edges:
        if isinstance(edge, CoupleEdge):
            G.add_edge(edge.a, edge.b, relationship_type=SPOUSE_OF)
        else:
            G.add_edge(edge.source, edge.target, relationship_type=PARENT_OF)

    return G


def parent_graph(G: nx.DiGraph) -> nx.DiGraph:
    """Graph holding only the PARENT_OF edges."""
    return nx.DiGraph(
        (u, v) for u, v, d in G.edges(data=True) if d.get("relationship_type") == PARENT_OF
    )
