"""Serialize a built family context into nodes and edges."""

from famgraph.couples import couple_key
from famgraph.models import CoupleEdge, FamilyContext, HierarchyEdge, Node, Position

_ORIGIN = Position(x=0.0, y=0.0)


def emit_nodes(ctx: FamilyContext) -> list[Node]:
    nodes = []
    for person in ctx.people.values():
        pos = ctx.position_of.get(person.id, _ORIGIN)
        nodes.append(
            Node(
                id=person.id,
                name=person.name,
                birth_year=person.birth_year,
                gender=person.gender,
                is_blood=person.is_blood,
                depth=ctx.depth_of.get(person.id, 0),
                x=pos.x,
                y=pos.y,
            )
        )
    return nodes


def emit_edges(ctx: FamilyContext) -> list[CoupleEdge | HierarchyEdge]:
    """
    One undirected edge per couple, then parent -> child edges.

    A child whose two parents are a registered couple gets a single edge from
    the couple's first spouse instead of one per parent.
    """
    edges: list[CoupleEdge | HierarchyEdge] = [
        CoupleEdge(a=c.spouse_a, b=c.spouse_b) for c in ctx.couples.values()
    ]

    for child_id, parents in ctx.parents_of.items():
        couple = None
        if len(parents) == 2:
            couple = ctx.couples.get(couple_key(parents[0], parents[1]))

        if couple is not None:
            edges.append(HierarchyEdge(source=couple.spouse_a, target=child_id))
        else:
            edges.extend(HierarchyEdge(source=p, target=child_id) for p in parents)

    return edges
