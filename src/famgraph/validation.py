"""Consistency checks on a built family."""

import networkx as nx

from famgraph.graph import PARENT_OF, build_graph, parent_graph
from famgraph.models import FamilyContext

MIN_PARENT_AGE = 12


def validate_family(ctx: FamilyContext) -> list[str]:
    """
    Check the family for anomalies the builder tolerates but users should see:
    - Cycles in parent-child relationships
    - Impossible ages (child born before parent, parent younger than 12)
    - Children with three or more parents, which are never paired
    - Marriages dropped because a spouse was already married
    - People not connected to the pivot

    Returns a list of warning messages.
    """
    warnings: list[str] = []
    G = build_graph(ctx)

    def label(person_id: str) -> str:
        return G.nodes[person_id].get("person_name", person_id)

    try:
        cycle = nx.find_cycle(parent_graph(G), orientation="original")
        cycle_nodes = [label(edge[0]) for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for parent, child, data in G.edges(data=True):
        if data.get("relationship_type") != PARENT_OF:
            continue

        parent_year = G.nodes[parent].get("birth_year")
        child_year = G.nodes[child].get("birth_year")
        if parent_year is None or child_year is None:
            continue

        if child_year < parent_year:
            warnings.append(f"Impossible: {label(child)} born before parent {label(parent)}")
        elif child_year - parent_year < MIN_PARENT_AGE:
            warnings.append(
                f"Suspicious: {label(parent)} was less than {MIN_PARENT_AGE} years "
                f"old when {label(child)} was born"
            )

    for child_id, parents in ctx.parents_of.items():
        if len(parents) > 2:
            names = ", ".join(label(p) for p in parents)
            warnings.append(f"{label(child_id)} has {len(parents)} parents ({names}); none are paired")

    for a, b in ctx.refused_couples:
        warnings.append(
            f"Marriage of {label(a)} and {label(b)} ignored: "
            "a person can only belong to one couple"
        )

    pivot_component = ctx.pivot_id
    detached = [
        label(p) for p in ctx.people if ctx.component_of.get(p) != pivot_component
    ]
    if pivot_component is not None and detached:
        warnings.append(f"Not connected to {label(pivot_component)}: {', '.join(detached)}")

    return warnings
