"""Pivot selection and breadth-first generational depth assignment."""

from collections import deque
import logging

from famgraph.models import FamilyContext

logger = logging.getLogger(__name__)


def pivot_score(ctx: FamilyContext, person_id: str) -> int:
    married = 1 if person_id in ctx.couple_of else 0
    return len(ctx.parents(person_id)) + len(ctx.children(person_id)) + married


def find_pivot(ctx: FamilyContext) -> str | None:
    """
    Return the most connected person.

    Ties keep the earliest registered person. When nobody has any connection
    the first registered person is the pivot.
    """
    best_id = None
    best_score = 0
    for person_id in ctx.people:
        score = pivot_score(ctx, person_id)
        if score > best_score:
            best_id, best_score = person_id, score

    if best_id is None and ctx.people:
        best_id = next(iter(ctx.people))
    return best_id


def assign_depths(ctx: FamilyContext, start: str, depth: int = 0) -> list[str]:
    """
    Breadth-first walk from `start` over parent, child and spouse edges.

    Parents sit one generation above (+1), children one below (-1), spouses on
    the same generation. A person's depth is fixed the first time they are
    reached and never overwritten. Returns the ids reached, in visit order.
    """
    if start in ctx.depth_of:
        return []

    ctx.depth_of[start] = depth
    ctx.component_of[start] = start
    reached = [start]
    queue = deque([start])

    def visit(person_id: str, person_depth: int) -> None:
        if person_id in ctx.depth_of:
            return
        ctx.depth_of[person_id] = person_depth
        ctx.component_of[person_id] = start
        reached.append(person_id)
        queue.append(person_id)

    while queue:
        current = queue.popleft()
        current_depth = ctx.depth_of[current]

        for parent_id in ctx.parents(current):
            visit(parent_id, current_depth + 1)
        for child_id in ctx.children(current):
            visit(child_id, current_depth - 1)

        spouse_id = ctx.spouse_of(current)
        if spouse_id is not None:
            visit(spouse_id, current_depth)

    return reached


def compute_depths(ctx: FamilyContext, separate_components: bool = True) -> list[list[str]]:
    """
    Assign depths relative to the pivot.

    Returns the people of each connected component in visit order, the pivot's
    component first. People the pivot cannot reach are anchored at depth 0 of
    their own component when `separate_components` is set; otherwise they are
    left without a depth.
    """
    pivot_id = find_pivot(ctx)
    ctx.pivot_id = pivot_id
    if pivot_id is None:
        return []

    logger.debug("Pivot: %s (score %d)", pivot_id, pivot_score(ctx, pivot_id))
    components = [assign_depths(ctx, pivot_id)]

    unreached = [p for p in ctx.people if p not in ctx.depth_of]
    if unreached:
        logger.debug("%d people are not connected to the pivot", len(unreached))

    if separate_components:
        for person_id in unreached:
            if person_id not in ctx.depth_of:
                components.append(assign_depths(ctx, person_id))

    logger.debug("Depth assigned to %d of %d people", len(ctx.depth_of), len(ctx.people))
    return components
