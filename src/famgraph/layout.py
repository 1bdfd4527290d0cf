"""
Generation-by-generation layout.

The x axis carries the generation (depth * generation gap) and the y axis the
order within a generation. Each generation is split into sibling groups
(people sharing the same parent set) and singles, and groups are placed as
close as possible under their parents without ever overlapping.
"""

from dataclasses import dataclass
import logging

from pydantic import BaseModel, ConfigDict, PositiveFloat

from famgraph.models import COUPLE_SEPARATOR, FamilyContext, Position

logger = logging.getLogger(__name__)

GENERATION_GAP = 150.0
SIBLING_GAP = 200.0
COUPLE_OFFSET_RATIO = 0.7  # spouse distance, as a fraction of the sibling gap
COUPLE_ADVANCE_RATIO = 1.6  # cursor advance after placing a couple


class LayoutSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    generation_gap: PositiveFloat = GENERATION_GAP
    sibling_gap: PositiveFloat = SIBLING_GAP
    couple_offset_ratio: PositiveFloat = COUPLE_OFFSET_RATIO
    couple_advance_ratio: PositiveFloat = COUPLE_ADVANCE_RATIO

    @property
    def couple_offset(self) -> float:
        return self.couple_offset_ratio * self.sibling_gap

    @property
    def couple_advance(self) -> float:
        return self.couple_advance_ratio * self.sibling_gap


@dataclass
class FamilyGroup:
    kind: str  # "siblings" | "single"
    members: list[str]
    parent_key: str | None = None


def bucket_by_depth(ctx: FamilyContext, people: list[str]) -> dict[int, list[str]]:
    buckets: dict[int, list[str]] = {}
    for person_id in people:
        depth = ctx.depth_of.get(person_id)
        if depth is not None:
            buckets.setdefault(depth, []).append(person_id)
    return buckets


def sibling_sort_key(ctx: FamilyContext, person_id: str) -> tuple[bool, int]:
    # Unmarried siblings with many children first, married ones (where another
    # lineage joins in) last.
    return (person_id in ctx.couple_of, -len(ctx.children(person_id)))


def build_family_groups(ctx: FamilyContext, people: list[str]) -> list[FamilyGroup]:
    """Split one generation into sibling groups followed by singles."""
    siblings: dict[str, list[str]] = {}
    for person_id in people:
        parents = ctx.parents(person_id)
        if not parents:
            continue
        parent_key = COUPLE_SEPARATOR.join(sorted(parents))
        siblings.setdefault(parent_key, []).append(person_id)

    groups = [
        FamilyGroup(
            kind="siblings",
            members=sorted(members, key=lambda p: sibling_sort_key(ctx, p)),
            parent_key=parent_key,
        )
        for parent_key, members in siblings.items()
    ]
    groups.extend(
        FamilyGroup(kind="single", members=[person_id])
        for person_id in people
        if not ctx.parents(person_id)
    )
    return groups


def ideal_coordinate(ctx: FamilyContext, group: FamilyGroup) -> float | None:
    """
    Mean sibling-axis coordinate of the group's parents.

    The sum covers positioned parents only but is divided by the total parent
    count of all members. None when no parent has been placed yet.
    """
    total = 0.0
    placed = False
    parent_count = 0
    for person_id in group.members:
        parents = ctx.parents(person_id)
        parent_count += len(parents)
        for parent_id in parents:
            pos = ctx.position_of.get(parent_id)
            if pos is not None:
                total += pos.y
                placed = True

    if not placed:
        return None
    return total / parent_count


def position_groups(
    ctx: FamilyContext,
    groups: list[FamilyGroup],
    settings: LayoutSettings,
    origin: float = 0.0,
) -> None:
    ideals = [(group, ideal_coordinate(ctx, group)) for group in groups]
    # Groups hanging under placed parents first, in parent order; the rest
    # keep their original order.
    ideals.sort(key=lambda item: (item[1] is None, item[1] if item[1] is not None else 0.0))

    cursor = origin
    for group, ideal in ideals:
        if ideal is not None and cursor < ideal:
            cursor = max(cursor, ideal - len(group.members) * settings.sibling_gap / 2)

        for person_id in group.members:
            if person_id in ctx.position_of:
                continue

            depth = ctx.depth_of[person_id]
            ctx.position_of[person_id] = Position(x=depth * settings.generation_gap, y=cursor)

            spouse_id = ctx.spouse_of(person_id)
            if (
                spouse_id is not None
                and ctx.depth_of.get(spouse_id) == depth
                and spouse_id not in ctx.position_of
            ):
                ctx.position_of[spouse_id] = Position(
                    x=depth * settings.generation_gap,
                    y=cursor + settings.couple_offset,
                )
                cursor += settings.couple_advance
            else:
                cursor += settings.sibling_gap


def layout_component(
    ctx: FamilyContext,
    people: list[str],
    settings: LayoutSettings,
    origin: float = 0.0,
) -> None:
    buckets = bucket_by_depth(ctx, people)
    for depth in sorted(buckets, reverse=True):
        groups = build_family_groups(ctx, buckets[depth])
        logger.debug(
            "Depth %d groups: %s",
            depth,
            [(g.kind, [ctx.people[m].name for m in g.members]) for g in groups],
        )
        position_groups(ctx, groups, settings, origin)


def compute_positions(
    ctx: FamilyContext,
    components: list[list[str]],
    settings: LayoutSettings | None = None,
) -> None:
    """
    Lay out every component, the pivot's first at sibling coordinate 0.

    Each further component starts one sibling gap past the furthest
    coordinate used so far, so separate families never overlap.
    """
    settings = settings or LayoutSettings()
    ctx.position_of.clear()

    origin = 0.0
    for index, people in enumerate(components):
        if index > 0:
            origin = max(pos.y for pos in ctx.position_of.values()) + settings.sibling_gap
        layout_component(ctx, people, settings, origin)
