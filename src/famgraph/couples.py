"""Explicit and inferred marriages."""

from collections.abc import Iterable, Mapping
import logging

from famgraph.models import COUPLE_SEPARATOR, Couple, FamilyContext
from famgraph.parsing import NAME_KEYS, SPOUSE_KEYS, field_value, normalize_name
from famgraph.registry import ensure_person

logger = logging.getLogger(__name__)


def couple_key(a: str, b: str) -> str:
    """Canonical couple id: the two person ids sorted and joined."""
    return COUPLE_SEPARATOR.join(sorted([a, b]))


def register_couple(ctx: FamilyContext, a: str, b: str) -> Couple | None:
    """
    Register `a` and `b` as a couple.

    Registering an existing pair in either order returns the existing couple.
    A person keeps the first couple they were registered in, so a pairing that
    involves someone already married elsewhere is refused and None returned.
    """
    if a == b:
        return None

    key = couple_key(a, b)
    existing = ctx.couples.get(key)
    if existing is not None:
        return existing

    if a in ctx.couple_of or b in ctx.couple_of:
        logger.debug("Refusing couple %s: a participant is already married", key)
        ctx.refused_couples.append((a, b))
        return None

    couple = Couple(id=key, spouse_a=a, spouse_b=b)
    ctx.couples[key] = couple
    ctx.couple_of[a] = key
    ctx.couple_of[b] = key
    return couple


def register_explicit_couples(ctx: FamilyContext, records: Iterable[Mapping]) -> None:
    for rec in records:
        a_raw = field_value(rec, NAME_KEYS)
        b_raw = field_value(rec, SPOUSE_KEYS)
        a = normalize_name(a_raw)
        b = normalize_name(b_raw)
        if not a or not b:
            continue

        ensure_person(ctx, a, a_raw)
        ensure_person(ctx, b, b_raw)
        register_couple(ctx, a, b)


def infer_couples(ctx: FamilyContext) -> None:
    """Pair up the two parents of every child that has exactly two."""
    for child_id, parents in ctx.parents_of.items():
        if len(parents) == 2:
            logger.debug("Inferred couple %s & %s (child: %s)", parents[0], parents[1], child_id)
            register_couple(ctx, parents[0], parents[1])


def resolve_couples(ctx: FamilyContext, records: Iterable[Mapping] | None = None) -> None:
    if records:
        register_explicit_couples(ctx, records)
    infer_couples(ctx)
    logger.debug("Resolved %d couples", len(ctx.couples))
