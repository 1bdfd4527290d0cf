"""Person store and parent/child adjacency built from raw records."""

from collections.abc import Iterable, Mapping
import logging

from famgraph.models import UNKNOWN, FamilyContext, Person
from famgraph.parsing import (
    BIRTH_YEAR_KEYS,
    CHILD_KEYS,
    GENDER_KEYS,
    NAME_KEYS,
    PARENT_KEYS,
    field_value,
    normalize_name,
    parse_birth_year,
    parse_gender,
    raw_field,
)

logger = logging.getLogger(__name__)


def ensure_person(ctx: FamilyContext, key: str, raw_name: str) -> Person:
    """Return the person stored under `key`, creating a placeholder if absent."""
    person = ctx.people.get(key)
    if person is None:
        person = Person(id=key, name=raw_name or key, gender=UNKNOWN)
        ctx.people[key] = person
    return person


def register_people(ctx: FamilyContext, records: Iterable[Mapping] | None) -> int:
    """Store one person per named record; returns the number of records accepted."""
    count = 0
    for rec in records or ():
        raw_name = field_value(rec, NAME_KEYS)
        key = normalize_name(raw_name)
        if not key:
            continue

        count += 1
        # A repeated person record replaces the earlier attributes
        ctx.people[key] = Person(
            id=key,
            name=raw_name,
            birth_year=parse_birth_year(raw_field(rec, BIRTH_YEAR_KEYS)),
            gender=parse_gender(raw_field(rec, GENDER_KEYS)),
        )

    logger.debug("Registered %d people from %d person records", len(ctx.people), count)
    return count


def _append_unique(mapping: dict[str, list[str]], key: str, value: str) -> None:
    values = mapping.setdefault(key, [])
    if value not in values:
        values.append(value)


def add_relation(ctx: FamilyContext, parent_id: str, child_id: str) -> None:
    _append_unique(ctx.parents_of, child_id, parent_id)
    _append_unique(ctx.children_of, parent_id, child_id)


def register_relations(ctx: FamilyContext, records: Iterable[Mapping] | None) -> int:
    """
    Add parent -> child links, auto-creating people referenced only here.

    Returns the number of accepted relation records; records with an empty
    parent or child are skipped and not counted.
    """
    count = 0
    for rec in records or ():
        parent_raw = field_value(rec, PARENT_KEYS)
        child_raw = field_value(rec, CHILD_KEYS)
        parent_id = normalize_name(parent_raw)
        child_id = normalize_name(child_raw)
        if not parent_id or not child_id:
            continue

        count += 1
        ensure_person(ctx, parent_id, parent_raw)
        ensure_person(ctx, child_id, child_raw)
        add_relation(ctx, parent_id, child_id)

    ctx.relation_count += count
    logger.debug("Accepted %d relations, %d people known", count, len(ctx.people))
    return count
