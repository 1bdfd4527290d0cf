"""Build pipeline: records in, positioned nodes and edges out."""

from collections.abc import Iterable, Mapping
import logging

from famgraph.classify import classify_people
from famgraph.config import BuildSettings
from famgraph.couples import resolve_couples
from famgraph.depth import compute_depths
from famgraph.emit import emit_edges, emit_nodes
from famgraph.errors import MissingRequiredData
from famgraph.layout import compute_positions
from famgraph.models import BuildResult, BuildStats, FamilyContext
from famgraph.registry import register_people, register_relations
from famgraph.validation import validate_family

logger = logging.getLogger(__name__)


def build_context(
    people: Iterable[Mapping] | None,
    relations: Iterable[Mapping] | None,
    couples: Iterable[Mapping] | None = None,
    settings: BuildSettings | None = None,
) -> FamilyContext:
    """
    Run every stage up to and including layout on a fresh context.

    Raises MissingRequiredData, before couples, depths or positions are
    computed, if either the person list or the relation list is missing or
    has no usable record.
    """
    settings = settings or BuildSettings()

    ctx = FamilyContext()
    if not register_people(ctx, people):
        raise MissingRequiredData("No person records with a name were provided")
    if not register_relations(ctx, relations):
        raise MissingRequiredData("No relation records with both a parent and a child were provided")

    resolve_couples(ctx, list(couples) if couples else None)
    classify_people(ctx, settings.blood_strategy)
    components = compute_depths(ctx, settings.separate_components)
    compute_positions(ctx, components, settings.layout)
    return ctx


def build_family_graph(
    people: Iterable[Mapping] | None,
    relations: Iterable[Mapping] | None,
    couples: Iterable[Mapping] | None = None,
    settings: BuildSettings | None = None,
) -> BuildResult:
    """
    Build the positioned family graph for one dataset.

    Args:
        people: person records (name, optional birthYear and gender)
        relations: parent -> child records
        couples: optional explicit marriage records (name, spouseName)
        settings: layout constants, blood strategy and component handling

    Returns:
        A BuildResult with one node per person, couple and hierarchy edges,
        reporting stats and validation warnings.
    """
    settings = settings or BuildSettings()
    ctx = build_context(people, relations, couples, settings)

    result = BuildResult(
        nodes=emit_nodes(ctx),
        edges=emit_edges(ctx),
        stats=BuildStats(people_count=len(ctx.people), relation_count=ctx.relation_count),
        pivot_id=ctx.pivot_id,
    )
    if settings.report_warnings:
        result.warnings = validate_family(ctx)

    logger.info(
        "Graph build complete: %d people, %d couples, %d relations, pivot %s",
        len(ctx.people),
        len(ctx.couples),
        ctx.relation_count,
        ctx.pivot_id,
    )
    return result
