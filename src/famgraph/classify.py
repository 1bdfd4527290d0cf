"""Blood / in-law classification strategies."""

from collections.abc import Callable

from famgraph.models import MALE, FamilyContext, Person

BloodStrategy = Callable[[FamilyContext, Person], bool]


def paternal_line(ctx: FamilyContext, person: Person) -> bool:
    """
    Anyone with a registered parent is blood; among root-generation people only
    males are, and females or unknowns are treated as having married in.
    """
    if ctx.parents(person.id):
        return True
    return person.gender == MALE


def parents_only(ctx: FamilyContext, person: Person) -> bool:
    return bool(ctx.parents(person.id))


def everyone(ctx: FamilyContext, person: Person) -> bool:
    return True


BLOOD_STRATEGIES: dict[str, BloodStrategy] = {
    "paternal": paternal_line,
    "parents-only": parents_only,
    "all": everyone,
}

DEFAULT_STRATEGY = "paternal"


def resolve_strategy(strategy: str | BloodStrategy) -> BloodStrategy:
    if callable(strategy):
        return strategy
    try:
        return BLOOD_STRATEGIES[strategy]
    except KeyError:
        choices = ", ".join(sorted(BLOOD_STRATEGIES))
        raise ValueError(f"Unknown blood strategy {strategy!r} (expected one of: {choices})") from None


def classify_people(ctx: FamilyContext, strategy: str | BloodStrategy = DEFAULT_STRATEGY) -> None:
    rule = resolve_strategy(strategy)
    for person in ctx.people.values():
        person.is_blood = bool(rule(ctx, person))
