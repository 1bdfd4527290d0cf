import pytest

from famgraph.classify import classify_people
from famgraph.couples import couple_key, register_couple, resolve_couples
from famgraph.models import FamilyContext
from famgraph.registry import register_people, register_relations


def test_register_people_skips_blank_names_and_parses_fields():
    ctx = FamilyContext()
    count = register_people(
        ctx,
        [
            {"name": " Kim Min-Su ", "birthYear": "1970", "gender": "M"},
            {"name": "   "},
            {"gender": "female"},
        ],
    )

    assert count == 1
    assert list(ctx.people) == ["KimMinSu"]
    person = ctx.people["KimMinSu"]
    assert person.name == "Kim Min-Su"
    assert person.birth_year == 1970
    assert person.gender == "male"


def test_register_relations_creates_placeholders_and_counts_accepted_rows():
    ctx = FamilyContext()
    register_people(ctx, [{"name": "Kim Min-Su", "gender": "male"}])
    count = register_relations(
        ctx,
        [
            {"parent": "KimMinSu", "child": "Kim Ji"},
            {"parent": "Kim-Min Su", "child": "KimJi"},  # same pair again
            {"parent": "", "child": "Kim Ji"},
            {"parent": "Kim Min-Su", "child": "  "},
        ],
    )

    assert count == 2
    assert ctx.relation_count == 2
    assert list(ctx.people) == ["KimMinSu", "KimJi"]
    assert ctx.people["KimMinSu"].name == "Kim Min-Su"
    assert ctx.people["KimJi"].gender == "unknown"
    assert ctx.people["KimJi"].birth_year is None
    assert ctx.parents_of == {"KimJi": ["KimMinSu"]}
    assert ctx.children_of == {"KimMinSu": ["KimJi"]}


def test_korean_headers_are_accepted():
    ctx = FamilyContext()
    register_people(ctx, [{"이름": "이민우", "생년월일": 1961, "성별": "남"}])
    register_relations(ctx, [{"부모": "이민우", "자식": "이상현"}])
    resolve_couples(ctx, [{"이름": "이민우", "배우자": "신동화"}])

    assert ctx.people["이민우"].gender == "male"
    assert ctx.parents_of["이상현"] == ["이민우"]
    assert couple_key("이민우", "신동화") in ctx.couples


def test_couple_registration_is_order_independent():
    ctx = FamilyContext()
    first = register_couple(ctx, "A", "B")
    second = register_couple(ctx, "B", "A")

    assert first is second
    assert first.id == "A&B"
    assert list(ctx.couples) == ["A&B"]
    assert ctx.couple_of == {"A": "A&B", "B": "A&B"}


def test_second_marriage_is_refused():
    ctx = FamilyContext()
    register_couple(ctx, "A", "B")

    assert register_couple(ctx, "A", "C") is None
    assert list(ctx.couples) == ["A&B"]
    assert "C" not in ctx.couple_of
    assert ctx.refused_couples == [("A", "C")]


def test_self_pairing_is_ignored():
    ctx = FamilyContext()
    assert register_couple(ctx, "A", "A") is None
    assert ctx.couples == {}


def test_inferred_couple_matches_explicit_one():
    ctx = FamilyContext()
    register_relations(ctx, [{"parent": "Dad", "child": "Kid"}, {"parent": "Mom", "child": "Kid"}])
    resolve_couples(ctx, [{"name": "Mom", "spouseName": "Dad"}])

    assert len(ctx.couples) == 1
    couple = ctx.couples["Dad&Mom"]
    # explicit registration came first
    assert couple.spouse_a == "Mom"


def test_no_couple_inferred_for_one_or_three_parents():
    ctx = FamilyContext()
    register_relations(
        ctx,
        [
            {"parent": "Solo", "child": "K1"},
            {"parent": "X", "child": "K2"},
            {"parent": "Y", "child": "K2"},
            {"parent": "Z", "child": "K2"},
        ],
    )
    resolve_couples(ctx)

    assert ctx.couples == {}


def test_explicit_couple_creates_missing_people():
    ctx = FamilyContext()
    resolve_couples(ctx, [{"name": "Anna", "spouseName": "Ben"}, {"name": "Carl", "spouseName": ""}])

    assert list(ctx.people) == ["Anna", "Ben"]
    assert list(ctx.couples) == ["Anna&Ben"]


def test_paternal_classification():
    ctx = FamilyContext()
    register_people(
        ctx,
        [
            {"name": "Root", "gender": "male"},
            {"name": "Wife", "gender": "female"},
            {"name": "Daughter", "gender": "female"},
        ],
    )
    register_relations(ctx, [{"parent": "Root", "child": "Daughter"}, {"parent": "Mystery", "child": "Daughter"}])
    classify_people(ctx)

    assert ctx.people["Root"].is_blood is True
    assert ctx.people["Wife"].is_blood is False
    assert ctx.people["Daughter"].is_blood is True
    assert ctx.people["Mystery"].is_blood is False  # unknown gender at the root


def test_named_and_custom_strategies():
    ctx = FamilyContext()
    register_people(ctx, [{"name": "Root", "gender": "male"}, {"name": "Wife", "gender": "female"}])

    classify_people(ctx, "all")
    assert all(p.is_blood for p in ctx.people.values())

    classify_people(ctx, "parents-only")
    assert not any(p.is_blood for p in ctx.people.values())

    classify_people(ctx, lambda c, p: p.gender == "female")
    assert ctx.people["Wife"].is_blood is True
    assert ctx.people["Root"].is_blood is False


def test_unknown_strategy_raises():
    with pytest.raises(ValueError, match="Unknown blood strategy"):
        classify_people(FamilyContext(), "matrilineal")
