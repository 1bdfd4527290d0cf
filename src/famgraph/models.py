"""Data classes for family graph entities and build output."""

from dataclasses import dataclass, field

MALE = "male"
FEMALE = "female"
UNKNOWN = "unknown"

COUPLE_SEPARATOR = "&"


@dataclass
class Person:
    id: str
    name: str
    birth_year: int | None = None
    gender: str = UNKNOWN  # "male" | "female" | "unknown"
    is_blood: bool = False


@dataclass(frozen=True)
class Couple:
    id: str
    spouse_a: str
    spouse_b: str

    def partner_of(self, person_id: str) -> str:
        return self.spouse_b if person_id == self.spouse_a else self.spouse_a


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass
class FamilyContext:
    """
    Mutable state shared by the build stages.

    One context is created per build and threaded through every stage; nothing
    survives between builds.
    """

    people: dict[str, Person] = field(default_factory=dict)
    parents_of: dict[str, list[str]] = field(default_factory=dict)
    children_of: dict[str, list[str]] = field(default_factory=dict)
    couples: dict[str, Couple] = field(default_factory=dict)
    couple_of: dict[str, str] = field(default_factory=dict)
    depth_of: dict[str, int] = field(default_factory=dict)
    position_of: dict[str, Position] = field(default_factory=dict)
    # anchor person id of the connected component each person was reached from
    component_of: dict[str, str] = field(default_factory=dict)
    # pairings refused because a participant was already married
    refused_couples: list[tuple[str, str]] = field(default_factory=list)
    relation_count: int = 0
    pivot_id: str | None = None

    def parents(self, person_id: str) -> list[str]:
        return self.parents_of.get(person_id, [])

    def children(self, person_id: str) -> list[str]:
        return self.children_of.get(person_id, [])

    def spouse_of(self, person_id: str) -> str | None:
        couple_id = self.couple_of.get(person_id)
        if couple_id is None:
            return None
        return self.couples[couple_id].partner_of(person_id)


@dataclass(frozen=True)
class Node:
    id: str
    name: str
    birth_year: int | None
    gender: str
    is_blood: bool
    depth: int
    x: float
    y: float

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "birthYear": self.birth_year,
            "gender": self.gender,
            "isBlood": self.is_blood,
            "depth": self.depth,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True)
class CoupleEdge:
    a: str
    b: str
    kind: str = "couple"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "a": self.a, "b": self.b}


@dataclass(frozen=True)
class HierarchyEdge:
    source: str
    target: str
    kind: str = "hierarchy"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "from": self.source, "to": self.target}


@dataclass(frozen=True)
class BuildStats:
    people_count: int
    relation_count: int

    def to_dict(self) -> dict:
        return {"peopleCount": self.people_count, "relationCount": self.relation_count}


@dataclass
class BuildResult:
    nodes: list[Node]
    edges: list[CoupleEdge | HierarchyEdge]
    stats: BuildStats
    pivot_id: str | None = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
            "stats": self.stats.to_dict(),
        }
