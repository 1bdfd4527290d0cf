"""Exceptions raised by the family graph builder."""


class FamGraphError(Exception):
    """Base class for errors surfaced to callers of the builder."""


class MissingRequiredData(FamGraphError):
    """The person list or the relation list is absent or empty after filtering."""
