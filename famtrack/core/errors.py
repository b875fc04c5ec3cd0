"""
Domain errors raised by the validation core and the services.

Every error is raised synchronously at the point of validation and is never
retried. The HTTP layer maps them to status codes in ``famtrack.main``.
"""


class FamtrackError(Exception):
    """Base class for all domain errors."""


class ValidationError(FamtrackError):
    """A required field is missing or malformed."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class ForeignKeyError(ValidationError):
    """A reference to a Family, Participant or Activity does not resolve."""

    def __init__(self, field: str, value):
        super().__init__(field, f"unknown reference {value!r}")
        self.value = value


class OverlappingTierError(FamtrackError):
    def __init__(self, first, second):
        super().__init__(
            f"Tier '{first.name}' [{first.min_points}, {first.max_points}) overlaps "
            f"tier '{second.name}' [{second.min_points}, {second.max_points})"
        )
        self.first = first
        self.second = second


class TierGapError(FamtrackError):
    """No tier covers a point total (strict mode only)."""

    def __init__(self, total_points: int):
        super().__init__(f"No tier covers a total of {total_points} points")
        self.total_points = total_points


class ReferenceInUseError(FamtrackError):
    """A delete was refused because other records still point at the target."""

    def __init__(self, entity: str, entity_id: str, dependents: str, count: int):
        super().__init__(f"{entity} {entity_id} still has {count} {dependents}")
        self.entity = entity
        self.entity_id = entity_id
        self.dependents = dependents
        self.count = count
