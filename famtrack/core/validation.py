"""
Validation and derivation rules for the participation data model.

Everything here is a pure function over its arguments. Records are read by
attribute, so ORM rows, pydantic payloads and plain namespaces all work.
Foreign keys are checked against collections of known ids supplied by the
caller; nothing in this module touches the database.

Each ``validate_*`` function returns the record it was given, or raises
``ValidationError`` / ``ForeignKeyError`` naming the offending field.
"""
from collections import defaultdict
from collections.abc import Collection, Iterable, Mapping
from datetime import date, datetime

from email_validator import EmailNotValidError, validate_email

from .errors import ForeignKeyError, OverlappingTierError, TierGapError, ValidationError

UNRANKED = "Unranked"
# largest value a signed 64-bit INTEGER column holds
MAX_POINTS = 2**63 - 1


def _require_text(record, field: str) -> str:
    value = getattr(record, field, None)
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(field, "is required")
    return value


def _require_points(record, field: str) -> int:
    value = getattr(record, field, None)
    if value is None:
        raise ValidationError(field, "is required")
    # bool is an int subclass but never a point value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "must be an integer")
    if value < 0:
        raise ValidationError(field, "must not be negative")
    if value > MAX_POINTS:
        raise ValidationError(field, f"must not exceed {MAX_POINTS}")
    return value


def _require_date(record, field: str) -> date:
    value = getattr(record, field, None)
    if value is None:
        raise ValidationError(field, "is required")
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise ValidationError(field, "must be a date")
    return value


def _require_reference(record, field: str, known: Collection[str]) -> str:
    value = _require_text(record, field)
    if value not in known:
        raise ForeignKeyError(field, value)
    return value


def validate_family(family):
    _require_text(family, "name")
    email = _require_text(family, "contact_email")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError("contact_email", str(exc)) from exc
    return family


def validate_participant(
    participant,
    family_ids: Collection[str],
    *,
    today: date | None = None,
    first_record_date: date | None = None,
):
    """Check a participant's names, birth date and owning family.

    ``today`` is optional so the function stays pure; when given, a birth
    date after it is rejected. ``first_record_date`` is the date of the
    participant's earliest participation record, if any; the birth date may
    not come after it.
    """
    _require_text(participant, "first_name")
    _require_text(participant, "last_name")
    birth_date = _require_date(participant, "birth_date")
    if today is not None and birth_date > today:
        raise ValidationError("birth_date", "must not be in the future")
    if first_record_date is not None and birth_date > first_record_date:
        raise ValidationError("birth_date", "is after the participant's earliest participation record")
    _require_reference(participant, "family_id", family_ids)
    return participant


def validate_activity(activity):
    _require_text(activity, "name")
    description = getattr(activity, "description", None)
    if description is not None and not isinstance(description, str):
        raise ValidationError("description", "must be text")
    _require_points(activity, "points")
    return activity


def validate_participation_record(
    record,
    participant_ids: Collection[str],
    activity_ids: Collection[str],
    *,
    birth_dates: Mapping[str, date] | None = None,
):
    """Check a participation record's references, date and awarded points.

    ``birth_dates`` maps participant ids to birth dates; when the record's
    participant is in it, a participation dated before birth is rejected.
    """
    participant_id = _require_reference(record, "participant_id", participant_ids)
    _require_reference(record, "activity_id", activity_ids)
    on = _require_date(record, "date")
    _require_points(record, "points")
    if birth_dates and participant_id in birth_dates and on < birth_dates[participant_id]:
        raise ValidationError("date", "is before the participant's birth date")
    return record


def validate_tier(tier, existing: Iterable = ()):
    """Check a tier's fields and that it fits among the ``existing`` tiers.

    A tier in ``existing`` with the same id as ``tier`` is the stored copy of
    the one being updated and is left out of the name and partition checks.
    """
    _require_text(tier, "name")
    low = _require_points(tier, "min_points")
    high = _require_points(tier, "max_points")
    if high <= low:
        raise ValidationError("max_points", "must be greater than min_points")

    tier_id = getattr(tier, "id", None)
    others = [t for t in existing if tier_id is None or getattr(t, "id", None) != tier_id]
    name = tier.name.strip()
    if name.lower() == UNRANKED.lower():
        raise ValidationError("name", f"{UNRANKED!r} is reserved for totals outside every tier")
    if any(t.name.strip().lower() == name.lower() for t in others):
        raise ValidationError("name", f"a tier named {name!r} already exists")
    validate_tier_partition([*others, tier])
    return tier


def validate_tier_partition(tiers: Iterable) -> list:
    """Raise ``OverlappingTierError`` if any two half-open intervals intersect.

    Returns the tiers ordered by ``min_points``.
    """
    ordered = sorted(tiers, key=lambda t: (t.min_points, t.max_points))
    # empty intervals cover nothing, so they cannot overlap anything
    spans = [t for t in ordered if t.max_points > t.min_points]
    for previous, current in zip(spans, spans[1:]):
        if current.min_points < previous.max_points:
            raise OverlappingTierError(previous, current)
    return ordered


def compute_total_points(participant_id: str, records: Iterable) -> int:
    return sum(r.points for r in records if r.participant_id == participant_id)


def summarize_points(records: Iterable) -> dict[str, int]:
    """Total points per participant id, for every participant that has records."""
    totals: dict[str, int] = defaultdict(int)
    for r in records:
        totals[r.participant_id] += r.points
    return dict(totals)


def resolve_tier(total_points: int, tiers: Iterable, *, strict: bool = False):
    """Return the tier whose ``[min_points, max_points)`` contains ``total_points``.

    When no tier covers the total, strict mode raises ``TierGapError`` and
    lenient mode returns ``None`` (presented to users as ``UNRANKED``).
    """
    for tier in tiers:
        if tier.min_points <= total_points < tier.max_points:
            return tier
    if strict:
        raise TierGapError(total_points)
    return None


def tier_progress(total_points: int, tiers: Iterable):
    """Return ``(next_tier, points_needed)``, or ``(None, None)`` at the top."""
    above = [t for t in tiers if t.min_points > total_points]
    if not above:
        return None, None
    upcoming = min(above, key=lambda t: t.min_points)
    return upcoming, upcoming.min_points - total_points
