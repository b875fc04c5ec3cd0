"""Tests for the pure validation and tier rules."""
from datetime import date
from types import SimpleNamespace

import pytest

from famtrack.core.errors import (
    ForeignKeyError,
    OverlappingTierError,
    TierGapError,
    ValidationError,
)
from famtrack.core.validation import (
    MAX_POINTS,
    compute_total_points,
    resolve_tier,
    summarize_points,
    tier_progress,
    validate_activity,
    validate_family,
    validate_participant,
    validate_participation_record,
    validate_tier,
    validate_tier_partition,
)


def tier(name, low, high, id=None):
    return SimpleNamespace(id=id or name, name=name, min_points=low, max_points=high)


def record(participant_id="p1", activity_id="a1", points=5, on=date(2024, 3, 1)):
    return SimpleNamespace(participant_id=participant_id, activity_id=activity_id, points=points, date=on)


class TestFamily:
    def test_valid_family_passes(self):
        fam = SimpleNamespace(name="Lee", contact_email="lee@example.com")
        assert validate_family(fam) is fam

    def test_blank_name_names_the_field(self):
        with pytest.raises(ValidationError) as exc:
            validate_family(SimpleNamespace(name="  ", contact_email="lee@example.com"))
        assert exc.value.field == "name"

    def test_malformed_email(self):
        with pytest.raises(ValidationError) as exc:
            validate_family(SimpleNamespace(name="Lee", contact_email="not-an-email"))
        assert exc.value.field == "contact_email"

    def test_idempotent(self):
        fam = SimpleNamespace(name="Lee", contact_email="lee@example.com")
        assert validate_family(fam) is validate_family(fam)


class TestParticipant:
    def make(self, **overrides):
        values = dict(family_id="f1", first_name="Sam", last_name="Lee", birth_date=date(2012, 1, 1))
        values.update(overrides)
        return SimpleNamespace(**values)

    def test_valid_participant_passes(self):
        p = self.make()
        assert validate_participant(p, {"f1"}) is p

    def test_unknown_family_is_foreign_key_error(self):
        with pytest.raises(ForeignKeyError) as exc:
            validate_participant(self.make(family_id="nope"), {"f1"})
        assert exc.value.field == "family_id"
        assert exc.value.value == "nope"

    def test_foreign_key_error_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            validate_participant(self.make(family_id="nope"), set())

    def test_missing_last_name(self):
        with pytest.raises(ValidationError) as exc:
            validate_participant(self.make(last_name=""), {"f1"})
        assert exc.value.field == "last_name"

    def test_birth_date_in_future(self):
        with pytest.raises(ValidationError) as exc:
            validate_participant(self.make(birth_date=date(2030, 1, 1)), {"f1"}, today=date(2024, 1, 1))
        assert exc.value.field == "birth_date"

    def test_birth_date_after_earliest_record(self):
        with pytest.raises(ValidationError) as exc:
            validate_participant(self.make(birth_date=date(2020, 1, 1)), {"f1"}, first_record_date=date(2018, 1, 1))
        assert exc.value.field == "birth_date"

    def test_birth_date_on_earliest_record_day_is_allowed(self):
        p = self.make(birth_date=date(2018, 1, 1))
        assert validate_participant(p, {"f1"}, first_record_date=date(2018, 1, 1)) is p

    def test_birth_date_must_be_a_date(self):
        with pytest.raises(ValidationError) as exc:
            validate_participant(self.make(birth_date="2012-01-01"), {"f1"})
        assert exc.value.field == "birth_date"


class TestActivity:
    def test_description_is_optional(self):
        a = SimpleNamespace(name="Hike", description=None, points=0)
        assert validate_activity(a) is a

    def test_negative_points(self):
        with pytest.raises(ValidationError) as exc:
            validate_activity(SimpleNamespace(name="Hike", description="", points=-1))
        assert exc.value.field == "points"

    def test_points_beyond_64_bits(self):
        with pytest.raises(ValidationError) as exc:
            validate_activity(SimpleNamespace(name="Hike", description=None, points=10**20))
        assert exc.value.field == "points"

    def test_points_at_64_bit_limit_allowed(self):
        validate_activity(SimpleNamespace(name="Hike", description=None, points=MAX_POINTS))

    def test_points_must_be_integer(self):
        with pytest.raises(ValidationError) as exc:
            validate_activity(SimpleNamespace(name="Hike", description=None, points=2.5))
        assert exc.value.field == "points"


class TestParticipationRecord:
    def test_valid_record_passes(self):
        r = record()
        assert validate_participation_record(r, {"p1"}, {"a1"}) is r

    def test_unknown_participant(self):
        with pytest.raises(ForeignKeyError) as exc:
            validate_participation_record(record(participant_id="ghost"), {"p1"}, {"a1"})
        assert exc.value.field == "participant_id"

    def test_unknown_activity(self):
        with pytest.raises(ForeignKeyError) as exc:
            validate_participation_record(record(activity_id="ghost"), {"p1"}, {"a1"})
        assert exc.value.field == "activity_id"

    def test_negative_points(self):
        with pytest.raises(ValidationError) as exc:
            validate_participation_record(record(points=-3), {"p1"}, {"a1"})
        assert exc.value.field == "points"

    def test_zero_points_allowed(self):
        validate_participation_record(record(points=0), {"p1"}, {"a1"})

    def test_date_before_birth(self):
        with pytest.raises(ValidationError) as exc:
            validate_participation_record(
                record(on=date(2010, 1, 1)), {"p1"}, {"a1"}, birth_dates={"p1": date(2012, 1, 1)}
            )
        assert exc.value.field == "date"


class TestTotals:
    def test_sum_for_participant(self):
        records = [record(points=10), record(points=5), record(participant_id="p2", points=100)]
        assert compute_total_points("p1", records) == 15

    def test_no_records_is_zero(self):
        assert compute_total_points("p1", []) == 0

    def test_summarize_points(self):
        records = [record(points=10), record(participant_id="p2", points=4), record(points=1)]
        assert summarize_points(records) == {"p1": 11, "p2": 4}


class TestTiers:
    tiers = [tier("Bronze", 0, 10), tier("Silver", 10, 25)]

    def test_lower_bound_is_inclusive(self):
        assert resolve_tier(10, self.tiers).name == "Silver"

    def test_upper_bound_is_exclusive(self):
        assert resolve_tier(9, self.tiers).name == "Bronze"

    def test_gap_strict_raises(self):
        with pytest.raises(TierGapError) as exc:
            resolve_tier(15, [tier("Bronze", 0, 10)], strict=True)
        assert exc.value.total_points == 15

    def test_gap_lenient_is_unranked(self):
        assert resolve_tier(15, [tier("Bronze", 0, 10)]) is None

    def test_overlap_detected(self):
        with pytest.raises(OverlappingTierError) as exc:
            validate_tier_partition([tier("A", 0, 10), tier("B", 5, 20)])
        assert {exc.value.first.name, exc.value.second.name} == {"A", "B"}

    def test_overlap_detected_across_non_adjacent_definitions(self):
        with pytest.raises(OverlappingTierError):
            validate_tier_partition([tier("C", 30, 40), tier("A", 0, 100), tier("B", 10, 20)])

    def test_touching_intervals_do_not_overlap(self):
        ordered = validate_tier_partition([tier("Silver", 10, 25), tier("Bronze", 0, 10)])
        assert [t.name for t in ordered] == ["Bronze", "Silver"]

    def test_validate_tier_rejects_empty_interval(self):
        with pytest.raises(ValidationError) as exc:
            validate_tier(tier("Flat", 5, 5))
        assert exc.value.field == "max_points"

    def test_validate_tier_against_existing(self):
        with pytest.raises(OverlappingTierError):
            validate_tier(tier("Gold", 20, 50, id="new"), self.tiers)

    def test_validate_tier_ignores_its_own_stored_copy(self):
        widened = tier("Silver", 10, 40, id="Silver")
        assert validate_tier(widened, self.tiers) is widened

    def test_progress_to_next_tier(self):
        upcoming, needed = tier_progress(7, self.tiers)
        assert upcoming.name == "Silver"
        assert needed == 3

    def test_progress_at_top(self):
        assert tier_progress(30, self.tiers) == (None, None)

    def test_validate_tier_rejects_duplicate_name(self):
        with pytest.raises(ValidationError) as exc:
            validate_tier(tier("silver", 40, 50, id="new"), self.tiers)
        assert exc.value.field == "name"

    def test_validate_tier_rejects_negative_min_points(self):
        with pytest.raises(ValidationError) as exc:
            validate_tier(tier("Below", -5, 10))
        assert exc.value.field == "min_points"

    def test_unranked_name_is_reserved(self):
        with pytest.raises(ValidationError) as exc:
            validate_tier(tier("unranked", 100, 200))
        assert exc.value.field == "name"
