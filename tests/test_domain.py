"""Unit tests for domain primitives and normalizers.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import re
from uuid import UUID

import pytest

from events.domain import EmailAddress, EventId
from events.domain.errors import ErrorCode, InvalidFormatError, ValidationError
from events.domain.normalizers import normalize_date, normalize_time, slugify


class TestSlugify:
    """Tests for slug generation."""

    def test_slugify_strips_punctuation(self):
        """Trailing punctuation is dropped and spaces become hyphens."""
        assert slugify("React Conf 2024!") == "react-conf-2024"

    def test_slugify_removes_quotes_without_hyphen(self):
        """Quotes are removed outright rather than turned into hyphens."""
        assert slugify("Devs' \"Night\" Out") == "devs-night-out"

    def test_slugify_collapses_runs_and_trims_hyphens(self):
        """Runs of non-alphanumerics collapse to one hyphen, none at the ends."""
        assert slugify("  --Next.js   Summit__ ") == "next-js-summit"

    @pytest.mark.parametrize(
        "title",
        ["React Conf 2024!", "  AI / ML :: Hackathon  ", "Ünïcode Evént", "---", "Web3 Developer Meetup"],
    )
    def test_slugify_output_shape_and_idempotence(self, title):
        """Slugs hold only [a-z0-9-], never start or end with a hyphen, and re-slugify to themselves."""
        slug = slugify(title)
        assert re.fullmatch(r"[a-z0-9-]*", slug)
        assert not slug.startswith("-")
        assert not slug.endswith("-")
        assert slugify(slug) == slug


class TestNormalizeDate:
    """Tests for date normalization."""

    def test_canonical_date_is_unchanged(self):
        """An ISO date normalizes to itself."""
        assert normalize_date("2024-03-15") == "2024-03-15"

    def test_long_form_date(self):
        """A written-out date becomes YYYY-MM-DD."""
        assert normalize_date("March 15, 2024") == "2024-03-15"

    def test_aware_datetime_uses_utc_date(self):
        """An offset timestamp is converted to UTC before the date is taken."""
        assert normalize_date("2024-03-15T23:30:00-05:00") == "2024-03-16"

    def test_unparseable_date_raises_invalid_format(self):
        """Text that is not a date raises InvalidFormatError naming date."""
        with pytest.raises(InvalidFormatError) as excinfo:
            normalize_date("not a date")
        assert excinfo.value.code is ErrorCode.INVALID_FORMAT
        assert excinfo.value.field == "date"

    @pytest.mark.parametrize("raw", ["10:30", "March 15", "March 2024", "15"])
    def test_incomplete_date_is_not_filled_from_today(self, raw):
        """A value missing its year, month or day is rejected instead of borrowing today's."""
        with pytest.raises(InvalidFormatError):
            normalize_date(raw)


class TestNormalizeTime:
    """Tests for time normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("9pm", "21:00"),
            ("9:30 PM", "21:30"),
            ("21:30", "21:30"),
            ("9", "09:00"),
            ("12am", "00:00"),
            ("12:15 pm", "12:15"),
            ("  7:05   am ", "07:05"),
            ("0", "00:00"),
        ],
    )
    def test_accepted_shapes(self, raw, expected):
        """Bare hour, 24-hour and meridiem inputs become zero-padded HH:MM."""
        assert normalize_time(raw) == expected

    @pytest.mark.parametrize("raw", ["25:00", "13pm", "9:60", "24", "noon", "9.30", ""])
    def test_rejected_values_raise_invalid_format(self, raw):
        """Out-of-range or unrecognized times raise InvalidFormatError."""
        with pytest.raises(InvalidFormatError):
            normalize_time(raw)

    @pytest.mark.parametrize("raw", ["٩pm", "١٠:٣٠", "９"])
    def test_non_ascii_digits_rejected(self, raw):
        """Only ASCII digits count as hours and minutes."""
        with pytest.raises(InvalidFormatError):
            normalize_time(raw)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        event_id = EventId.from_string("12345678-1234-5678-1234-567812345678")
        assert event_id.value == UUID("12345678-1234-5678-1234-567812345678")

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestEmailAddress:
    """Tests for EmailAddress value object."""

    def test_from_raw_trims_and_lowercases(self):
        """Surrounding whitespace is trimmed and the address lowercased."""
        assert EmailAddress.from_raw(" Foo@Bar.COM ").value == "foo@bar.com"

    @pytest.mark.parametrize("raw", ["foo", "foo@bar", "foo bar@baz.com", "@bar.com", "", None])
    def test_from_raw_rejects_malformed(self, raw):
        """Anything not shaped like local@domain.tld raises ValidationError naming email."""
        with pytest.raises(ValidationError) as excinfo:
            EmailAddress.from_raw(raw)
        assert excinfo.value.field == "email"

    def test_constructor_validates(self):
        """Direct construction checks the format too."""
        with pytest.raises(ValidationError):
            EmailAddress("not-an-email")
