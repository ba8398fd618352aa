"""
Tests for the persons domain layer.

Tests domain entities and error classes in isolation.
No external dependencies or IO required.
"""

import pytest

from app.domain.persons.entities import (
    ADDRESS_MAX_LEN,
    BUSINESS_KEY_LEN,
    NAME_MAX_LEN,
    Color,
    Person,
    PersonCandidate,
    make_business_key,
)
from app.domain.persons.errors import (
    InvalidColorError,
    InvalidPersonError,
    NoPersonsWithColorError,
    NoResultError,
    PersonAlreadyExistsError,
    PersonDomainError,
    PersonNotFoundError,
    PersonValidationError,
)


class TestColor:
    """Tests for Color token resolution."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("rot", Color.RED),
            ("ROT", Color.RED),
            ("  blau ", Color.BLUE),
            ("green", Color.GREEN),
            ("4", Color.RED),
            ("7", Color.WHITE),
            ("weiß", Color.WHITE),
            ("WEISS", Color.WHITE),
            ("Türkis", Color.TURQUOISE),
        ],
    )
    def test_parse_recognised_tokens(self, token, expected) -> None:
        assert Color.parse(token) is expected

    @pytest.mark.parametrize("token", ["pink", "", "   ", "0", "8", "rotgrün"])
    def test_parse_rejects_unknown_tokens(self, token) -> None:
        with pytest.raises(InvalidColorError) as exc_info:
            Color.parse(token)
        assert exc_info.value.token == token

    def test_codes_are_unique_and_sequential(self) -> None:
        assert [c.code for c in Color] == list(range(1, 8))

    def test_from_label_round_trips_storage_value(self) -> None:
        for color in Color:
            assert Color.from_label(color.label) is color

    def test_from_label_is_exact(self) -> None:
        with pytest.raises(InvalidColorError):
            Color.from_label("RED")


class TestPersonCandidate:
    """Tests for the PersonCandidate entity."""

    def test_fields_are_trimmed(self) -> None:
        candidate = PersonCandidate(
            first_name="  Hans ",
            last_name=" Müller",
            address=" 67742 Lauterecken ",
            color=Color.BLUE,
        )
        assert candidate.first_name == "Hans"
        assert candidate.last_name == "Müller"
        assert candidate.address == "67742 Lauterecken"

    def test_color_token_is_resolved(self) -> None:
        candidate = PersonCandidate("Hans", "Müller", "", "rot")
        assert candidate.color is Color.RED

    def test_unknown_color_token_rejected(self) -> None:
        with pytest.raises(InvalidColorError):
            PersonCandidate("Hans", "Müller", "", "pink")

    def test_blank_first_name_rejected(self) -> None:
        with pytest.raises(InvalidPersonError) as exc_info:
            PersonCandidate("   ", "Müller", "", Color.BLUE)
        assert exc_info.value.reason == "first name is required"

    def test_blank_last_name_rejected(self) -> None:
        with pytest.raises(InvalidPersonError) as exc_info:
            PersonCandidate("Hans", "", "", Color.BLUE)
        assert exc_info.value.reason == "last name is required"

    def test_empty_address_allowed(self) -> None:
        assert PersonCandidate("Hans", "Müller", "", Color.BLUE).address == ""

    @pytest.mark.parametrize(
        "fields, reason",
        [
            (("x" * (NAME_MAX_LEN + 1), "Müller", ""), "first name exceeds 255 characters"),
            (("Hans", "x" * (NAME_MAX_LEN + 1), ""), "last name exceeds 255 characters"),
            (("Hans", "Müller", "x" * (ADDRESS_MAX_LEN + 1)), "address exceeds 512 characters"),
        ],
    )
    def test_over_long_fields_rejected(self, fields, reason) -> None:
        with pytest.raises(InvalidPersonError) as exc_info:
            PersonCandidate(*fields, Color.BLUE)
        assert exc_info.value.reason == reason

    def test_maximum_lengths_accepted(self) -> None:
        candidate = PersonCandidate(
            "x" * NAME_MAX_LEN, "y" * NAME_MAX_LEN, "z" * ADDRESS_MAX_LEN, Color.BLUE
        )
        assert len(candidate.address) == ADDRESS_MAX_LEN


class TestBusinessKey:
    """Tests for the duplicate-detection key."""

    def test_key_ignores_case_and_surrounding_whitespace(self) -> None:
        a = PersonCandidate("Hans", "Müller", "67742 Lauterecken", Color.BLUE)
        b = PersonCandidate(" HANS", "müller ", "67742 LAUTERECKEN", Color.RED)
        assert a.business_key == b.business_key

    def test_key_differs_by_address(self) -> None:
        a = PersonCandidate("Hans", "Müller", "67742 Lauterecken", Color.BLUE)
        b = PersonCandidate("Hans", "Müller", "10115 Berlin", Color.BLUE)
        assert a.business_key != b.business_key

    def test_stored_person_shares_candidate_key(self) -> None:
        candidate = PersonCandidate("Hans", "Müller", "67742 Lauterecken", Color.BLUE)
        person = Person(
            id=1,
            first_name="Hans",
            last_name="Müller",
            address="67742 Lauterecken",
            color=Color.BLUE,
        )
        assert person.business_key == candidate.business_key

    def test_key_has_fixed_length(self) -> None:
        assert len(make_business_key("Hans", "Müller", "Ort")) == BUSINESS_KEY_LEN
        # casefold turns each ß into ss
        long_key = make_business_key(
            "ß" * NAME_MAX_LEN, "ß" * NAME_MAX_LEN, "ß" * ADDRESS_MAX_LEN
        )
        assert len(long_key) == BUSINESS_KEY_LEN

    def test_separator_characters_cannot_collide(self) -> None:
        """Field content that looks like a separator never merges two persons."""
        a = PersonCandidate("a|b", "c", "", Color.BLUE)
        b = PersonCandidate("a", "b|c", "", Color.BLUE)
        assert a.business_key != b.business_key

    @pytest.mark.parametrize(
        "first, last, address",
        [
            ('a","b', "c", ""),
            ("a\\", "b", ""),
            ("a", "", "b"),
        ],
    )
    def test_quote_and_escape_characters_cannot_collide(self, first, last, address) -> None:
        assert make_business_key(first, last, address) != make_business_key("a", "b", "")


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_not_found_errors_are_no_result(self) -> None:
        assert isinstance(PersonNotFoundError(10), NoResultError)
        assert isinstance(NoPersonsWithColorError("rot"), NoResultError)

    def test_person_not_found_message(self) -> None:
        error = PersonNotFoundError(10)
        assert error.person_id == 10
        assert "10" in error.message

    def test_already_exists_carries_key(self) -> None:
        error = PersonAlreadyExistsError("hans|müller|ort")
        assert error.business_key == "hans|müller|ort"
        assert isinstance(error, PersonDomainError)

    def test_validation_errors_share_base(self) -> None:
        assert issubclass(InvalidColorError, PersonValidationError)
        assert issubclass(InvalidPersonError, PersonValidationError)
