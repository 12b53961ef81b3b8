"""Tests for the validators module."""

import pytest

from team_roster.errors import SchemaValidationError
from team_roster.models import Attendee
from team_roster.validators import (
    validate_attendee,
    validate_attendee_names,
    validate_config_data,
)


def valid_data(**overrides):
    data = {
        'num_of_teams': 2,
        'flat': False,
        'attendees': [
            {'person': {'name': 'John'}, 'leader': True},
            {'person': {'name': 'Linda'}, 'leader': True},
            {'person': {'name': 'James'}},
        ]
    }
    data.update(overrides)
    return data


class TestValidateConfigData:
    """Test cases for whole-document validation."""

    def test_valid_data(self):
        """Test validation of a valid configuration."""
        config = validate_config_data(valid_data())

        assert config.num_teams == 2
        assert config.flat is False
        assert config.attendees == (
            Attendee('John', True),
            Attendee('Linda', True),
            Attendee('James', False),
        )

    def test_not_a_mapping(self):
        """Test that a list at the top level is rejected."""
        with pytest.raises(SchemaValidationError, match="table/dictionary"):
            validate_config_data(['num_of_teams', 2])

    def test_missing_team_count(self):
        """Test that the team count is required."""
        data = valid_data()
        del data['num_of_teams']

        with pytest.raises(SchemaValidationError) as excinfo:
            validate_config_data(data)

        assert excinfo.value.field == 'num_of_teams'

    @pytest.mark.parametrize('value', ['2', 2.5, True, None])
    def test_team_count_wrong_type(self, value):
        """Test that non-integer team counts are rejected."""
        with pytest.raises(SchemaValidationError, match="must be an integer"):
            validate_config_data(valid_data(num_of_teams=value))

    def test_negative_team_count(self):
        """Test that a negative team count is rejected."""
        with pytest.raises(SchemaValidationError, match="must not be negative"):
            validate_config_data(valid_data(num_of_teams=-1))

    def test_flat_wrong_type(self):
        """Test that flat must be a boolean."""
        with pytest.raises(SchemaValidationError) as excinfo:
            validate_config_data(valid_data(flat='yes'))

        assert excinfo.value.field == 'flat'

    def test_flat_null_means_false(self):
        """Test that an explicit null flat flag falls back to false."""
        assert validate_config_data(valid_data(flat=None)).flat is False

    def test_missing_attendees(self):
        """Test that attendees are required."""
        data = valid_data()
        del data['attendees']

        with pytest.raises(SchemaValidationError, match="'attendees': is required"):
            validate_config_data(data)

    def test_attendees_not_a_list(self):
        """Test that attendees must be a list."""
        with pytest.raises(SchemaValidationError, match="must be a list"):
            validate_config_data(valid_data(attendees={'person': {'name': 'John'}}))

    def test_empty_attendees(self):
        """Test that at least one attendee is required."""
        with pytest.raises(SchemaValidationError, match="at least 1 attendee"):
            validate_config_data(valid_data(attendees=[]))

    def test_duplicate_names(self):
        """Test that duplicate attendee names are rejected."""
        attendees = [{'person': {'name': 'John'}}, {'person': {'name': 'John'}}]

        with pytest.raises(SchemaValidationError, match="duplicate") as excinfo:
            validate_config_data(valid_data(attendees=attendees))

        assert excinfo.value.field == 'attendees[1].person.name'


class TestValidateAttendee:
    """Test cases for single attendee entries."""

    def test_leader_defaults_to_false(self):
        """Test that a missing leader flag means not eligible."""
        assert validate_attendee({'person': {'name': 'Amy'}}, 0) == Attendee('Amy', False)

    def test_name_is_stripped(self):
        """Test that surrounding whitespace is removed from names."""
        assert validate_attendee({'person': {'name': '  Amy '}}, 0).name == 'Amy'

    def test_entry_not_a_mapping(self):
        """Test that a bare string entry is rejected."""
        with pytest.raises(SchemaValidationError) as excinfo:
            validate_attendee('Amy', 3)

        assert excinfo.value.field == 'attendees[3]'

    def test_missing_person(self):
        """Test that the person table is required."""
        with pytest.raises(SchemaValidationError, match="is required") as excinfo:
            validate_attendee({'leader': True}, 1)

        assert excinfo.value.field == 'attendees[1].person'

    def test_missing_name(self):
        """Test that the name is required."""
        with pytest.raises(SchemaValidationError) as excinfo:
            validate_attendee({'person': {}}, 0)

        assert excinfo.value.field == 'attendees[0].person.name'

    def test_name_wrong_type(self):
        """Test that the name must be a string."""
        with pytest.raises(SchemaValidationError, match="must be a string, got int"):
            validate_attendee({'person': {'name': 42}}, 0)

    def test_leader_wrong_type(self):
        """Test that the leader flag must be a boolean."""
        with pytest.raises(SchemaValidationError, match="must be true or false"):
            validate_attendee({'person': {'name': 'Amy'}, 'leader': 1}, 0)


class TestValidateAttendeeNames:
    """Test cases for attendee name validation."""

    def test_valid_names(self):
        """Test validation of valid names."""
        validate_attendee_names(['John', 'Linda', 'James'])  # Should not raise

    def test_empty_name(self):
        """Test validation with an empty name."""
        with pytest.raises(SchemaValidationError, match="cannot be empty"):
            validate_attendee_names(['John', ''])

    def test_whitespace_name(self):
        """Test validation with a whitespace-only name."""
        with pytest.raises(SchemaValidationError, match="cannot be empty"):
            validate_attendee_names(['   '])

    def test_long_name(self):
        """Test validation with a name that is too long."""
        with pytest.raises(SchemaValidationError, match="too long"):
            validate_attendee_names(['A' * 101])

    def test_schema_errors_are_value_errors(self):
        """Test that schema errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_attendee_names(['John', 'John'])
