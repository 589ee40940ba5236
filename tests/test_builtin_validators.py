"""
Tests for the built-in validators

Each validator is called directly with the (value, options) contract.
"""
from types import MappingProxyType

import pytest

from form_validation import messages, validators
from form_validation.builtin_validators import luhn_checksum


class TestRequired:
    """Test the required validator."""

    def test_empty_fails(self):
        """Test that the empty string fails."""
        assert validators["required"]("", True) == "This field is required."

    def test_non_empty_passes(self):
        """Test that any other value passes."""
        assert validators["required"]("x", True) is False
        assert validators["required"](0, True) is False

    def test_options_not_true_disables(self):
        """Test that required=False never fails."""
        assert validators["required"]("", False) is False
        assert validators["required"]("", {"when": "always"}) is False


class TestEmail:
    """Test the email validator."""

    @pytest.mark.parametrize("value", [
        "user@example.com",
        "a@b.com",
        "first.last@sub.example.co.uk",
        "user@[192.168.0.1]",
        '"john doe"@example.com',
    ])
    def test_valid(self, value):
        """Test that well-formed addresses pass."""
        assert validators["email"](value, True) is False

    @pytest.mark.parametrize("value", [
        "not-an-email",
        "user@example",
        "user@example.c",
        "user@@example.com",
        "user name@example.com",
        "user@example.com\n",
    ])
    def test_invalid(self, value):
        """Test that malformed addresses fail."""
        assert validators["email"](value, True) == "Must be a valid email."

    def test_options_not_true_disables(self):
        """Test that email=False never fails."""
        assert validators["email"]("not-an-email", False) is False


class TestCreditCard:
    """Test the creditcard validator and the Luhn checksum."""

    def test_valid_number(self):
        """Test that a Luhn-valid number passes."""
        assert validators["creditcard"]("4111111111111111", True) is False

    def test_invalid_checksum(self):
        """Test that a bad check digit fails."""
        assert validators["creditcard"]("4111111111111112", True) == messages["creditcard"]

    @pytest.mark.parametrize("value", ["4111-1111-1111-1111", "4111 1111 1111 1111"])
    def test_separators_are_stripped(self, value):
        """Test that spaces and dashes are ignored."""
        assert validators["creditcard"](value, True) is False

    @pytest.mark.parametrize("value", ["41111111111", "41111111111111111111"])
    def test_length_bounds(self, value):
        """Test that numbers outside 12-19 digits fail."""
        assert validators["creditcard"](value, True) == messages["creditcard"]

    def test_letters_fail(self):
        """Test that letters fail the checksum."""
        assert validators["creditcard"]("4111abcd11111111", True) == messages["creditcard"]

    def test_luhn_checksum(self):
        """Test the checksum directly."""
        assert luhn_checksum("79927398713") is True
        assert luhn_checksum("79927398710") is False

    def test_luhn_zero_sum_fails(self):
        """Test that an all-zero number is rejected."""
        assert luhn_checksum("000000000000") is False


class TestPattern:
    """Test the pattern validator."""

    @pytest.fixture
    def phone(self):
        return {"mask": "(111) 111-1111", "placeholder": "(555) 555-5555"}

    def test_formatted_value_passes(self, phone):
        """Test that a fully formatted value passes."""
        assert validators["pattern"]("(555) 123-4567", phone) is False

    def test_raw_value_passes(self, phone):
        """Test that just the editable characters pass."""
        assert validators["pattern"]("5551234567", phone) is False

    def test_message_uses_placeholder(self, phone):
        """Test that the failure message shows the placeholder."""
        result = validators["pattern"]("555-1234", phone)
        assert result == "Please match the pattern (555) 555-5555"

    def test_message_falls_back_to_mask(self):
        """Test that the mask is shown when no placeholder is given."""
        result = validators["pattern"]("12", {"mask": "11111"})
        assert result == "Please match the pattern 11111"

    def test_string_options(self):
        """Test that a bare string is used as mask and placeholder."""
        assert validators["pattern"]("12345", "11111") is False
        assert validators["pattern"]("1234", "11111") == "Please match the pattern 11111"

    def test_message_from_catalog(self):
        """Test that the message template comes from the catalog."""
        messages["pattern"] = "Format attendu : {pattern}"
        assert validators["pattern"]("1", "11") == "Format attendu : 11"

    def test_read_only_mapping_options(self):
        """Test that any mapping works as options, not just dict."""
        options = MappingProxyType({"mask": "11111", "placeholder": "12345"})
        assert validators["pattern"]("54321", options) is False
        assert validators["pattern"]("5432", options) == "Please match the pattern 12345"

    def test_missing_mask_raises(self):
        """Test that a pattern rule without a mask is a caller error."""
        with pytest.raises(ValueError):
            validators["pattern"]("123", True)
        with pytest.raises(ValueError):
            validators["pattern"]("123", {"placeholder": "xxx"})


class TestNumbersOnly:
    """Test the numbersonly validator."""

    @pytest.mark.parametrize("value", ["12345", 12345, "0"])
    def test_digits_pass(self, value):
        """Test that digit strings and integers pass."""
        assert validators["numbersonly"](value, True) is False

    @pytest.mark.parametrize("value", ["12a", "-1", "1.5", "", " 1"])
    def test_non_digits_fail(self, value):
        """Test that anything else fails."""
        assert validators["numbersonly"](value, True) == "Please enter only numbers."


class TestZipcode:
    """Test the zipcode validator."""

    @pytest.mark.parametrize("value", ["12345", "12345-6789"])
    def test_valid(self, value):
        """Test that 5 and 5+4 digit codes pass."""
        assert validators["zipcode"](value, True) is False

    @pytest.mark.parametrize("value", ["1234", "123456", "12345-678", "abcde", "12345\n"])
    def test_invalid(self, value):
        """Test that other formats fail."""
        assert validators["zipcode"](value, True) == "Please enter a valid zip code."


class TestMatches:
    """Test the matches validator."""

    def test_allowed_value_passes(self):
        """Test that a listed value passes."""
        assert validators["matches"]("red", ["red", "green"]) is False

    def test_other_value_fails(self):
        """Test that an unlisted value fails."""
        assert validators["matches"]("blue", ("red", "green")) == messages["matches"]

    def test_without_allowed_values(self):
        """Test that matches without a collection never fails."""
        assert validators["matches"]("blue", True) is False


class TestSimpleString:
    """Test the simplestring validator."""

    @pytest.mark.parametrize("value", ["user_name", "user-1", "ABC"])
    def test_valid(self, value):
        """Test that alphanumerics, underscores and hyphens pass."""
        assert validators["simplestring"](value, True) is False

    @pytest.mark.parametrize("value", ["user name", "user@name", "naïve"])
    def test_invalid(self, value):
        """Test that spaces and special characters fail."""
        assert validators["simplestring"](value, True) == messages["simplestring"]
