"""Tests for case classification and conversion utilities."""

import pytest

from caselint.core.case_utils import (
    CaseKind,
    camel_to_snake,
    classify_case,
    is_camel_case,
    is_snake_case,
    snake_to_camel,
    suggest_camel_case,
    validate_mapping,
)


class TestIsCamelCase:
    """Tests for is_camel_case."""

    @pytest.mark.parametrize(
        "name",
        ["userId", "sessionId", "createdAt", "userName", "myVar", "abc", "a", "user123"],
    )
    def test_valid_camel_case(self, name: str) -> None:
        """Test accepting camelCase names."""
        assert is_camel_case(name) is True

    @pytest.mark.parametrize(
        "name",
        [
            "user_id",  # snake_case
            "UserId",  # PascalCase
            "USER_ID",  # SCREAMING_SNAKE_CASE
            "user-id",  # kebab-case
            "user id",  # contains space
            "1user",  # starts with number
            "",  # empty string
            "user$id",  # special char
        ],
    )
    def test_invalid_camel_case(self, name: str) -> None:
        """Test rejecting non-camelCase names."""
        assert is_camel_case(name) is False

    def test_non_ascii_rejected(self) -> None:
        """Test that Unicode letters and digits do not count."""
        assert is_camel_case("usérId") is False
        assert is_camel_case("user٣") is False

    def test_trailing_newline_rejected(self) -> None:
        """Test that a trailing newline is not ignored."""
        assert is_camel_case("userId\n") is False


class TestIsSnakeCase:
    """Tests for is_snake_case."""

    @pytest.mark.parametrize(
        "name",
        [
            "user_id",
            "session_id",
            "created_at",
            "user_name",
            "my_var",
            "abc",
            "a",
            "user_123",
            "user123",
        ],
    )
    def test_valid_snake_case(self, name: str) -> None:
        """Test accepting snake_case names."""
        assert is_snake_case(name) is True

    @pytest.mark.parametrize(
        "name",
        [
            "userId",
            "UserId",
            "USER_ID",
            "user-id",
            "user id",
            "1user",
            "",
            "user__id",
            "user_id_",
            "_user_id",
        ],
    )
    def test_invalid_snake_case(self, name: str) -> None:
        """Test rejecting non-snake_case names."""
        assert is_snake_case(name) is False

    def test_non_ascii_rejected(self) -> None:
        """Test that Unicode letters are rejected."""
        assert is_snake_case("usér_id") is False


class TestClassification:
    """Tests for the relationship between the two predicates."""

    @pytest.mark.parametrize("name", ["abc", "a", "user123", "x9y"])
    def test_lowercase_alnum_is_both(self, name: str) -> None:
        """Test lowercase alphanumeric names satisfy both conventions."""
        assert is_camel_case(name) and is_snake_case(name)

    @pytest.mark.parametrize("name", ["userId", "aB", "httpURL"])
    def test_uppercase_is_camel_only(self, name: str) -> None:
        """Test names with uppercase letters are never snake_case."""
        assert is_camel_case(name) and not is_snake_case(name)

    @pytest.mark.parametrize("name", ["user_id", "a_b", "user_123"])
    def test_underscore_is_snake_only(self, name: str) -> None:
        """Test names with underscores are never camelCase."""
        assert is_snake_case(name) and not is_camel_case(name)

    def test_classify_case(self) -> None:
        """Test CaseKind classification."""
        assert classify_case("userId") == CaseKind.CAMEL
        assert classify_case("user_id") == CaseKind.SNAKE
        assert classify_case("abc") == CaseKind.CAMEL
        assert classify_case("UserId") == CaseKind.NEITHER
        assert classify_case("USER_ID") == CaseKind.NEITHER
        assert classify_case("user-id") == CaseKind.NEITHER
        assert classify_case("") == CaseKind.NEITHER


class TestCamelToSnake:
    """Tests for camel_to_snake."""

    def test_simple_words(self) -> None:
        """Test converting simple camelCase names."""
        assert camel_to_snake("userId") == "user_id"
        assert camel_to_snake("sessionId") == "session_id"
        assert camel_to_snake("createdAt") == "created_at"
        assert camel_to_snake("userName") == "user_name"
        assert camel_to_snake("myVariable") == "my_variable"

    def test_acronyms(self) -> None:
        """Test consecutive uppercase letters collapse into one word."""
        assert camel_to_snake("userID") == "user_id"
        assert camel_to_snake("userIDToken") == "user_id_token"
        assert camel_to_snake("HTTPResponse") == "http_response"
        assert camel_to_snake("parseHTMLString") == "parse_html_string"

    def test_single_word(self) -> None:
        """Test single words pass through."""
        assert camel_to_snake("user") == "user"
        assert camel_to_snake("id") == "id"

    def test_digits(self) -> None:
        """Test digit to uppercase transitions."""
        assert camel_to_snake("user123Id") == "user123_id"
        assert camel_to_snake("version2Update") == "version2_update"

    def test_empty_string(self) -> None:
        """Test empty string maps to empty string."""
        assert camel_to_snake("") == ""

    def test_malformed_input_follows_same_rules(self) -> None:
        """Test that non-camelCase input is converted, not rejected."""
        assert camel_to_snake("UserId") == "user_id"
        assert camel_to_snake("user_Id") == "user_id"
        assert camel_to_snake("user-Name") == "user-name"


class TestSnakeToCamel:
    """Tests for snake_to_camel."""

    def test_simple_words(self) -> None:
        """Test converting simple snake_case names."""
        assert snake_to_camel("user_id") == "userId"
        assert snake_to_camel("session_id") == "sessionId"
        assert snake_to_camel("created_at") == "createdAt"
        assert snake_to_camel("user_name") == "userName"
        assert snake_to_camel("my_variable") == "myVariable"

    def test_single_word(self) -> None:
        """Test single words pass through."""
        assert snake_to_camel("user") == "user"
        assert snake_to_camel("id") == "id"

    def test_digits(self) -> None:
        """Test that underscores before digits are removed."""
        assert snake_to_camel("user_123_id") == "user123Id"
        assert snake_to_camel("version_2_update") == "version2Update"

    def test_uppercase_input_lowercased_first(self) -> None:
        """Test SCREAMING_SNAKE_CASE input."""
        assert snake_to_camel("USER_ID") == "userId"

    def test_empty_string(self) -> None:
        """Test empty string maps to empty string."""
        assert snake_to_camel("") == ""


class TestValidateMapping:
    """Tests for validate_mapping."""

    def test_correct_mappings(self) -> None:
        """Test canonical pairs validate."""
        assert validate_mapping("userId", "user_id") is True
        assert validate_mapping("sessionId", "session_id") is True
        assert validate_mapping("createdAt", "created_at") is True
        assert validate_mapping("userName", "user_name") is True

    def test_incorrect_mappings(self) -> None:
        """Test non-canonical pairs fail."""
        assert validate_mapping("userId", "userid") is False
        assert validate_mapping("userId", "user_identifier") is False
        assert validate_mapping("sessionId", "session") is False
        assert validate_mapping("createdAt", "created") is False

    def test_acronym_mappings(self) -> None:
        """Test acronym pairs validate."""
        assert validate_mapping("userIDToken", "user_id_token") is True
        assert validate_mapping("HTTPResponse", "http_response") is True


class TestRoundTrip:
    """Tests for conversion consistency."""

    @pytest.mark.parametrize(
        "name",
        ["userId", "sessionId", "createdAt", "userName", "myVariable", "user123Id"],
    )
    def test_camel_snake_camel(self, name: str) -> None:
        """Test camelCase survives a round trip."""
        assert snake_to_camel(camel_to_snake(name)) == name

    @pytest.mark.parametrize(
        "name", ["user_id", "session_id", "created_at", "user_name", "my_variable"]
    )
    def test_snake_camel_snake(self, name: str) -> None:
        """Test snake_case survives a round trip."""
        assert camel_to_snake(snake_to_camel(name)) == name

    def test_acronym_collapse_is_stable(self) -> None:
        """Test acronyms are lossy but stable after one conversion."""
        snake = camel_to_snake("userIDToken")
        camel = snake_to_camel(snake)
        assert camel == "userIdToken"
        assert camel_to_snake(camel) == snake


class TestSuggestCamelCase:
    """Tests for suggest_camel_case."""

    def test_snake_case_key(self) -> None:
        """Test snake_case keys are converted."""
        assert suggest_camel_case("user_id") == "userId"
        assert suggest_camel_case("USER_ID") == "userId"

    def test_pascal_case_key(self) -> None:
        """Test PascalCase keys get a lowercase first letter."""
        assert suggest_camel_case("EventName") == "eventName"

    def test_unfixable_key_echoed(self) -> None:
        """Test keys with symbols are returned unchanged."""
        assert suggest_camel_case("user-id") == "user-id"
        assert suggest_camel_case("1user") == "1user"
        assert suggest_camel_case("") == ""
