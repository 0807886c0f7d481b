"""Tests for token payload validation."""

import sys

import pytest

from oauth.extraction import parse_expires_in, parse_token_payload
from oauth.models import TokenState

# CPython limits int() on long digit strings (3.11, and security backports)
INT_STR_LIMITED = hasattr(sys, "get_int_max_str_digits")


class TestParseExpiresIn:

    @pytest.mark.parametrize("value, expected", [
        (14400, 14400),
        (0, 0),
        ("14400", 14400),
        ("0", 0),
        (14400.0, 14400),
        (0.0, 0),
    ])
    def test_accepts_non_negative_whole_numbers(self, value, expected):
        result = parse_expires_in(value)
        assert result == expected
        assert type(result) is int

    @pytest.mark.parametrize("value", [
        -1, "-1", "14400.5", 3.5, -1.0, float("inf"), float("nan"),
        "", " 10", "10\n", "ten", None, True, False, [], "١٢",
    ])
    def test_rejects_everything_else(self, value):
        assert parse_expires_in(value) is None

    def test_oversized_digit_string_does_not_raise(self):
        result = parse_expires_in("9" * 5000)
        if INT_STR_LIMITED:
            assert result is None
        else:
            assert result == int("9" * 5000)


class TestParseTokenPayload:

    def test_string_expiry_scenario(self):
        payload = {
            "token_type": "bearer",
            "expires_in": "14400",
            "access_token": "abc",
            "refresh_token": "def",
            "scope": "read:vat",
        }
        result = parse_token_payload(payload, now=1_000_000)

        assert result.ok
        assert bool(result) is True
        assert result.error is None
        assert result.tokens == TokenState(
            access_token="abc",
            refresh_token="def",
            scope="read:vat",
            expires_epoch=1_014_400,
        )

    def test_fractional_now_is_truncated(self, token_payload):
        result = parse_token_payload(token_payload, now=1000.9)
        assert result.tokens.expires_epoch == 1000 + 14400

    def test_token_values_are_copied_verbatim(self, token_payload):
        token_payload["access_token"] = "  not validated at all  "
        token_payload["scope"] = "read:vat write:vat"
        result = parse_token_payload(token_payload, now=0)

        assert result.tokens.access_token == "  not validated at all  "
        assert result.tokens.scope == "read:vat write:vat"

    @pytest.mark.parametrize("token_type", ["Bearer", "BEARER", "mac", "", None])
    def test_token_type_must_be_lowercase_bearer(self, token_payload, token_type):
        token_payload["token_type"] = token_type
        result = parse_token_payload(token_payload)

        assert not result.ok
        assert result.tokens.is_empty
        assert "bearer" in result.error

    def test_missing_token_type(self, token_payload):
        del token_payload["token_type"]
        assert not parse_token_payload(token_payload).ok

    @pytest.mark.parametrize("expires_in", ["soon", -5, None, 3.5])
    def test_bad_expires_in(self, token_payload, expires_in):
        token_payload["expires_in"] = expires_in
        result = parse_token_payload(token_payload)

        assert not result.ok
        assert "expires_in" in result.error

    @pytest.mark.parametrize("payload", [None, [], "bearer", 42])
    def test_non_mapping_payload(self, payload):
        result = parse_token_payload(payload)

        assert not result.ok
        assert result.tokens.is_empty
