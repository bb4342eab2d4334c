# -*- coding: utf-8 -*-
"""Location: ./tests/unit/tagvalidator/validation/test_formats.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Madhav Kandukuri
"""

# Third-Party
import pytest

# First-Party
from tagvalidator.validation import formats
from tagvalidator.validation.formats import FormatCheckers, is_valid_email, is_valid_phone_number, is_valid_url


class TestEmail:
    @pytest.mark.parametrize("value", ["a@b.com", "gro@metro.in", "first.last+tag@mail.metro.org", "  padded@metro.in "])
    def test_valid(self, value):
        assert is_valid_email(value) is True

    @pytest.mark.parametrize("value", ["", "   ", "not-an-email", "a@", "@b.com", "a b@c.com", None, 42, ["a@b.com"]])
    def test_invalid(self, value):
        assert is_valid_email(value) is False


class TestPhoneNumber:
    @pytest.mark.parametrize("value", ["9876543210", "0123456789", 9876543210, " 9876543210 "])
    def test_valid(self, value):
        assert is_valid_phone_number(value) is True

    @pytest.mark.parametrize("value", ["98765", "98765432100", "+919876543210", "98765-43210", "abcdefghij", None, True, 9.876543210])
    def test_invalid(self, value):
        assert is_valid_phone_number(value) is False

    @pytest.mark.parametrize("value", ["٠١٢٣٤٥٦٧٨٩", "０１２３４５６７８９", "९८७६५४३२१०"])
    def test_non_ascii_digits_rejected(self, value):
        assert is_valid_phone_number(value) is False

    def test_digits_override(self):
        assert is_valid_phone_number("12345678", digits=8) is True
        assert is_valid_phone_number("9876543210", digits=8) is False

    def test_digits_from_settings(self, monkeypatch):
        monkeypatch.setattr(formats.settings, "phone_number_digits", 8)
        assert is_valid_phone_number("12345678") is True


class TestUrl:
    @pytest.mark.parametrize("value", ["https://support.metro.in", "http://example.com/path?q=1", "HTTPS://EXAMPLE.COM"])
    def test_valid(self, value):
        assert is_valid_url(value) is True

    @pytest.mark.parametrize("value", ["", "support page", "example.com", "https://", "ftp://example.com", "https://exa mple.com", None, 7])
    def test_invalid(self, value):
        assert is_valid_url(value) is False

    def test_schemes_override(self):
        assert is_valid_url("ftp://files.example.com", schemes=["FTP"]) is True

    def test_max_length(self, monkeypatch):
        monkeypatch.setattr(formats.settings, "max_url_length", 30)
        assert is_valid_url("https://example.com/" + "a" * 20) is False


class TestFormatCheckers:
    def test_default_predicates(self):
        checkers = FormatCheckers.default()
        assert checkers.is_valid_email is is_valid_email
        assert checkers.is_valid_phone_number is is_valid_phone_number
        assert checkers.is_valid_url is is_valid_url

    def test_override_one_predicate(self):
        checkers = FormatCheckers(is_valid_email=lambda value: value == "ok")
        assert checkers.is_valid_email("ok") is True
        assert checkers.is_valid_email("a@b.com") is False
        assert checkers.is_valid_url("https://example.com") is True

    def test_frozen(self):
        checkers = FormatCheckers()
        with pytest.raises(AttributeError):
            checkers.is_valid_url = lambda value: True
