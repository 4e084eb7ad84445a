"""Unit tests for reversible password encoding."""

import binascii

import pytest

from food_delivery_service.security.password_encoding import decode_password, encode_password


@pytest.mark.unit
class TestPasswordEncoding:
    """Test suite for encode_password / decode_password."""

    def test_encode_produces_base64(self) -> None:
        """Test that encoding matches standard Base64 of the UTF-8 bytes."""
        assert encode_password("secret") == "c2VjcmV0"

    def test_encode_changes_the_value(self) -> None:
        """Test that the stored form differs from the plain text."""
        assert encode_password("password123") != "password123"

    @pytest.mark.parametrize(
        "password",
        ["", "a", "secret", "p@ss w0rd!", "ünïcødé-密码", "line\nbreak", "\ud800", "a\udfffb"],
    )
    def test_decode_reverses_encode(self, password: str) -> None:
        """Test that decode(encode(p)) == p, including the empty string."""
        assert decode_password(encode_password(password)) == password

    def test_empty_password_encodes_to_empty_string(self) -> None:
        """Test the empty-string edge case."""
        assert encode_password("") == ""
        assert decode_password("") == ""

    def test_decode_rejects_invalid_base64(self) -> None:
        """Test that malformed input raises instead of returning garbage."""
        with pytest.raises(binascii.Error):
            decode_password("not base64!")
