"""Tests for the HMAC-SHA256 signer."""

import hashlib
import hmac

import pytest

from powgate.services.signature import SIGNATURE_LENGTH, HMACSHA256Signer


@pytest.fixture
def signer():
    return HMACSHA256Signer()


class TestHMACSHA256Signer:
    """Tests for sign/verify."""

    def test_sign_returns_32_bytes(self, signer):
        """Test signature length matches the payload layout."""
        assert len(signer.sign(b"data", b"supersecretkey", b"salt")) == SIGNATURE_LENGTH

    def test_sign_is_deterministic(self, signer):
        """Test identical inputs give identical signatures."""
        assert signer.sign(b"data", b"key", b"salt") == signer.sign(b"data", b"key", b"salt")

    def test_salt_is_fed_after_message(self, signer):
        """Test the salt is MAC'd as data appended to the message, not used as key."""
        expected = hmac.new(b"key", b"data" + b"salt", hashlib.sha256).digest()
        assert signer.sign(b"data", b"key", b"salt") == expected

    def test_verify_valid_signature(self, signer):
        """Test a freshly computed signature verifies."""
        signature = signer.sign(b"data", b"supersecretkey", b"salt")
        assert signer.verify(b"data", b"supersecretkey", b"salt", signature) is True

    @pytest.mark.parametrize(
        "data,key,salt",
        [
            (b"wrongdata", b"supersecretkey", b"salt"),
            (b"data", b"wrongkey", b"salt"),
            (b"data", b"supersecretkey", b"wrongsalt"),
        ],
    )
    def test_verify_rejects_changed_input(self, signer, data, key, salt):
        """Test changing data, key or salt invalidates the signature."""
        signature = signer.sign(b"data", b"supersecretkey", b"salt")
        assert signer.verify(data, key, salt, signature) is False

    def test_verify_rejects_truncated_signature(self, signer):
        """Test a short signature never verifies."""
        signature = signer.sign(b"data", b"key", b"salt")
        assert signer.verify(b"data", b"key", b"salt", signature[:16]) is False

    def test_any_key_length_accepted(self, signer):
        """Test empty and very long keys are both usable."""
        for key in (b"", b"\x00", b"k" * 200):
            signature = signer.sign(b"data", key, b"salt")
            assert signer.verify(b"data", key, b"salt", signature)
