import hashlib
import hmac
from typing import Protocol

SIGNATURE_LENGTH = 32


class Signer(Protocol):
    """Keyed MAC over a message with an auxiliary salt."""

    def sign(self, message: bytes, key: bytes, salt: bytes) -> bytes: ...

    def verify(self, message: bytes, key: bytes, salt: bytes, signature: bytes) -> bool: ...


class HMACSHA256Signer:
    """
    HMAC-SHA256 signer.

    The salt is fed into the MAC after the message, so it is part of the
    authenticated data rather than a key-derivation input.
    """

    def sign(self, message: bytes, key: bytes, salt: bytes) -> bytes:
        mac = hmac.new(key, digestmod=hashlib.sha256)
        mac.update(message)
        mac.update(salt)
        return mac.digest()

    def verify(self, message: bytes, key: bytes, salt: bytes, signature: bytes) -> bool:
        return hmac.compare_digest(self.sign(message, key, salt), signature)


default_signer = HMACSHA256Signer()
