"""
Keyed-MAC capabilities backed by the cryptography package
"""

from typing import Any, Type

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from ..exceptions import KeyTypeMismatchError


class HmacProvider:
    """HMAC with a fixed hash over a shared secret"""

    def __init__(self, name: str, hash_type: Type[hashes.HashAlgorithm]):
        self.name = name
        self.hash_type = hash_type

    def __repr__(self) -> str:
        return f"HmacProvider(name='{self.name}')"

    def canonical_name(self) -> str:
        """Name emitted in the deprecated algorithm parameter"""
        return self.name

    def sign(self, data: bytes, secret: Any) -> bytes:
        """
        Compute the MAC of data.

        Args:
            data: Bytes to authenticate
            secret: Shared secret bytes

        Returns:
            bytes: MAC value
        """
        h = self._new(secret)
        h.update(data)
        return h.finalize()

    def verify(self, data: bytes, candidate: bytes, secret: Any) -> bool:
        """
        Check a candidate MAC against data.

        The comparison is constant-time.

        Returns:
            bool: True if the candidate matches
        """
        h = self._new(secret)
        h.update(data)
        try:
            h.verify(candidate)
        except InvalidSignature:
            return False
        return True

    def _new(self, secret: Any) -> hmac.HMAC:
        if not isinstance(secret, (bytes, bytearray)):
            raise KeyTypeMismatchError(
                f"Secret for {self.name} must be bytes, got {type(secret).__name__}",
                details={"algorithm": self.name, "key_type": type(secret).__name__}
            )
        return hmac.HMAC(bytes(secret), self.hash_type())
