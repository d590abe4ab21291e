"""
Asymmetric signature capabilities backed by the cryptography package

Each capability signs and verifies raw bytes for one algorithm name. Key shape
checks live here rather than in the signer so that every algorithm can accept
the key representations that make sense for it.
"""

from typing import Any, Type

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from ..exceptions import KeyTypeMismatchError, VerificationFailedError

# Constants for raw Ed25519 keys
ED25519_PRIVATE_KEY_LENGTH = 32
ED25519_PUBLIC_KEY_LENGTH = 32


class CryptographySigner:
    """
    Base class for asymmetric signer capabilities

    Subclasses convert the caller's key into a cryptography key object and
    perform the primitive operation. Invalid signatures are reported as
    VerificationFailedError.
    """

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name='{self.name}')"

    def canonical_name(self) -> str:
        """Name emitted in the deprecated algorithm parameter"""
        return self.name

    def sign(self, data: bytes, private_key: Any) -> bytes:
        """
        Sign data with a private key.

        Args:
            data: Bytes to sign
            private_key: Private key in a shape accepted by this algorithm

        Returns:
            bytes: Raw signature

        Raises:
            KeyTypeMismatchError: If the key has the wrong shape
        """
        key = self._load_private_key(private_key)
        return self._sign(key, data)

    def verify(self, public_key: Any, data: bytes, signature: bytes) -> None:
        """
        Verify a signature over data.

        Args:
            public_key: Public key in a shape accepted by this algorithm
            data: Bytes that were signed
            signature: Raw signature bytes

        Raises:
            KeyTypeMismatchError: If the key has the wrong shape
            VerificationFailedError: If the signature does not verify
        """
        key = self._load_public_key(public_key)
        try:
            self._verify(key, data, signature)
        except InvalidSignature:
            raise VerificationFailedError(
                f"{self.name} signature verification failed",
                details={"algorithm": self.name}
            )

    def _key_error(self, kind: str, key: Any) -> KeyTypeMismatchError:
        return KeyTypeMismatchError(
            f"{kind} key for {self.name} has unsupported type {type(key).__name__}",
            details={"algorithm": self.name, "key_type": type(key).__name__}
        )

    def _load_private_key(self, private_key: Any):
        raise NotImplementedError

    def _load_public_key(self, public_key: Any):
        raise NotImplementedError

    def _sign(self, key, data: bytes) -> bytes:
        raise NotImplementedError

    def _verify(self, key, data: bytes, signature: bytes) -> None:
        raise NotImplementedError


class RsaSigner(CryptographySigner):
    """RSASSA-PKCS1-v1_5 with a fixed hash"""

    def __init__(self, name: str, hash_type: Type[hashes.HashAlgorithm]):
        super().__init__(name)
        self.hash_type = hash_type

    def _load_private_key(self, private_key: Any) -> rsa.RSAPrivateKey:
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise self._key_error("Private", private_key)
        return private_key

    def _load_public_key(self, public_key: Any) -> rsa.RSAPublicKey:
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise self._key_error("Public", public_key)
        return public_key

    def _sign(self, key: rsa.RSAPrivateKey, data: bytes) -> bytes:
        return key.sign(data, padding.PKCS1v15(), self.hash_type())

    def _verify(self, key: rsa.RSAPublicKey, data: bytes, signature: bytes) -> None:
        key.verify(signature, data, padding.PKCS1v15(), self.hash_type())


class EcdsaSigner(CryptographySigner):
    """ECDSA with DER-encoded signatures and a fixed hash"""

    def __init__(self, name: str, hash_type: Type[hashes.HashAlgorithm]):
        super().__init__(name)
        self.hash_type = hash_type

    def _load_private_key(self, private_key: Any) -> ec.EllipticCurvePrivateKey:
        if not isinstance(private_key, ec.EllipticCurvePrivateKey):
            raise self._key_error("Private", private_key)
        return private_key

    def _load_public_key(self, public_key: Any) -> ec.EllipticCurvePublicKey:
        if not isinstance(public_key, ec.EllipticCurvePublicKey):
            raise self._key_error("Public", public_key)
        return public_key

    def _sign(self, key: ec.EllipticCurvePrivateKey, data: bytes) -> bytes:
        return key.sign(data, ec.ECDSA(self.hash_type()))

    def _verify(self, key: ec.EllipticCurvePublicKey, data: bytes, signature: bytes) -> None:
        key.verify(signature, data, ec.ECDSA(self.hash_type()))


class Ed25519Signer(CryptographySigner):
    """
    Ed25519 signatures

    Accepts cryptography key objects or raw 32-byte keys.
    """

    def _load_private_key(self, private_key: Any) -> Ed25519PrivateKey:
        if isinstance(private_key, Ed25519PrivateKey):
            return private_key
        if isinstance(private_key, (bytes, bytearray)):
            if len(private_key) != ED25519_PRIVATE_KEY_LENGTH:
                raise KeyTypeMismatchError(
                    f"Ed25519 private key must be exactly {ED25519_PRIVATE_KEY_LENGTH} bytes",
                    details={"algorithm": self.name, "key_length": len(private_key)}
                )
            return Ed25519PrivateKey.from_private_bytes(bytes(private_key))
        raise self._key_error("Private", private_key)

    def _load_public_key(self, public_key: Any) -> Ed25519PublicKey:
        if isinstance(public_key, Ed25519PublicKey):
            return public_key
        if isinstance(public_key, (bytes, bytearray)):
            if len(public_key) != ED25519_PUBLIC_KEY_LENGTH:
                raise KeyTypeMismatchError(
                    f"Ed25519 public key must be exactly {ED25519_PUBLIC_KEY_LENGTH} bytes",
                    details={"algorithm": self.name, "key_length": len(public_key)}
                )
            return Ed25519PublicKey.from_public_bytes(bytes(public_key))
        raise self._key_error("Public", public_key)

    def _sign(self, key: Ed25519PrivateKey, data: bytes) -> bytes:
        return key.sign(data)

    def _verify(self, key: Ed25519PublicKey, data: bytes, signature: bytes) -> None:
        key.verify(signature, data)
