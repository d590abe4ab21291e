"""
Test suite for the algorithm registry and cryptographic capabilities
"""

import base64

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from httpsig_sdk.crypto import (
    Algorithm,
    AlgorithmKind,
    AlgorithmRegistry,
    AsymmetricSigner,
    Ed25519Signer,
    HmacProvider,
    MacProvider,
    RsaSigner,
    create_default_registry,
    default_registry,
)
from httpsig_sdk.exceptions import (
    HttpSigErrorCodes,
    KeyTypeMismatchError,
    UnknownAlgorithmError,
    VerificationFailedError,
)


class TestRegistry:
    """Test algorithm registration and resolution"""

    def test_every_builtin_is_supported(self):
        """Test the default registry knows every built-in name"""
        registry = create_default_registry()

        for algorithm in Algorithm:
            assert registry.is_supported(algorithm)
            assert registry.is_supported(algorithm.value)

    def test_kinds(self):
        """Test asymmetric and MAC names resolve to the right table"""
        registry = default_registry()

        assert registry.resolve("rsa-sha256").kind is AlgorithmKind.ASYMMETRIC
        assert registry.resolve("ecdsa-sha384").kind is AlgorithmKind.ASYMMETRIC
        assert registry.resolve(Algorithm.ED25519).kind is AlgorithmKind.ASYMMETRIC
        assert registry.resolve("hmac-sha512-256").is_mac
        assert registry.resolve("hmac-sha3-256").is_mac

    def test_canonical_name(self):
        """Test bindings report the registered name"""
        binding = default_registry().resolve(Algorithm.HMAC_SHA256)

        assert binding.name == "hmac-sha256"
        assert binding.canonical_name() == "hmac-sha256"

    def test_unknown_algorithm(self):
        """Test unknown names fail with a descriptive error"""
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            default_registry().resolve("rot13")

        assert "no cryptographic implementation available for algorithm 'rot13'" in str(exc_info.value)
        assert exc_info.value.error_code == HttpSigErrorCodes.UNKNOWN_ALGORITHM

    def test_names_are_case_sensitive(self):
        """Test names are matched exactly"""
        assert not default_registry().is_supported("RSA-SHA256")

    def test_asymmetric_preferred(self):
        """Test a name in both tables resolves to the asymmetric signer"""
        registry = AlgorithmRegistry(
            signers=[Ed25519Signer("shared")],
            macs=[HmacProvider("shared", hashes.SHA256)]
        )

        binding = registry.resolve("shared")
        assert binding.kind is AlgorithmKind.ASYMMETRIC
        assert registry.list_algorithms() == ["shared", "shared"]

    def test_duplicate_registration(self):
        """Test a name cannot be registered twice in one table"""
        registry = AlgorithmRegistry(macs=[HmacProvider("hmac-sha256", hashes.SHA256)])

        with pytest.raises(ValueError):
            registry.register_mac(HmacProvider("hmac-sha256", hashes.SHA512))

    def test_capabilities_satisfy_protocols(self):
        """Test built-in capabilities match the capability protocols"""
        registry = default_registry()

        assert isinstance(registry.resolve_signer("rsa-sha256"), AsymmetricSigner)
        assert isinstance(registry.resolve_mac("hmac-sha256"), MacProvider)
        assert registry.resolve_mac("rsa-sha256") is None


class TestHmac:
    """Test the HMAC capability"""

    def test_known_value(self):
        """Test HMAC-SHA256 against a fixed digest"""
        mac = HmacProvider("hmac-sha256", hashes.SHA256)
        digest = mac.sign(b"(request-target): get /foo\ndate: Tue, 07 Jun 2014 20:51:35 GMT", b"secret")

        assert base64.b64encode(digest).decode() == "IyeADZmTZ27HI2ZWMgQbfjklSBsZE6eZyB8JCJAzAHk="

    def test_verify(self):
        """Test matching and non-matching MACs"""
        mac = HmacProvider("hmac-sha512", hashes.SHA512)
        digest = mac.sign(b"data", b"secret")

        assert mac.verify(b"data", digest, b"secret")
        assert not mac.verify(b"data", digest, b"other")
        assert not mac.verify(b"data", digest[:-1], b"secret")

    def test_secret_must_be_bytes(self):
        """Test non-bytes secrets are rejected"""
        mac = HmacProvider("hmac-sha256", hashes.SHA256)

        with pytest.raises(KeyTypeMismatchError):
            mac.sign(b"data", "secret")


class TestAsymmetric:
    """Test the asymmetric capabilities"""

    def test_rsa(self, rsa_private_key):
        """Test RSA sign and verify"""
        signer = default_registry().resolve_signer("rsa-sha512")
        signature = signer.sign(b"data", rsa_private_key)

        signer.verify(rsa_private_key.public_key(), b"data", signature)
        with pytest.raises(VerificationFailedError):
            signer.verify(rsa_private_key.public_key(), b"other", signature)

    def test_ecdsa(self, ec_private_key):
        """Test ECDSA sign and verify"""
        signer = default_registry().resolve_signer("ecdsa-sha256")
        signature = signer.sign(b"data", ec_private_key)

        signer.verify(ec_private_key.public_key(), b"data", signature)
        with pytest.raises(VerificationFailedError):
            signer.verify(ec_private_key.public_key(), b"other", signature)

    def test_ed25519_raw_keys(self):
        """Test Ed25519 accepts raw 32-byte keys"""
        signer = default_registry().resolve_signer("ed25519")
        private_bytes = bytes(range(32))
        signature = signer.sign(b"data", private_bytes)
        public_bytes = Ed25519PrivateKey.from_private_bytes(private_bytes).public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw
        )
        signer.verify(public_bytes, b"data", signature)

    def test_ed25519_wrong_length(self):
        """Test raw Ed25519 keys must be 32 bytes"""
        signer = default_registry().resolve_signer("ed25519")

        with pytest.raises(KeyTypeMismatchError):
            signer.sign(b"data", b"short")

    def test_wrong_key_type(self, ec_private_key, rsa_private_key):
        """Test keys of the wrong family are rejected"""
        rsa_signer = default_registry().resolve_signer("rsa-sha256")

        with pytest.raises(KeyTypeMismatchError):
            rsa_signer.sign(b"data", ec_private_key)
        with pytest.raises(KeyTypeMismatchError):
            rsa_signer.verify(rsa_private_key, b"data", b"sig")

    def test_rsa_signer_repr(self):
        """Test signers render their name"""
        assert repr(RsaSigner("rsa-sha256", hashes.SHA256)) == "RsaSigner(name='rsa-sha256')"
