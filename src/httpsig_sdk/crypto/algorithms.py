"""
Algorithm registry for HTTP signatures

Maps a textual algorithm name to exactly one capability: an asymmetric signer
or a keyed MAC. Resolution always tries the asymmetric table before the MAC
table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Protocol, Union, runtime_checkable

from cryptography.hazmat.primitives import hashes

from ..exceptions import UnknownAlgorithmError
from .asymmetric import EcdsaSigner, Ed25519Signer, RsaSigner
from .mac import HmacProvider


class Algorithm(str, Enum):
    """Built-in algorithm names"""
    RSA_SHA1 = "rsa-sha1"
    RSA_SHA224 = "rsa-sha224"
    RSA_SHA256 = "rsa-sha256"
    RSA_SHA384 = "rsa-sha384"
    RSA_SHA512 = "rsa-sha512"
    ECDSA_SHA224 = "ecdsa-sha224"
    ECDSA_SHA256 = "ecdsa-sha256"
    ECDSA_SHA384 = "ecdsa-sha384"
    ECDSA_SHA512 = "ecdsa-sha512"
    ED25519 = "ed25519"
    HMAC_SHA1 = "hmac-sha1"
    HMAC_SHA224 = "hmac-sha224"
    HMAC_SHA256 = "hmac-sha256"
    HMAC_SHA384 = "hmac-sha384"
    HMAC_SHA512 = "hmac-sha512"
    HMAC_SHA512_224 = "hmac-sha512-224"
    HMAC_SHA512_256 = "hmac-sha512-256"
    HMAC_SHA3_224 = "hmac-sha3-224"
    HMAC_SHA3_256 = "hmac-sha3-256"
    HMAC_SHA3_384 = "hmac-sha3-384"
    HMAC_SHA3_512 = "hmac-sha3-512"


class AlgorithmKind(str, Enum):
    """Capability kinds an algorithm name can resolve to"""
    ASYMMETRIC = "asymmetric"
    MAC = "mac"


@runtime_checkable
class AsymmetricSigner(Protocol):
    """Protocol for asymmetric signature capabilities"""

    name: str

    def canonical_name(self) -> str:
        ...

    def sign(self, data: bytes, private_key: Any) -> bytes:
        ...

    def verify(self, public_key: Any, data: bytes, signature: bytes) -> None:
        ...


@runtime_checkable
class MacProvider(Protocol):
    """Protocol for keyed-MAC capabilities"""

    name: str

    def canonical_name(self) -> str:
        ...

    def sign(self, data: bytes, secret: Any) -> bytes:
        ...

    def verify(self, data: bytes, candidate: bytes, secret: Any) -> bool:
        ...


AlgorithmName = Union[Algorithm, str]


def algorithm_name(algorithm: AlgorithmName) -> str:
    """Return the plain string name of an algorithm"""
    if isinstance(algorithm, Algorithm):
        return algorithm.value
    return str(algorithm)


@dataclass(frozen=True)
class AlgorithmBinding:
    """
    Pairing of an algorithm name with its capability

    Attributes:
        name: Algorithm name as requested
        kind: Which capability table the name resolved in
        capability: The signer or MAC provider
    """
    name: str
    kind: AlgorithmKind
    capability: Any

    @property
    def is_mac(self) -> bool:
        return self.kind is AlgorithmKind.MAC

    def canonical_name(self) -> str:
        return self.capability.canonical_name()


class AlgorithmRegistry:
    """
    Registry of asymmetric and MAC capabilities keyed by algorithm name
    """

    def __init__(
        self,
        signers: Optional[Iterable[AsymmetricSigner]] = None,
        macs: Optional[Iterable[MacProvider]] = None
    ):
        self._signers: Dict[str, AsymmetricSigner] = {}
        self._macs: Dict[str, MacProvider] = {}
        for signer in signers or ():
            self.register_signer(signer)
        for mac in macs or ():
            self.register_mac(mac)

    def register_signer(self, signer: AsymmetricSigner) -> None:
        """
        Register an asymmetric signer under its name.

        Raises:
            ValueError: If the name is already registered
        """
        if signer.name in self._signers:
            raise ValueError(f"Asymmetric algorithm already registered: {signer.name}")
        self._signers[signer.name] = signer

    def register_mac(self, mac: MacProvider) -> None:
        """
        Register a MAC provider under its name.

        Raises:
            ValueError: If the name is already registered
        """
        if mac.name in self._macs:
            raise ValueError(f"MAC algorithm already registered: {mac.name}")
        self._macs[mac.name] = mac

    def resolve_signer(self, name: AlgorithmName) -> Optional[AsymmetricSigner]:
        return self._signers.get(algorithm_name(name))

    def resolve_mac(self, name: AlgorithmName) -> Optional[MacProvider]:
        return self._macs.get(algorithm_name(name))

    def resolve(self, name: AlgorithmName) -> AlgorithmBinding:
        """
        Resolve an algorithm name, trying asymmetric signers before MACs.

        Args:
            name: Algorithm name

        Returns:
            AlgorithmBinding: The resolved binding

        Raises:
            UnknownAlgorithmError: If neither table knows the name
        """
        plain = algorithm_name(name)
        signer = self.resolve_signer(plain)
        if signer is not None:
            return AlgorithmBinding(plain, AlgorithmKind.ASYMMETRIC, signer)
        mac = self.resolve_mac(plain)
        if mac is not None:
            return AlgorithmBinding(plain, AlgorithmKind.MAC, mac)
        raise UnknownAlgorithmError(
            f"no cryptographic implementation available for algorithm {plain!r}",
            details={"algorithm": plain}
        )

    def is_supported(self, name: AlgorithmName) -> bool:
        plain = algorithm_name(name)
        return plain in self._signers or plain in self._macs

    def list_algorithms(self) -> List[str]:
        """List registered algorithm names, asymmetric first"""
        return list(self._signers) + list(self._macs)


def create_default_registry() -> AlgorithmRegistry:
    """
    Create a registry populated with every built-in algorithm.

    Returns:
        AlgorithmRegistry: New registry instance
    """
    signers = [
        RsaSigner(Algorithm.RSA_SHA1.value, hashes.SHA1),
        RsaSigner(Algorithm.RSA_SHA224.value, hashes.SHA224),
        RsaSigner(Algorithm.RSA_SHA256.value, hashes.SHA256),
        RsaSigner(Algorithm.RSA_SHA384.value, hashes.SHA384),
        RsaSigner(Algorithm.RSA_SHA512.value, hashes.SHA512),
        EcdsaSigner(Algorithm.ECDSA_SHA224.value, hashes.SHA224),
        EcdsaSigner(Algorithm.ECDSA_SHA256.value, hashes.SHA256),
        EcdsaSigner(Algorithm.ECDSA_SHA384.value, hashes.SHA384),
        EcdsaSigner(Algorithm.ECDSA_SHA512.value, hashes.SHA512),
        Ed25519Signer(Algorithm.ED25519.value),
    ]
    macs = [
        HmacProvider(Algorithm.HMAC_SHA1.value, hashes.SHA1),
        HmacProvider(Algorithm.HMAC_SHA224.value, hashes.SHA224),
        HmacProvider(Algorithm.HMAC_SHA256.value, hashes.SHA256),
        HmacProvider(Algorithm.HMAC_SHA384.value, hashes.SHA384),
        HmacProvider(Algorithm.HMAC_SHA512.value, hashes.SHA512),
        HmacProvider(Algorithm.HMAC_SHA512_224.value, hashes.SHA512_224),
        HmacProvider(Algorithm.HMAC_SHA512_256.value, hashes.SHA512_256),
        HmacProvider(Algorithm.HMAC_SHA3_224.value, hashes.SHA3_224),
        HmacProvider(Algorithm.HMAC_SHA3_256.value, hashes.SHA3_256),
        HmacProvider(Algorithm.HMAC_SHA3_384.value, hashes.SHA3_384),
        HmacProvider(Algorithm.HMAC_SHA3_512.value, hashes.SHA3_512),
    ]
    return AlgorithmRegistry(signers=signers, macs=macs)


_default_registry: Optional[AlgorithmRegistry] = None


def default_registry() -> AlgorithmRegistry:
    """Get the shared registry of built-in algorithms"""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry
