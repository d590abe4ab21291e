"""
HTTP signature verifier

A verifier is built from a message's headers. Construction locates and parses
the signature parameters, so the caller can read the key ID and look up the
matching key before calling verify().
"""

import base64
import binascii
import logging
from typing import Any, List, Optional

from ..crypto.algorithms import (
    AlgorithmKind,
    AlgorithmName,
    AlgorithmRegistry,
    default_registry,
)
from ..exceptions import KeyTypeMismatchError, SignatureDecodeError, SignatureMismatchError
from ..signing.canonical_message import (
    build_signature_string,
    request_target_not_permitted,
    request_target_provider,
)
from ..signing.signature_params import extract_signature_parameters
from ..signing.types import (
    HttpHeaders,
    SignableRequest,
    SignableResponse,
    SignatureScheme,
    SignatureStringFunction,
)

logger = logging.getLogger(__name__)


class Verifier:
    """
    Verifier for the signature carried by one message

    Attributes:
        headers: Message headers
        parameters: Parsed signature parameters
    """

    def __init__(
        self,
        headers: HttpHeaders,
        signature_string_fn: SignatureStringFunction,
        registry: Optional[AlgorithmRegistry] = None
    ):
        """
        Initialize the verifier.

        Args:
            headers: Message headers carrying the signature
            signature_string_fn: Rebuilds the signature string for a component list
            registry: Algorithm registry (defaults to the built-in registry)

        Raises:
            SignatureSchemeError: If the signature header cannot be located
            SignatureParameterError: If the signature parameters are invalid
        """
        self.headers = headers
        self.registry = registry or default_registry()
        self._signature_string_fn = signature_string_fn
        self._scheme, self.parameters = extract_signature_parameters(headers)

    @property
    def key_id(self) -> str:
        return self.parameters.key_id

    @property
    def signed_headers(self) -> List[str]:
        return list(self.parameters.headers)

    @property
    def scheme(self) -> SignatureScheme:
        return self._scheme

    def verify(self, public_key: Any, algorithm: AlgorithmName) -> None:
        """
        Verify the signature with a key and algorithm chosen by the caller.

        The deprecated algorithm parameter in the header is not consulted.

        Args:
            public_key: Public key, or shared secret bytes for MAC algorithms
            algorithm: Algorithm name

        Raises:
            UnknownAlgorithmError: If the algorithm is not registered
            KeyTypeMismatchError: If the key has the wrong shape
            MissingSignedHeaderError: If a signed header is absent
            SignatureDecodeError: If the signature is not valid base64
            SignatureMismatchError: If a MAC signature does not match
            VerificationFailedError: If an asymmetric signature does not verify
        """
        binding = self.registry.resolve(algorithm)
        if binding.kind is AlgorithmKind.MAC:
            self._mac_verify(binding.capability, public_key)
        else:
            self._asymmetric_verify(binding.capability, public_key)
        logger.debug(f"Verified signature for key ID {self.key_id} using {binding.name}")

    def _mac_verify(self, mac, secret: Any) -> None:
        if not isinstance(secret, (bytes, bytearray)):
            raise KeyTypeMismatchError(
                "public key for MAC verifying must be bytes",
                details={"algorithm": mac.name, "key_type": type(secret).__name__}
            )
        signature_string = self._signature_string()
        actual = self._decode_signature()
        if not mac.verify(signature_string, actual, secret):
            logger.warning(f"Invalid MAC signature for key ID {self.key_id}")
            raise SignatureMismatchError(
                "invalid http signature",
                details={"key_id": self.key_id, "algorithm": mac.name}
            )

    def _asymmetric_verify(self, signer, public_key: Any) -> None:
        signature_string = self._signature_string()
        signature = self._decode_signature()
        signer.verify(public_key, signature_string, signature)

    def _signature_string(self) -> bytes:
        return self._signature_string_fn(self.headers, self.parameters.headers).encode('utf-8')

    def _decode_signature(self) -> bytes:
        try:
            return base64.b64decode(self.parameters.signature, validate=True)
        except (binascii.Error, ValueError) as e:
            raise SignatureDecodeError(
                f"signature is not valid base64: {e}",
                details={"key_id": self.key_id}
            ) from e


def new_verifier(request: SignableRequest, registry: Optional[AlgorithmRegistry] = None) -> Verifier:
    """
    Create a verifier for a signed request.

    Args:
        request: Signed request
        registry: Algorithm registry (defaults to the built-in registry)

    Returns:
        Verifier: Verifier with (request-target) bound to the request line
    """
    target = request_target_provider(request)

    def signature_string(headers: HttpHeaders, components: List[str]) -> str:
        return build_signature_string(headers, components, target)

    return Verifier(request.headers, signature_string, registry)


def new_response_verifier(response: SignableResponse, registry: Optional[AlgorithmRegistry] = None) -> Verifier:
    """
    Create a verifier for a signed response.

    Args:
        response: Signed response
        registry: Algorithm registry (defaults to the built-in registry)

    Returns:
        Verifier: Verifier that refuses (request-target)
    """
    def signature_string(headers: HttpHeaders, components: List[str]) -> str:
        return build_signature_string(headers, components, request_target_not_permitted)

    return Verifier(response.headers, signature_string, registry)


def verify_request(
    request: SignableRequest,
    public_key: Any,
    algorithm: AlgorithmName,
    registry: Optional[AlgorithmRegistry] = None
) -> str:
    """
    Verify a signed request.

    Args:
        request: Signed request
        public_key: Public key, or shared secret bytes for MAC algorithms
        algorithm: Algorithm name
        registry: Algorithm registry (defaults to the built-in registry)

    Returns:
        str: Key ID of the verified signature
    """
    verifier = new_verifier(request, registry)
    verifier.verify(public_key, algorithm)
    return verifier.key_id


def verify_response(
    response: SignableResponse,
    public_key: Any,
    algorithm: AlgorithmName,
    registry: Optional[AlgorithmRegistry] = None
) -> str:
    """
    Verify a signed response.

    Returns:
        str: Key ID of the verified signature
    """
    verifier = new_response_verifier(response, registry)
    verifier.verify(public_key, algorithm)
    return verifier.key_id
