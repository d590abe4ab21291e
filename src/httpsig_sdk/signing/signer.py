"""
HTTP signature signer

The signer builds the signature string for a message, signs it with the
resolved algorithm and appends a signature-scheme header to the message. It
never replaces existing headers, so several signers can sign the same message.
"""

import base64
import logging
from typing import Any, Iterable, List, Optional, Sequence

from ..crypto.algorithms import (
    AlgorithmBinding,
    AlgorithmKind,
    AlgorithmName,
    AlgorithmRegistry,
    algorithm_name,
    default_registry,
)
from ..exceptions import HttpSigError, KeyTypeMismatchError, SigningError, UnknownAlgorithmError
from .canonical_message import (
    build_signature_string,
    covered_components,
    request_target_not_permitted,
    request_target_provider,
)
from .signature_params import check_key_id, serialize_signature_parameters
from .types import (
    HttpHeaders,
    RequestTargetProvider,
    SignableRequest,
    SignableResponse,
    SignatureScheme,
)

logger = logging.getLogger(__name__)


class HttpSigner:
    """
    Signer for one algorithm, header list and signature scheme

    Attributes:
        binding: Resolved algorithm binding
        headers: Lowercased component identifiers to cover
        scheme: Header slot the signature parameters are written to
    """

    def __init__(
        self,
        binding: AlgorithmBinding,
        headers: Optional[Sequence[str]] = None,
        scheme: SignatureScheme = SignatureScheme.SIGNATURE
    ):
        self.binding = binding
        self.headers: List[str] = covered_components(headers)
        self.scheme = SignatureScheme(scheme)

    @property
    def algorithm(self) -> str:
        return self.binding.canonical_name()

    def sign_request(self, private_key: Any, key_id: str, request: SignableRequest) -> None:
        """
        Sign a request and add the signature header to it.

        Args:
            private_key: Private key, or shared secret bytes for MAC algorithms
            key_id: Key identifier written to the keyId parameter
            request: Request to sign; its headers are mutated

        Raises:
            HttpSigError: If any step fails; the request is left unchanged
        """
        self._sign(private_key, key_id, request.headers, request_target_provider(request))
        logger.debug(f"Signed {request.method} request with key ID {key_id} using {self.algorithm}")

    def sign_response(self, private_key: Any, key_id: str, response: SignableResponse) -> None:
        """
        Sign a response and add the signature header to it.

        The (request-target) component is not permitted for responses.

        Args:
            private_key: Private key, or shared secret bytes for MAC algorithms
            key_id: Key identifier written to the keyId parameter
            response: Response to sign; its headers are mutated
        """
        self._sign(private_key, key_id, response.headers, request_target_not_permitted)
        logger.debug(f"Signed response with key ID {key_id} using {self.algorithm}")

    def _sign(
        self,
        private_key: Any,
        key_id: str,
        headers: HttpHeaders,
        request_target: RequestTargetProvider
    ) -> None:
        if not key_id:
            raise ValueError("Key ID cannot be empty")
        check_key_id(key_id)

        signature_string = build_signature_string(headers, self.headers, request_target)
        signature = self._sign_signature(private_key, signature_string.encode('utf-8'))
        encoded = base64.b64encode(signature).decode('ascii')

        value = serialize_signature_parameters(key_id, self.algorithm, self.headers, encoded)
        headers.add(self.scheme.value, value)

    def _sign_signature(self, private_key: Any, data: bytes) -> bytes:
        if self.binding.kind is AlgorithmKind.MAC and not isinstance(private_key, (bytes, bytearray)):
            raise KeyTypeMismatchError(
                "private key for MAC signing must be bytes",
                details={"algorithm": self.binding.name, "key_type": type(private_key).__name__}
            )
        try:
            return self.binding.capability.sign(data, private_key)
        except HttpSigError:
            raise
        except Exception as e:
            raise SigningError(
                f"Message signing failed: {e}",
                details={"algorithm": self.binding.name, "original_error": str(e)}
            ) from e


def new_signer(
    preferences: Iterable[AlgorithmName],
    headers: Optional[Sequence[str]] = None,
    scheme: SignatureScheme = SignatureScheme.SIGNATURE,
    registry: Optional[AlgorithmRegistry] = None
) -> HttpSigner:
    """
    Create a signer for the first supported algorithm in order of preference.

    Args:
        preferences: Algorithm names in order of preference
        headers: Component identifiers to cover; defaults to ["date"]
        scheme: Header slot for the signature parameters
        registry: Algorithm registry (defaults to the built-in registry)

    Returns:
        HttpSigner: Configured signer

    Raises:
        UnknownAlgorithmError: If no preference is supported
    """
    registry = registry or default_registry()
    names = [algorithm_name(p) for p in preferences]
    for name in names:
        if registry.is_supported(name):
            return HttpSigner(registry.resolve(name), headers, scheme)

    raise UnknownAlgorithmError(
        f"no cryptographic implementation available for algorithms {names}",
        details={"algorithms": names}
    )


def sign_request(
    request: SignableRequest,
    key_id: str,
    private_key: Any,
    algorithm: AlgorithmName,
    headers: Optional[Sequence[str]] = None,
    scheme: SignatureScheme = SignatureScheme.SIGNATURE,
    registry: Optional[AlgorithmRegistry] = None
) -> None:
    """
    Sign a request with the given key and algorithm.

    Args:
        request: Request to sign; a signature header is appended to it
        key_id: Key identifier
        private_key: Private key, or shared secret bytes for MAC algorithms
        algorithm: Algorithm name
        headers: Component identifiers to cover; defaults to ["date"]
        scheme: Header slot for the signature parameters
        registry: Algorithm registry (defaults to the built-in registry)
    """
    binding = (registry or default_registry()).resolve(algorithm)
    HttpSigner(binding, headers, scheme).sign_request(private_key, key_id, request)


def sign_response(
    response: SignableResponse,
    key_id: str,
    private_key: Any,
    algorithm: AlgorithmName,
    headers: Optional[Sequence[str]] = None,
    scheme: SignatureScheme = SignatureScheme.SIGNATURE,
    registry: Optional[AlgorithmRegistry] = None
) -> None:
    """
    Sign a response with the given key and algorithm.

    Args:
        response: Response to sign; a signature header is appended to it
        key_id: Key identifier
        private_key: Private key, or shared secret bytes for MAC algorithms
        algorithm: Algorithm name
        headers: Component identifiers to cover; defaults to ["date"]
        scheme: Header slot for the signature parameters
        registry: Algorithm registry (defaults to the built-in registry)
    """
    binding = (registry or default_registry()).resolve(algorithm)
    HttpSigner(binding, headers, scheme).sign_response(private_key, key_id, response)
