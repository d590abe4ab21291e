"""
HTTP client integration for request signing

This module connects the signer to the requests library: an AuthBase that
signs every outgoing PreparedRequest, and helpers for signing a prepared
request directly.
"""

import logging
from typing import Any, Iterable, Optional, Sequence, Union
from urllib.parse import urlsplit

import requests
from requests.auth import AuthBase
from requests.models import PreparedRequest
from requests.structures import CaseInsensitiveDict

from ..crypto.algorithms import AlgorithmName, AlgorithmRegistry
from ..exceptions import SigningError
from .signature_params import check_key_id
from .signer import HttpSigner, new_signer
from .types import DATE_HEADER, HttpHeaders, SignableRequest, SignatureScheme
from .utils import format_http_date

logger = logging.getLogger(__name__)

HOST_HEADER = "host"


def signable_request_from_prepared(prepared_request: PreparedRequest) -> SignableRequest:
    """
    Convert a prepared request into a signable request.

    Args:
        prepared_request: Prepared request

    Returns:
        SignableRequest: Request sharing no state with the prepared request
    """
    return SignableRequest(
        method=prepared_request.method,
        url=prepared_request.url,
        headers=HttpHeaders(prepared_request.headers or {})
    )


def _apply_signature(
    signer: HttpSigner,
    prepared_request: PreparedRequest,
    key_id: str,
    private_key: Any,
    add_date: bool
) -> PreparedRequest:
    if prepared_request.headers is None:
        prepared_request.headers = CaseInsensitiveDict()

    scheme_header = signer.scheme.value
    if scheme_header in prepared_request.headers:
        raise SigningError(
            f"Prepared request already carries a {scheme_header} header",
            details={"header": scheme_header}
        )

    signable = signable_request_from_prepared(prepared_request)

    # Headers requests only adds at send time
    added = {}
    if add_date and DATE_HEADER in signer.headers and DATE_HEADER not in signable.headers:
        added['Date'] = format_http_date()
    if HOST_HEADER in signer.headers and HOST_HEADER not in signable.headers:
        added['Host'] = urlsplit(prepared_request.url).netloc.rpartition('@')[2]
    for name, value in added.items():
        signable.headers.add(name, value)

    signer.sign_request(private_key, key_id, signable)

    prepared_request.headers.update(added)
    prepared_request.headers[scheme_header] = signable.headers.get_all(scheme_header)[-1]
    return prepared_request


def sign_prepared_request(
    prepared_request: PreparedRequest,
    key_id: str,
    private_key: Any,
    algorithm: AlgorithmName,
    headers: Optional[Sequence[str]] = None,
    scheme: SignatureScheme = SignatureScheme.SIGNATURE,
    add_date: bool = True,
    registry: Optional[AlgorithmRegistry] = None
) -> PreparedRequest:
    """
    Sign a prepared request.

    Args:
        prepared_request: Prepared request to sign
        key_id: Key identifier
        private_key: Private key, or shared secret bytes for MAC algorithms
        algorithm: Algorithm name
        headers: Component identifiers to cover; defaults to ["date"]
        scheme: Header slot for the signature parameters
        add_date: Add a Date header when it is covered but missing
        registry: Algorithm registry (defaults to the built-in registry)

    Returns:
        PreparedRequest: The same request with the signature header added

    Raises:
        SigningError: If the request already carries the target header
    """
    signer = new_signer([algorithm], headers, scheme, registry)
    return _apply_signature(signer, prepared_request, key_id, private_key, add_date)


class HttpSignatureAuth(AuthBase):
    """
    requests authentication handler that signs every request

    Example:
        session.auth = HttpSignatureAuth("client-1", secret, ["hmac-sha256"],
                                         headers=["(request-target)", "host", "date"])
    """

    def __init__(
        self,
        key_id: str,
        private_key: Any,
        algorithms: Union[AlgorithmName, Iterable[AlgorithmName]],
        headers: Optional[Sequence[str]] = None,
        scheme: SignatureScheme = SignatureScheme.SIGNATURE,
        add_date: bool = True,
        registry: Optional[AlgorithmRegistry] = None
    ):
        """
        Initialize the authentication handler.

        Args:
            key_id: Key identifier
            private_key: Private key, or shared secret bytes for MAC algorithms
            algorithms: Algorithm name or names in order of preference
            headers: Component identifiers to cover; defaults to ["date"]
            scheme: Header slot for the signature parameters
            add_date: Add a Date header when it is covered but missing
            registry: Algorithm registry (defaults to the built-in registry)
        """
        if not key_id:
            raise ValueError("Key ID cannot be empty")
        check_key_id(key_id)
        if isinstance(algorithms, str):
            algorithms = [algorithms]

        self.key_id = key_id
        self.private_key = private_key
        self.add_date = add_date
        self.signer = new_signer(algorithms, headers, scheme, registry)
        logger.info(f"Configured request signing for key ID {key_id} using {self.signer.algorithm}")

    def __call__(self, r: PreparedRequest) -> PreparedRequest:
        _apply_signature(self.signer, r, self.key_id, self.private_key, self.add_date)
        logger.debug(f"Signed {r.method} request to {r.url}")
        return r


def create_signing_session(auth: HttpSignatureAuth, session: Optional[requests.Session] = None) -> requests.Session:
    """
    Create a requests session that signs every request.

    Args:
        auth: Signing authentication handler
        session: Optional existing session to configure

    Returns:
        requests.Session: Session with the handler installed
    """
    session = session or requests.Session()
    session.auth = auth
    return session
