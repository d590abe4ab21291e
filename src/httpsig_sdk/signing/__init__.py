"""
HTTP Signatures SDK - Request Signing Module

Signature string construction, signature parameter encoding and the signer
for keyId/headers/signature style HTTP signatures.
"""

from .types import (
    HttpHeaders,
    SignableRequest,
    SignableResponse,
    SignatureParameters,
    SignatureScheme,
    REQUEST_TARGET,
    DEFAULT_HEADERS,
)

from .canonical_message import (
    SignatureStringBuilder,
    build_signature_string,
    request_target_provider,
    request_target_not_permitted,
)

from .signature_params import (
    parse_signature_parameters,
    serialize_signature_parameters,
    has_signature_parameters,
    select_signature_scheme,
    extract_signature_parameters,
    check_key_id,
)

from .signer import (
    HttpSigner,
    new_signer,
    sign_request,
    sign_response,
)

from .utils import (
    format_http_date,
    normalize_header_name,
    request_target,
)

from .integration import (
    HttpSignatureAuth,
    sign_prepared_request,
    signable_request_from_prepared,
    create_signing_session,
)

# Public API exports
__all__ = [
    # Types
    'HttpHeaders',
    'SignableRequest',
    'SignableResponse',
    'SignatureParameters',
    'SignatureScheme',
    'REQUEST_TARGET',
    'DEFAULT_HEADERS',
    # Signature strings
    'SignatureStringBuilder',
    'build_signature_string',
    'request_target_provider',
    'request_target_not_permitted',
    # Signature parameters
    'parse_signature_parameters',
    'serialize_signature_parameters',
    'has_signature_parameters',
    'select_signature_scheme',
    'extract_signature_parameters',
    'check_key_id',
    # Signer
    'HttpSigner',
    'new_signer',
    'sign_request',
    'sign_response',
    # Utilities
    'format_http_date',
    'normalize_header_name',
    'request_target',
    # HTTP Integration
    'HttpSignatureAuth',
    'sign_prepared_request',
    'signable_request_from_prepared',
    'create_signing_session',
]
