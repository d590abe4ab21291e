"""
HTTP Signatures SDK
Signing and verification of HTTP messages with keyId/headers/signature parameters
"""

from .version import __version__
from .crypto import (
    Algorithm,
    AlgorithmKind,
    AlgorithmBinding,
    AlgorithmRegistry,
    AsymmetricSigner,
    MacProvider,
    create_default_registry,
    default_registry,
)
from .exceptions import (
    HttpSigError,
    HttpSigErrorCodes,
    SignatureSchemeError,
    SchemeAmbiguousError,
    SchemeMissingError,
    SignatureParameterError,
    MalformedParameterError,
    MissingParameterError,
    UnknownAlgorithmError,
    KeyTypeMismatchError,
    CanonicalizationError,
    MissingSignedHeaderError,
    RequestTargetNotPermittedError,
    SigningError,
    SignatureDecodeError,
    VerificationError,
    SignatureMismatchError,
    VerificationFailedError,
    ConfigError,
)
from .signing import (
    HttpHeaders,
    SignableRequest,
    SignableResponse,
    SignatureParameters,
    SignatureScheme,
    REQUEST_TARGET,
    build_signature_string,
    parse_signature_parameters,
    serialize_signature_parameters,
    HttpSigner,
    new_signer,
    sign_request,
    sign_response,
    HttpSignatureAuth,
    sign_prepared_request,
)
from .verification import (
    Verifier,
    new_verifier,
    new_response_verifier,
    verify_request,
    verify_response,
    verifier_from_prepared_request,
    verifier_from_response,
)
from .config import HttpSigConfig

__all__ = [
    '__version__',
    # Algorithms
    'Algorithm',
    'AlgorithmKind',
    'AlgorithmBinding',
    'AlgorithmRegistry',
    'AsymmetricSigner',
    'MacProvider',
    'create_default_registry',
    'default_registry',
    # Exceptions
    'HttpSigError',
    'HttpSigErrorCodes',
    'SignatureSchemeError',
    'SchemeAmbiguousError',
    'SchemeMissingError',
    'SignatureParameterError',
    'MalformedParameterError',
    'MissingParameterError',
    'UnknownAlgorithmError',
    'KeyTypeMismatchError',
    'CanonicalizationError',
    'MissingSignedHeaderError',
    'RequestTargetNotPermittedError',
    'SigningError',
    'SignatureDecodeError',
    'VerificationError',
    'SignatureMismatchError',
    'VerificationFailedError',
    'ConfigError',
    # Signing
    'HttpHeaders',
    'SignableRequest',
    'SignableResponse',
    'SignatureParameters',
    'SignatureScheme',
    'REQUEST_TARGET',
    'build_signature_string',
    'parse_signature_parameters',
    'serialize_signature_parameters',
    'HttpSigner',
    'new_signer',
    'sign_request',
    'sign_response',
    'HttpSignatureAuth',
    'sign_prepared_request',
    # Verification
    'Verifier',
    'new_verifier',
    'new_response_verifier',
    'verify_request',
    'verify_response',
    'verifier_from_prepared_request',
    'verifier_from_response',
    # Configuration
    'HttpSigConfig',
]
