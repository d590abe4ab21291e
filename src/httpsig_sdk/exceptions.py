"""
Exception classes for the HTTP Signatures SDK
"""

from typing import Optional, Dict, Any


class HttpSigErrorCodes:
    """Standard error codes for signing and verification operations"""

    # Signature-scheme header errors
    SCHEME_AMBIGUOUS = "SCHEME_AMBIGUOUS"
    SCHEME_MISSING = "SCHEME_MISSING"

    # Parameter errors
    MALFORMED_PARAMETER = "MALFORMED_PARAMETER"
    MISSING_PARAMETER = "MISSING_PARAMETER"

    # Algorithm and key errors
    UNKNOWN_ALGORITHM = "UNKNOWN_ALGORITHM"
    KEY_TYPE_MISMATCH = "KEY_TYPE_MISMATCH"

    # Canonicalization errors
    MISSING_SIGNED_HEADER = "MISSING_SIGNED_HEADER"
    REQUEST_TARGET_NOT_PERMITTED = "REQUEST_TARGET_NOT_PERMITTED"

    # Signing / verification errors
    SIGNING_FAILED = "SIGNING_FAILED"
    SIGNATURE_DECODE_FAILED = "SIGNATURE_DECODE_FAILED"
    SIGNATURE_MISMATCH = "SIGNATURE_MISMATCH"
    VERIFICATION_FAILED = "VERIFICATION_FAILED"

    # Configuration errors
    PARSE_ERROR = "PARSE_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    FILE_ERROR = "FILE_ERROR"
    INVALID_SCHEME = "INVALID_SCHEME"


class HttpSigError(Exception):
    """
    Base exception for all HTTP signature errors

    Attributes:
        message: Error message
        error_code: Error code for programmatic handling
        details: Optional additional error details
    """

    default_code = "UNKNOWN_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message='{self.message}', "
            f"error_code='{self.error_code}', details={self.details})"
        )


class SignatureSchemeError(HttpSigError):
    """Exception raised when the signature-scheme header cannot be located"""
    pass


class SchemeAmbiguousError(SignatureSchemeError):
    """Both candidate header slots carry signature parameters"""
    default_code = HttpSigErrorCodes.SCHEME_AMBIGUOUS


class SchemeMissingError(SignatureSchemeError):
    """Neither candidate header slot carries signature parameters"""
    default_code = HttpSigErrorCodes.SCHEME_MISSING


class SignatureParameterError(HttpSigError):
    """Exception raised for invalid signature parameters"""
    pass


class MalformedParameterError(SignatureParameterError):
    """A parameter token is not a key/value pair"""
    default_code = HttpSigErrorCodes.MALFORMED_PARAMETER


class MissingParameterError(SignatureParameterError):
    """A required parameter (keyId or signature) is absent"""
    default_code = HttpSigErrorCodes.MISSING_PARAMETER


class UnknownAlgorithmError(HttpSigError):
    """No cryptographic implementation is registered for an algorithm name"""
    default_code = HttpSigErrorCodes.UNKNOWN_ALGORITHM


class KeyTypeMismatchError(HttpSigError):
    """A key does not have the shape the algorithm expects"""
    default_code = HttpSigErrorCodes.KEY_TYPE_MISMATCH


class CanonicalizationError(HttpSigError):
    """Exception raised when the signature string cannot be built"""
    pass


class MissingSignedHeaderError(CanonicalizationError):
    """A header named in the signed header list is absent from the message"""
    default_code = HttpSigErrorCodes.MISSING_SIGNED_HEADER


class RequestTargetNotPermittedError(CanonicalizationError):
    """The (request-target) component was used on a message without a request line"""
    default_code = HttpSigErrorCodes.REQUEST_TARGET_NOT_PERMITTED


class SigningError(HttpSigError):
    """Exception raised when a signing capability fails"""
    default_code = HttpSigErrorCodes.SIGNING_FAILED


class SignatureDecodeError(HttpSigError):
    """The embedded signature value is not valid base64"""
    default_code = HttpSigErrorCodes.SIGNATURE_DECODE_FAILED


class VerificationError(HttpSigError):
    """Base exception for a signature that does not verify"""
    default_code = HttpSigErrorCodes.VERIFICATION_FAILED


class SignatureMismatchError(VerificationError):
    """A MAC signature does not match the recomputed code"""
    default_code = HttpSigErrorCodes.SIGNATURE_MISMATCH


class VerificationFailedError(VerificationError):
    """An asymmetric signature was rejected by its capability"""
    default_code = HttpSigErrorCodes.VERIFICATION_FAILED


class ConfigError(HttpSigError):
    """Configuration loading and validation error"""
    default_code = HttpSigErrorCodes.INVALID_FORMAT
