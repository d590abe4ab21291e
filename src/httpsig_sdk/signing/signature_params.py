"""
Signature parameter encoding and decoding

Signature parameters travel as comma-separated name="value" pairs in either
the Signature header or the Authorization header:

    keyId="client-1",algorithm="hmac-sha256",headers="(request-target) date",signature="..."

The algorithm parameter is deprecated. It is always written for compatibility
and ignored when read.
"""

import logging
from typing import Optional, Sequence, Tuple

from ..exceptions import (
    MalformedParameterError,
    MissingParameterError,
    SchemeAmbiguousError,
    SchemeMissingError,
)
from .types import DEFAULT_HEADERS, HttpHeaders, SignatureParameters, SignatureScheme
from .canonical_message import covered_components

logger = logging.getLogger(__name__)

# Signature parameters
KEY_ID_PARAMETER = "keyId"
ALGORITHM_PARAMETER = "algorithm"
HEADERS_PARAMETER = "headers"
SIGNATURE_PARAMETER = "signature"
PARAMETER_KV_SEPARATOR = "="
PARAMETER_VALUE_DELIMITER = '"'
PARAMETER_SEPARATOR = ","
HEADER_PARAMETER_VALUE_DELIMITER = " "

# Authorization header auth-scheme token
AUTHORIZATION_SCHEME_PREFIX = "Signature "


def _quoted(name: str, value: str) -> str:
    return f"{name}{PARAMETER_KV_SEPARATOR}{PARAMETER_VALUE_DELIMITER}{value}{PARAMETER_VALUE_DELIMITER}"


def check_key_id(key_id: str) -> None:
    """
    Check that a key ID can be carried in a quoted parameter.

    Raises:
        MalformedParameterError: If the key ID contains a comma or a double quote
    """
    if PARAMETER_SEPARATOR in key_id or PARAMETER_VALUE_DELIMITER in key_id:
        raise MalformedParameterError(
            f"key ID cannot contain {PARAMETER_SEPARATOR!r} or {PARAMETER_VALUE_DELIMITER!r}: {key_id!r}",
            details={"parameter": KEY_ID_PARAMETER, "key_id": key_id}
        )


def serialize_signature_parameters(
    key_id: str,
    algorithm: str,
    headers: Optional[Sequence[str]],
    signature: str
) -> str:
    """
    Serialize signature parameters into a header value.

    Args:
        key_id: Key identifier
        algorithm: Canonical algorithm name for the deprecated parameter
        headers: Covered component identifiers; defaults to ["date"]
        signature: Base64-encoded signature

    Returns:
        str: Header value with keyId, algorithm, headers and signature in that order

    Raises:
        MalformedParameterError: If the key ID cannot be quoted
    """
    check_key_id(key_id)
    return PARAMETER_SEPARATOR.join([
        _quoted(KEY_ID_PARAMETER, key_id),
        _quoted(ALGORITHM_PARAMETER, algorithm),
        _quoted(HEADERS_PARAMETER, HEADER_PARAMETER_VALUE_DELIMITER.join(covered_components(headers))),
        _quoted(SIGNATURE_PARAMETER, signature),
    ])


def parse_signature_parameters(value: str) -> SignatureParameters:
    """
    Parse a signature-scheme header value.

    Args:
        value: Raw header value

    Returns:
        SignatureParameters: Parsed parameters

    Raises:
        MalformedParameterError: If a token is not a name=value pair
        MissingParameterError: If keyId or signature is absent
    """
    if value[:len(AUTHORIZATION_SCHEME_PREFIX)].lower() == AUTHORIZATION_SCHEME_PREFIX.lower():
        value = value[len(AUTHORIZATION_SCHEME_PREFIX):]

    key_id = ""
    signature = ""
    algorithm = None
    headers = []

    for token in value.split(PARAMETER_SEPARATOR):
        kv = token.split(PARAMETER_KV_SEPARATOR, 1)
        if len(kv) != 2:
            raise MalformedParameterError(
                f"malformed http signature parameter: {token!r}",
                details={"parameter": token}
            )

        name = kv[0].strip()
        param_value = kv[1].strip().strip(PARAMETER_VALUE_DELIMITER)

        if name == KEY_ID_PARAMETER:
            key_id = param_value
        elif name == ALGORITHM_PARAMETER:
            # Deprecated, ignored for dispatch
            algorithm = param_value
        elif name == HEADERS_PARAMETER:
            headers = [h for h in param_value.split(HEADER_PARAMETER_VALUE_DELIMITER) if h]
        elif name == SIGNATURE_PARAMETER:
            signature = param_value
        else:
            logger.debug(f"Ignoring unrecognized signature parameter: {name}")

    if not key_id:
        raise MissingParameterError(
            f"missing {KEY_ID_PARAMETER!r} parameter in http signature",
            details={"parameter": KEY_ID_PARAMETER}
        )
    if not signature:
        raise MissingParameterError(
            f"missing {SIGNATURE_PARAMETER!r} parameter in http signature",
            details={"parameter": SIGNATURE_PARAMETER}
        )

    return SignatureParameters(
        key_id=key_id,
        headers=headers or list(DEFAULT_HEADERS),
        signature=signature,
        algorithm=algorithm
    )


def has_signature_parameters(value: Optional[str]) -> bool:
    """
    Check whether a header value carries signature parameters.

    Args:
        value: Raw header value or None

    Returns:
        bool: True if keyId, headers or signature appears in the value
    """
    if not value:
        return False
    return (
        KEY_ID_PARAMETER in value or
        HEADERS_PARAMETER in value or
        SIGNATURE_PARAMETER in value
    )


def select_signature_scheme(
    signature_value: Optional[str],
    authorization_value: Optional[str]
) -> SignatureScheme:
    """
    Decide which header slot carries the signature parameters.

    Args:
        signature_value: Value of the Signature header, if any
        authorization_value: Value of the Authorization header, if any

    Returns:
        SignatureScheme: The authoritative slot

    Raises:
        SchemeAmbiguousError: If both slots carry signature parameters
        SchemeMissingError: If neither slot does
    """
    in_signature = has_signature_parameters(signature_value)
    in_authorization = has_signature_parameters(authorization_value)

    if in_signature and in_authorization:
        raise SchemeAmbiguousError(
            f"both {SignatureScheme.SIGNATURE.value!r} and "
            f"{SignatureScheme.AUTHORIZATION.value!r} have signature parameters"
        )
    if not in_signature and not in_authorization:
        raise SchemeMissingError(
            f"neither {SignatureScheme.SIGNATURE.value!r} nor "
            f"{SignatureScheme.AUTHORIZATION.value!r} have signature parameters"
        )
    if in_signature:
        return SignatureScheme.SIGNATURE
    return SignatureScheme.AUTHORIZATION


def extract_signature_parameters(headers: HttpHeaders) -> Tuple[SignatureScheme, SignatureParameters]:
    """
    Locate and parse the signature parameters in a header collection.

    The first value of each candidate header is inspected.

    Args:
        headers: Message headers

    Returns:
        tuple: (scheme, parameters)
    """
    signature_value = headers.get(SignatureScheme.SIGNATURE.value)
    authorization_value = headers.get(SignatureScheme.AUTHORIZATION.value)
    scheme = select_signature_scheme(signature_value, authorization_value)

    raw = signature_value if scheme is SignatureScheme.SIGNATURE else authorization_value
    return scheme, parse_signature_parameters(raw)
