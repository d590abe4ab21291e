"""
HTTP Signatures SDK - Signature Verification Module
"""

from .verifier import (
    Verifier,
    new_verifier,
    new_response_verifier,
    verify_request,
    verify_response,
)

from .integration import (
    verifier_from_prepared_request,
    verifier_from_response,
)

__all__ = [
    'Verifier',
    'new_verifier',
    'new_response_verifier',
    'verify_request',
    'verify_response',
    'verifier_from_prepared_request',
    'verifier_from_response',
]
