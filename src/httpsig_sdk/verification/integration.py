"""
Verifiers built from requests objects
"""

from typing import Optional

import requests
from requests.models import PreparedRequest

from ..crypto.algorithms import AlgorithmRegistry
from ..signing.integration import signable_request_from_prepared
from ..signing.types import HttpHeaders, SignableResponse
from .verifier import Verifier, new_response_verifier, new_verifier


def verifier_from_prepared_request(
    prepared_request: PreparedRequest,
    registry: Optional[AlgorithmRegistry] = None
) -> Verifier:
    """Create a verifier for a signed prepared request"""
    return new_verifier(signable_request_from_prepared(prepared_request), registry)


def verifier_from_response(
    response: requests.Response,
    registry: Optional[AlgorithmRegistry] = None
) -> Verifier:
    """
    Create a verifier for a signed requests.Response.

    The response is verified on its own, so (request-target) is refused.
    """
    signable = SignableResponse(
        status_code=response.status_code,
        headers=HttpHeaders(response.headers or {})
    )
    return new_response_verifier(signable, registry)
