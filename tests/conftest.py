"""
Shared fixtures for the HTTP Signatures SDK test suite
"""

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from httpsig_sdk.signing.types import SignableRequest

EXAMPLE_DATE = "Tue, 07 Jun 2014 20:51:35 GMT"


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_private_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ed25519_private_key():
    return Ed25519PrivateKey.generate()


@pytest.fixture
def example_request():
    """GET /foo with a fixed Date header"""
    return SignableRequest(method="GET", url="/foo", headers={"Date": EXAMPLE_DATE})
