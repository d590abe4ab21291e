"""
Cryptographic capabilities for the HTTP Signatures SDK
"""

from .algorithms import (
    Algorithm,
    AlgorithmKind,
    AlgorithmBinding,
    AlgorithmRegistry,
    AsymmetricSigner,
    MacProvider,
    algorithm_name,
    create_default_registry,
    default_registry,
)
from .asymmetric import (
    CryptographySigner,
    RsaSigner,
    EcdsaSigner,
    Ed25519Signer,
)
from .mac import HmacProvider

__all__ = [
    'Algorithm',
    'AlgorithmKind',
    'AlgorithmBinding',
    'AlgorithmRegistry',
    'AsymmetricSigner',
    'MacProvider',
    'algorithm_name',
    'create_default_registry',
    'default_registry',
    'CryptographySigner',
    'RsaSigner',
    'EcdsaSigner',
    'Ed25519Signer',
    'HmacProvider',
]
