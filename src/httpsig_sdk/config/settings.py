"""
Configuration management for the HTTP Signatures SDK

Configuration is plain JSON:

    {
      "signing": {
        "algorithms": ["rsa-sha256", "hmac-sha256"],
        "headers": ["(request-target)", "host", "date"],
        "scheme": "Signature"
      },
      "logging": {
        "level": "INFO",
        "log_signature_strings": false
      }
    }

Every section and key is optional.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..crypto.algorithms import AlgorithmRegistry, default_registry
from ..exceptions import ConfigError, HttpSigErrorCodes
from ..signing.signer import HttpSigner, new_signer
from ..signing.types import DEFAULT_HEADERS, SignatureScheme

PACKAGE_LOGGER = "httpsig_sdk"
SIGNATURE_STRING_LOGGER = "httpsig_sdk.signing.canonical_message"


@dataclass
class SigningSettings:
    """Signing configuration"""
    algorithms: List[str] = field(default_factory=lambda: ["rsa-sha256"])
    headers: List[str] = field(default_factory=lambda: list(DEFAULT_HEADERS))
    scheme: str = SignatureScheme.SIGNATURE.value


@dataclass
class LoggingSettings:
    """Logging configuration"""
    level: str = "WARNING"
    log_signature_strings: bool = False


@dataclass
class HttpSigConfig:
    """SDK configuration"""
    signing: SigningSettings = field(default_factory=SigningSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def validate(self, registry: Optional[AlgorithmRegistry] = None) -> None:
        """
        Validate the configuration.

        Raises:
            ConfigError: If the configuration is invalid
        """
        registry = registry or default_registry()

        for name in ("algorithms", "headers"):
            value = getattr(self.signing, name)
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise ConfigError(f"signing.{name} must be a list of strings",
                                  HttpSigErrorCodes.INVALID_FORMAT, {"field": f"signing.{name}"})
        if not isinstance(self.signing.scheme, str):
            raise ConfigError("signing.scheme must be a string",
                              HttpSigErrorCodes.INVALID_FORMAT, {"field": "signing.scheme"})
        if not isinstance(self.logging.level, str):
            raise ConfigError("logging.level must be a string",
                              HttpSigErrorCodes.INVALID_FORMAT, {"field": "logging.level"})

        if not self.signing.algorithms:
            raise ConfigError("At least one signing algorithm must be configured",
                              HttpSigErrorCodes.UNKNOWN_ALGORITHM)
        if not any(registry.is_supported(name) for name in self.signing.algorithms):
            raise ConfigError(
                f"None of the configured algorithms are supported: {self.signing.algorithms}",
                HttpSigErrorCodes.UNKNOWN_ALGORITHM,
                {"algorithms": self.signing.algorithms}
            )

        valid_schemes = [scheme.value for scheme in SignatureScheme]
        if self.signing.scheme not in valid_schemes:
            raise ConfigError(
                f"Unknown signature scheme '{self.signing.scheme}'",
                HttpSigErrorCodes.INVALID_SCHEME,
                {"valid_schemes": valid_schemes}
            )

        if not isinstance(logging.getLevelName(self.logging.level.upper()), int):
            raise ConfigError(f"Unknown logging level '{self.logging.level}'",
                              HttpSigErrorCodes.INVALID_FORMAT)

    def create_signer(self, registry: Optional[AlgorithmRegistry] = None) -> HttpSigner:
        """Create a signer from the signing settings"""
        return new_signer(
            self.signing.algorithms,
            self.signing.headers,
            SignatureScheme(self.signing.scheme),
            registry
        )

    def configure_logging(self) -> None:
        """Apply the logging settings to the SDK loggers"""
        logging.getLogger(PACKAGE_LOGGER).setLevel(self.logging.level.upper())
        signature_logger = logging.getLogger(SIGNATURE_STRING_LOGGER)
        if self.logging.log_signature_strings:
            signature_logger.setLevel(logging.DEBUG)
        else:
            signature_logger.setLevel(logging.NOTSET)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HttpSigConfig':
        """Load configuration from a dictionary"""
        try:
            config = cls(
                signing=SigningSettings(**data.get('signing', {})),
                logging=LoggingSettings(**data.get('logging', {}))
            )
        except (AttributeError, TypeError) as e:
            raise ConfigError(f"Invalid configuration format: {e}", HttpSigErrorCodes.INVALID_FORMAT)
        config.validate()
        return config

    @classmethod
    def from_json(cls, json_string: str) -> 'HttpSigConfig':
        """Load configuration from a JSON string"""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Failed to parse configuration JSON: {e}", HttpSigErrorCodes.PARSE_ERROR)
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object", HttpSigErrorCodes.INVALID_FORMAT)
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'HttpSigConfig':
        """Load configuration from a JSON file"""
        try:
            with open(Path(file_path), 'r', encoding='utf-8') as f:
                json_string = f.read()
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file: {e}", HttpSigErrorCodes.FILE_ERROR)
        return cls.from_json(json_string)


def load_config_from_json(json_string: str) -> HttpSigConfig:
    """Load configuration from a JSON string"""
    return HttpSigConfig.from_json(json_string)


def load_config_from_file(file_path: Union[str, Path]) -> HttpSigConfig:
    """Load configuration from a JSON file"""
    return HttpSigConfig.from_file(file_path)
