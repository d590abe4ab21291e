"""
Configuration management for the HTTP Signatures SDK
"""

from .settings import (
    HttpSigConfig,
    SigningSettings,
    LoggingSettings,
    load_config_from_json,
    load_config_from_file,
)

__all__ = [
    'HttpSigConfig',
    'SigningSettings',
    'LoggingSettings',
    'load_config_from_json',
    'load_config_from_file',
]
