"""
Type definitions for HTTP signatures

This module provides the message and parameter types shared by the signer and
the verifier: a multi-valued header collection, request and response messages,
and the parsed signature parameters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from requests.structures import CaseInsensitiveDict

# Reserved pseudo-component for the method and target URI
REQUEST_TARGET = "(request-target)"
DATE_HEADER = "date"
DEFAULT_HEADERS: Tuple[str, ...] = (DATE_HEADER,)


class SignatureScheme(str, Enum):
    """Header slots that can carry signature parameters"""
    SIGNATURE = "Signature"
    AUTHORIZATION = "Authorization"


HeaderValues = Union[str, Iterable[str]]


class HttpHeaders:
    """
    Case-insensitive, multi-valued HTTP header collection

    Each header name maps to the ordered list of its raw values, preserving
    the order in which occurrences were added.
    """

    def __init__(self, headers: Optional[Union['HttpHeaders', Mapping[str, HeaderValues], Iterable[Tuple[str, str]]]] = None):
        self._store: CaseInsensitiveDict = CaseInsensitiveDict()
        if headers is None:
            return
        if isinstance(headers, HttpHeaders):
            for name, value in headers.items():
                self.add(name, value)
        elif isinstance(headers, Mapping):
            for name, values in headers.items():
                if isinstance(values, str):
                    self.add(name, values)
                else:
                    for value in values:
                        self.add(name, value)
        else:
            for name, value in headers:
                self.add(name, value)

    @classmethod
    def from_mapping(cls, headers: Mapping[str, HeaderValues]) -> 'HttpHeaders':
        return cls(headers)

    def add(self, name: str, value: str) -> None:
        """Append a value for a header, keeping existing values"""
        if name in self._store:
            self._store[name].append(value)
        else:
            self._store[name] = [value]

    def set(self, name: str, value: str) -> None:
        """Replace all values of a header with a single value"""
        self._store[name] = [value]

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get the first value of a header"""
        values = self._store.get(name)
        if not values:
            return default
        return values[0]

    def get_all(self, name: str) -> List[str]:
        """Get every value of a header in occurrence order"""
        return list(self._store.get(name) or [])

    def remove(self, name: str) -> None:
        self._store.pop(name, None)

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over every (name, value) occurrence"""
        for name, values in self._store.items():
            for value in values:
                yield name, value

    def copy(self) -> 'HttpHeaders':
        return HttpHeaders(self)

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(values) for name, values in self._store.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._store

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpHeaders):
            return NotImplemented
        return self._store == other._store

    def __repr__(self) -> str:
        return f"HttpHeaders({self.to_dict()})"


def _coerce_headers(headers) -> HttpHeaders:
    if isinstance(headers, HttpHeaders):
        return headers
    if headers is None:
        return HttpHeaders()
    return HttpHeaders(headers)


@dataclass
class SignableRequest:
    """
    HTTP request that can be signed or verified

    Attributes:
        method: HTTP method (GET, POST, etc.)
        url: Absolute URL or origin-form target (path plus query)
        headers: Request headers; plain mappings are converted to HttpHeaders
    """
    method: str
    url: str
    headers: HttpHeaders = field(default_factory=HttpHeaders)

    def __post_init__(self):
        """Validate request after initialization"""
        if not self.method:
            raise ValueError("Request method cannot be empty")

        if not self.url:
            raise ValueError("Request URL cannot be empty")

        self.headers = _coerce_headers(self.headers)


@dataclass
class SignableResponse:
    """
    HTTP response that can be signed or verified

    A response has no request line, so (request-target) cannot be used with it.

    Attributes:
        status_code: HTTP status code
        headers: Response headers; plain mappings are converted to HttpHeaders
    """
    status_code: int = 200
    headers: HttpHeaders = field(default_factory=HttpHeaders)

    def __post_init__(self):
        """Validate response after initialization"""
        self.headers = _coerce_headers(self.headers)


@dataclass
class SignatureParameters:
    """
    Parameters recovered from a signature-scheme header

    Attributes:
        key_id: Key identifier for external key lookup
        headers: Ordered component identifiers covered by the signature
        signature: Base64-encoded signature as carried in the header
        algorithm: Deprecated algorithm parameter, never used for dispatch
    """
    key_id: str
    headers: List[str]
    signature: str
    algorithm: Optional[str] = None

    def __post_init__(self):
        """Validate signature parameters"""
        if not self.key_id:
            raise ValueError("Key ID cannot be empty")

        if not self.signature:
            raise ValueError("Signature cannot be empty")

        if not self.headers:
            self.headers = list(DEFAULT_HEADERS)


# Type aliases for convenience
RequestTargetProvider = Callable[[], str]
SignatureStringFunction = Callable[[HttpHeaders, List[str]], str]
HttpMessage = Union[SignableRequest, SignableResponse]
