"""
Signature string construction for HTTP signatures

The signature string is the exact text that is signed and later rebuilt for
verification. It is one "<name>: <value>" line per covered component, joined
with newlines and without a trailing newline.
"""

import logging
from typing import List, Optional, Sequence

from ..exceptions import MissingSignedHeaderError, RequestTargetNotPermittedError
from .types import (
    DEFAULT_HEADERS,
    REQUEST_TARGET,
    HttpHeaders,
    RequestTargetProvider,
    SignableRequest,
)
from .utils import normalize_header_name, request_target

logger = logging.getLogger(__name__)

HEADER_FIELD_DELIMITER = ": "
HEADERS_DELIMITER = "\n"
HEADER_VALUE_DELIMITER = ", "
REQUEST_TARGET_SEPARATOR = " "


def request_target_provider(request: SignableRequest) -> RequestTargetProvider:
    """
    Build the (request-target) provider for a request.

    Args:
        request: Request whose method and target are used

    Returns:
        callable: Provider returning "<lowercased-method> <request-target>"
    """
    def provide() -> str:
        return f"{request.method.lower()}{REQUEST_TARGET_SEPARATOR}{request_target(request.url)}"

    return provide


def request_target_not_permitted() -> str:
    """
    (request-target) provider for messages without a request line.

    Raises:
        RequestTargetNotPermittedError: Always
    """
    raise RequestTargetNotPermittedError(
        f"cannot sign with {REQUEST_TARGET!r} on anything other than an http request",
        details={"component": REQUEST_TARGET}
    )


class SignatureStringBuilder:
    """
    Builder for signature strings over a header collection
    """

    def __init__(self, headers: HttpHeaders, request_target: RequestTargetProvider):
        """
        Initialize signature string builder.

        Args:
            headers: Header collection to read component values from
            request_target: Provider for the (request-target) component
        """
        self.headers = headers
        self.request_target = request_target

    def build(self, components: Optional[Sequence[str]] = None) -> str:
        """
        Build the signature string for the given components.

        Args:
            components: Ordered component identifiers; defaults to ["date"]

        Returns:
            str: Signature string

        Raises:
            MissingSignedHeaderError: If a named header is absent
            RequestTargetNotPermittedError: If (request-target) is not available
        """
        if not components:
            components = DEFAULT_HEADERS

        lines = [self._build_component(component) for component in components]
        signature_string = HEADERS_DELIMITER.join(lines)
        logger.debug(f"Built signature string: {signature_string!r}")
        return signature_string

    def _build_component(self, component: str) -> str:
        name = normalize_header_name(component)
        if name == REQUEST_TARGET:
            value = self.request_target()
        else:
            value = self._header_value(name)
        return f"{name}{HEADER_FIELD_DELIMITER}{value}"

    def _header_value(self, name: str) -> str:
        if name not in self.headers:
            raise MissingSignedHeaderError(
                f"missing header {name!r}",
                details={"header": name, "available_headers": list(self.headers)}
            )
        values = self.headers.get_all(name)
        return HEADER_VALUE_DELIMITER.join(value.strip() for value in values)


def build_signature_string(
    headers: HttpHeaders,
    components: Optional[Sequence[str]],
    request_target: RequestTargetProvider
) -> str:
    """
    Build the signature string for a header collection.

    Args:
        headers: Header collection
        components: Ordered component identifiers; defaults to ["date"]
        request_target: Provider for the (request-target) component

    Returns:
        str: Signature string
    """
    return SignatureStringBuilder(headers, request_target).build(components)


def covered_components(components: Optional[Sequence[str]]) -> List[str]:
    """
    Normalize a component list as it appears in the headers parameter.

    Args:
        components: Component identifiers, possibly empty

    Returns:
        list: Lowercased identifiers, ["date"] when none are given
    """
    if not components:
        return list(DEFAULT_HEADERS)
    return [normalize_header_name(component) for component in components]
