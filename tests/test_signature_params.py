"""
Test suite for signature parameter encoding and decoding
"""

import pytest

from httpsig_sdk.exceptions import (
    MalformedParameterError,
    MissingParameterError,
    SchemeAmbiguousError,
    SchemeMissingError,
    HttpSigErrorCodes,
)
from httpsig_sdk.signing import (
    HttpHeaders,
    SignatureScheme,
    extract_signature_parameters,
    has_signature_parameters,
    parse_signature_parameters,
    select_signature_scheme,
    serialize_signature_parameters,
)

EXAMPLE_HEADER = (
    'keyId="test-key",algorithm="hmac-sha256",'
    'headers="(request-target) date",'
    'signature="IyeADZmTZ27HI2ZWMgQbfjklSBsZE6eZyB8JCJAzAHk="'
)


class TestSerialize:
    """Test serialization of signature parameters"""

    def test_fixed_parameter_order(self):
        """Test parameters are written as keyId, algorithm, headers, signature"""
        value = serialize_signature_parameters(
            "test-key",
            "hmac-sha256",
            ["(request-target)", "date"],
            "IyeADZmTZ27HI2ZWMgQbfjklSBsZE6eZyB8JCJAzAHk="
        )
        assert value == EXAMPLE_HEADER

    def test_headers_lowercased(self):
        """Test header names are lowercased and space-joined"""
        value = serialize_signature_parameters("k", "rsa-sha256", ["Host", "Date", "Digest"], "c2ln")
        assert 'headers="host date digest"' in value

    def test_default_headers(self):
        """Test an empty header list is written as date"""
        value = serialize_signature_parameters("k", "rsa-sha256", [], "c2ln")
        assert value == 'keyId="k",algorithm="rsa-sha256",headers="date",signature="c2ln"'

    def test_unquotable_key_id(self):
        """Test key IDs that would break the parameter list are refused"""
        with pytest.raises(MalformedParameterError):
            serialize_signature_parameters("tenant,alice", "hmac-sha256", ["date"], "c2ln")

        with pytest.raises(MalformedParameterError):
            serialize_signature_parameters('alice"', "hmac-sha256", ["date"], "c2ln")


class TestParse:
    """Test parsing of signature parameters"""

    def test_parse_example(self):
        """Test parsing a complete header"""
        params = parse_signature_parameters(EXAMPLE_HEADER)

        assert params.key_id == "test-key"
        assert params.headers == ["(request-target)", "date"]
        assert params.signature == "IyeADZmTZ27HI2ZWMgQbfjklSBsZE6eZyB8JCJAzAHk="
        assert params.algorithm == "hmac-sha256"

    def test_serialized_value_parses_back(self):
        """Test a serialized header parses to the same values"""
        value = serialize_signature_parameters("client-1", "ed25519", ["Host", "Date"], "YWJjZA==")
        params = parse_signature_parameters(value)

        assert params.key_id == "client-1"
        assert params.headers == ["host", "date"]
        assert params.signature == "YWJjZA=="

    def test_headers_default_to_date(self):
        """Test a missing headers parameter defaults to date"""
        params = parse_signature_parameters('keyId="k",signature="c2ln"')
        assert params.headers == ["date"]

    def test_empty_headers_default_to_date(self):
        """Test an empty headers parameter defaults to date"""
        params = parse_signature_parameters('keyId="k",headers="",signature="c2ln"')
        assert params.headers == ["date"]

    def test_unknown_parameters_ignored(self):
        """Test unrecognized parameters are not errors"""
        params = parse_signature_parameters('keyId="k",created=1402170695,expires="x",signature="c2ln"')

        assert params.key_id == "k"
        assert params.signature == "c2ln"

    def test_algorithm_is_optional(self):
        """Test the deprecated algorithm parameter may be absent"""
        params = parse_signature_parameters('keyId="k",signature="c2ln"')
        assert params.algorithm is None

    def test_key_id_may_contain_equals(self):
        """Test only the first = splits name from value"""
        params = parse_signature_parameters('keyId="a=b",signature="c2ln=="')

        assert params.key_id == "a=b"
        assert params.signature == "c2ln=="

    def test_whitespace_between_parameters(self):
        """Test spaces after commas are tolerated"""
        params = parse_signature_parameters('keyId="k", headers="host date", signature="c2ln"')
        assert params.headers == ["host", "date"]

    def test_authorization_prefix(self):
        """Test a leading Signature auth-scheme token is stripped"""
        params = parse_signature_parameters('Signature keyId="k",headers="date",signature="c2ln"')
        assert params.key_id == "k"

    def test_malformed_parameter(self):
        """Test a token without = fails"""
        with pytest.raises(MalformedParameterError) as exc_info:
            parse_signature_parameters('keyId="k",bogus,signature="c2ln"')

        assert exc_info.value.error_code == HttpSigErrorCodes.MALFORMED_PARAMETER

    def test_trailing_comma_is_malformed(self):
        """Test an empty trailing token fails"""
        with pytest.raises(MalformedParameterError):
            parse_signature_parameters('keyId="k",signature="c2ln",')

    def test_missing_key_id(self):
        """Test keyId is required"""
        with pytest.raises(MissingParameterError) as exc_info:
            parse_signature_parameters('headers="date",signature="c2ln"')

        assert exc_info.value.details["parameter"] == "keyId"

    def test_missing_signature(self):
        """Test signature is required"""
        with pytest.raises(MissingParameterError) as exc_info:
            parse_signature_parameters('keyId="k",headers="date"')

        assert exc_info.value.details["parameter"] == "signature"


class TestSchemeSelection:
    """Test selection of the signature-scheme header slot"""

    def test_detection(self):
        """Test any of keyId, headers or signature marks a header"""
        assert has_signature_parameters('keyId="k"')
        assert has_signature_parameters('headers="date"')
        assert has_signature_parameters('signature="c2ln"')
        assert not has_signature_parameters("Bearer abc.def")
        assert not has_signature_parameters(None)
        assert not has_signature_parameters("")

    def test_signature_slot(self):
        """Test the Signature header alone is selected"""
        assert select_signature_scheme(EXAMPLE_HEADER, None) is SignatureScheme.SIGNATURE
        assert select_signature_scheme(EXAMPLE_HEADER, "Bearer abc") is SignatureScheme.SIGNATURE

    def test_authorization_slot(self):
        """Test the Authorization header alone is selected"""
        assert select_signature_scheme(None, EXAMPLE_HEADER) is SignatureScheme.AUTHORIZATION

    def test_both_slots(self):
        """Test parameters in both slots are ambiguous"""
        with pytest.raises(SchemeAmbiguousError):
            select_signature_scheme(EXAMPLE_HEADER, EXAMPLE_HEADER)

    def test_neither_slot(self):
        """Test parameters in neither slot are missing"""
        with pytest.raises(SchemeMissingError):
            select_signature_scheme(None, "Basic dXNlcjpwYXNz")

    def test_extract_from_headers(self):
        """Test extraction from a header collection"""
        headers = HttpHeaders({"authorization": EXAMPLE_HEADER, "Date": "today"})
        scheme, params = extract_signature_parameters(headers)

        assert scheme is SignatureScheme.AUTHORIZATION
        assert params.key_id == "test-key"

    def test_extract_uses_first_signature_header(self):
        """Test the first of several Signature headers is used"""
        headers = HttpHeaders()
        headers.add("Signature", 'keyId="first",signature="c2ln"')
        headers.add("Signature", 'keyId="second",signature="c2ln"')

        _, params = extract_signature_parameters(headers)
        assert params.key_id == "first"
