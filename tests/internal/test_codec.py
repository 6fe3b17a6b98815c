"""Tests for request encoding and response decoding."""

from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel

from servicestack._internal.codec import decode_response, encode_body, response_adapter
from servicestack.exceptions import ServiceStackConfigError, ServiceStackDecodeError


class SearchResponse(BaseModel):
    results: list[str]


class TestEncodeBody:
    """Tests for encode_body()."""

    def test_pydantic_model(self):
        """Should dump models in JSON mode."""
        assert encode_body(SearchResponse(results=["a"])) == {"results": ["a"]}

    def test_dataclass(self):
        """Should dump dataclasses."""

        @dataclass
        class Query:
            term: str
            limit: int

        assert encode_body(Query(term="x", limit=10)) == {"term": "x", "limit": 10}

    def test_plain_dict(self):
        """Should pass plain JSON data through."""
        assert encode_body({"a": [1, 2]}) == {"a": [1, 2]}

    def test_unserializable(self):
        """Should raise a decode error for unknown types."""
        with pytest.raises(ServiceStackDecodeError) as exc_info:
            encode_body({"handle": object()})
        assert "serialize" in str(exc_info.value)


class TestDecodeResponse:
    """Tests for response_adapter() and decode_response()."""

    def test_model(self):
        """Should decode into a model."""
        result = decode_response(b'{"results":["r1","r2"]}', response_adapter(SearchResponse))
        assert result == SearchResponse(results=["r1", "r2"])

    def test_generic_alias(self):
        """Should decode into container types."""
        assert decode_response(b'["a","b"]', response_adapter(list[str])) == ["a", "b"]

    def test_any(self):
        """Any should yield plain JSON data."""
        assert decode_response(b'{"x":1}', response_adapter(Any)) == {"x": 1}

    def test_shape_mismatch(self):
        """Should raise a decode error with pydantic's diagnostic."""
        with pytest.raises(ServiceStackDecodeError) as exc_info:
            decode_response(b'{"wrong":1}', response_adapter(SearchResponse))
        assert "results" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None

    def test_invalid_json(self):
        """Should raise a decode error for non-JSON bodies."""
        with pytest.raises(ServiceStackDecodeError):
            decode_response(b"not json", response_adapter(SearchResponse))

    def test_adapter_is_cached(self):
        """Adapters should be reused per type."""
        assert response_adapter(SearchResponse) is response_adapter(SearchResponse)

    def test_undecodable_type(self):
        """Types pydantic cannot validate should be a config error."""

        class Opaque:
            pass

        with pytest.raises(ServiceStackConfigError):
            response_adapter(Opaque)
