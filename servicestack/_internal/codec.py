"""JSON encoding of request bodies and decoding of response bodies."""

from functools import lru_cache
from typing import Any

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from servicestack.exceptions import ServiceStackConfigError, ServiceStackDecodeError


def encode_body(body: Any) -> Any:
    """Convert a request body into JSON-compatible data.

    Pydantic models, dataclasses and plain containers are all accepted.

    Raises:
        ServiceStackDecodeError: If the body cannot be serialized.
    """
    try:
        return to_jsonable_python(body)
    except PydanticSerializationError as e:
        raise ServiceStackDecodeError(f"Failed to serialize request body: {e}") from e


@lru_cache(maxsize=256)
def response_adapter(response_type: Any) -> TypeAdapter[Any]:
    """Return a (cached) TypeAdapter for a response type.

    Raises:
        ServiceStackConfigError: If pydantic cannot build a validator for the type.
    """
    try:
        return TypeAdapter(response_type)
    except PydanticSchemaGenerationError as e:
        raise ServiceStackConfigError(f"Response type {response_type!r} is not decodable: {e}") from e


def decode_response(content: bytes, adapter: TypeAdapter[Any]) -> Any:
    """Validate a raw JSON response body against the expected type.

    Raises:
        ServiceStackDecodeError: If the body is not valid JSON or does not match.
    """
    try:
        return adapter.validate_json(content)
    except ValidationError as e:
        raise ServiceStackDecodeError(f"Failed to decode response body: {e}") from e
