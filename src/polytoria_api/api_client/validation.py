"""Decoding of response bodies: service errors and schema validation."""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from polytoria_api.api_client.errors import ServiceError, ValidationError
from polytoria_api.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

# Longest body excerpt kept on a ValidationError
BODY_EXCERPT_LENGTH = 500


def _excerpt(data: Any) -> str:
    text = data if isinstance(data, str) else json.dumps(data, default=str)
    return text[:BODY_EXCERPT_LENGTH]


def raise_for_service_errors(body: Any, url: str) -> None:
    """Raise ServiceError if a decoded body reports errors.

    The API reports errors as ``{"errors": [{"code": ..., "message": ...}]}``.
    Only the first entry is surfaced. A missing or empty ``errors`` field
    means success.

    Raises:
        ServiceError: For the first reported error
        ValidationError: If ``errors`` is present but not in that shape
    """
    if not isinstance(body, dict) or not body.get("errors"):
        return

    errors = body["errors"]
    if not isinstance(errors, list) or not isinstance(errors[0], dict):
        logger.error("Malformed errors payload", url=url, errors=_excerpt(errors))
        raise ValidationError(
            message=f"Malformed errors payload from {url}",
            endpoint="errors",
            url=url,
            response_body=_excerpt(body),
        )

    first = errors[0]
    code = str(first.get("code", ""))
    message = str(first.get("message", ""))
    logger.error(
        "Polytoria API reported an error",
        url=url,
        code=code,
        message=message,
        error_count=len(errors),
    )
    raise ServiceError(code, message, url)


def validate_response(
    schema: type[T],
    data: Any,
    endpoint: str,
    url: str,
) -> T:
    """Decode a response body into the endpoint's schema.

    Args:
        schema: Envelope or payload model of the endpoint
        data: Decoded JSON body
        endpoint: Endpoint name, used in errors and logs
        url: Full URL, used in errors and logs

    Returns:
        Validated model instance

    Raises:
        ValidationError: If the body does not match the schema
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in error['loc']) or '<body>'}: {error['msg']}"
            for error in e.errors()
        ]
        logger.error(
            "Response does not match schema",
            endpoint=endpoint,
            schema=schema.__name__,
            url=url,
            problems=problems[:5],
            problem_count=len(problems),
        )
        raise ValidationError(
            message=f"Unexpected {endpoint} response: {'; '.join(problems[:3])}",
            endpoint=endpoint,
            url=url,
            response_body=_excerpt(data),
            original_error=e,
        ) from e
