"""
Request validation helpers.

A request schema is a Pydantic model with up to three fields, ``params``, ``query`` and ``body``,
each describing one fragment of the incoming HTTP request. Validation is pure: it either returns
the normalized model or raises ``ValidationError`` listing every offending field.
"""

import json
import logging
from typing import Any, Callable, Mapping, Optional, Type, TypeVar

import pydantic
from fastapi import Request

from pos_api.common.errors import FieldIssue, InternalError, ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def validate(
        schema: Type[SchemaT],
        *,
        params: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
) -> SchemaT:
    """
    Validate request fragments against a request schema.

    Args:
        schema: The request model to validate against
        params: Path parameters, typically strings taken from the URL
        query: Query string parameters
        body: Decoded JSON body

    Returns:
        The normalized request model

    Raises:
        ValidationError: If any fragment violates the schema
        InternalError: If validation fails for a reason other than the input shape
    """
    try:
        payload = {
            "params": dict(params or {}),
            "query": dict(query or {}),
            "body": {} if body is None else body,
        }
        fields = schema.model_fields
        payload = {key: value for key, value in payload.items() if key in fields}
        return schema.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
    except Exception as exc:
        logger.exception("Unexpected failure while validating %s", schema.__name__)
        raise InternalError(f"Validation of {schema.__name__} failed unexpectedly") from exc


def validated(schema: Type[SchemaT]) -> Callable:
    """
    Build a FastAPI dependency that validates the current request against a schema.

    Usage:
        @router.patch("/{id}")
        async def update(request: ProductUpdateRequest = Depends(validated(ProductUpdateRequest))):
            ...

    Args:
        schema: The request model to validate against

    Returns:
        An async dependency returning the normalized request model
    """
    wants_body = "body" in schema.model_fields

    async def dependency(request: Request) -> SchemaT:
        body = None
        if wants_body:
            raw = await request.body()
            if raw:
                try:
                    body = json.loads(raw)
                except ValueError as exc:
                    raise ValidationError([FieldIssue(path="body", message="Body must be valid JSON")]) from exc
        return validate(
            schema,
            params=request.path_params,
            query=request.query_params,
            body=body,
        )

    dependency.__name__ = f"validate_{schema.__name__}"
    return dependency
