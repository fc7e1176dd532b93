"""
Explicit DTO validation.

Runs a DTO's declarative constraints synchronously, before the payload is
translated into a domain entity, and reports failures as the project's
``ValidationError`` instead of pydantic's.
"""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from quizportal.core.exceptions.validation import ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_payload(schema: type[SchemaT], payload: Mapping[str, Any] | SchemaT) -> SchemaT:
    """
    Validate a raw payload (or re-validate a DTO instance) against a schema.

    Args:
        schema: The DTO class to validate against
        payload: A mapping of raw field values, or an existing DTO instance

    Returns:
        A validated instance of ``schema``

    Raises:
        ValidationError: If any field constraint fails
    """
    data = payload.model_dump(exclude_unset=True) if isinstance(payload, BaseModel) else payload
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        errors = [
            {"loc": tuple(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        logger.debug(f"{schema.__name__} failed validation on {len(errors)} field(s)")
        raise ValidationError(f"Invalid {schema.__name__} payload", errors=errors) from e
