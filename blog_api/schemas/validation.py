"""Body Validation — runs a request schema and reports the first violated rule.

Invariants:
    - validate_body never raises for bad input: Ok(model) or Err(INVALID_INPUT)
    - Err.detail is the first pydantic error, rendered "<field>: <message>"
      (model-level rules render as the bare message)
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from blog_api.core.result import Err, FailureKind, Ok, Result

ModelT = TypeVar("ModelT", bound=BaseModel)


def describe_first_error(errors: list[dict[str, Any]]) -> str:
    """Render the first pydantic error as a user-facing sentence."""
    if not errors:
        return "Invalid request data"
    first = errors[0]
    if first["type"] == "value_error" and "error" in first.get("ctx", {}):
        message = str(first["ctx"]["error"])
    else:
        message = first["msg"]
    field = ".".join(str(loc) for loc in first.get("loc", ()) if loc != "body")
    return f"{field}: {message}" if field else message


def validate_body(schema: type[ModelT], payload: Any) -> Result[ModelT]:
    try:
        return Ok(schema.model_validate(payload))
    except PydanticValidationError as e:
        return Err(FailureKind.INVALID_INPUT, describe_first_error(e.errors()))
