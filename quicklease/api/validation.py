"""Request validation decorator.

@validate_request parses the JSON (or form) body into the Pydantic model
annotated on the view function's body parameter. Parameters that Flask
supplies from the URL (view_args) are passed through unchanged.

    @users_bp.put("/<int:account_id>")
    @validate_request
    def update_user(account_id: int, data: AccountView):
        ...
"""

import inspect
from functools import wraps

from flask import request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..exceptions import ValidationError

# Never echoed back in validation error details
REDACTED_FIELDS = frozenset({"password"})


def _format_errors(exc: PydanticValidationError) -> list[dict]:
    """Flatten pydantic errors into field/message/expected_type dicts."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "expected_type": error["type"],
        }
        for error in exc.errors()
    ]


def _redact(received):
    if not isinstance(received, dict):
        return received
    return {key: value for key, value in received.items() if key not in REDACTED_FIELDS}


def validate_request(f):
    """
    Validate the request body against the view's Pydantic annotation.

    Raises:
        TypeError: At decoration time if the function has no parameters or
            its first parameter is unannotated; at request time if a body
            parameter is not annotated with a BaseModel subclass
        ValidationError: If the body does not match the model
    """
    signature = inspect.signature(f)
    params = list(signature.parameters.values())

    if not params:
        raise TypeError(f"{f.__name__} has no parameters to validate")
    if params[0].annotation is inspect.Parameter.empty:
        raise TypeError(f"First parameter of {f.__name__} lacks a type annotation")

    @wraps(f)
    def wrapper(*args, **kwargs):
        view_args = request.view_args or {}
        bound = {}

        for param in params:
            if param.name in view_args:
                bound[param.name] = view_args[param.name]
                continue

            model = param.annotation
            if not (inspect.isclass(model) and issubclass(model, BaseModel)):
                raise TypeError(
                    f"Parameter '{param.name}' of {f.__name__} must be annotated "
                    f"with a Pydantic BaseModel subclass"
                )

            received = request.get_json(silent=True)
            if received is None:
                received = request.form.to_dict()

            try:
                bound[param.name] = model.model_validate(received)
            except PydanticValidationError as e:
                raise ValidationError(
                    "Invalid request data",
                    {
                        "model": model.__name__,
                        "received": _redact(received),
                        "errors": _format_errors(e),
                    }
                )

        return f(**bound)

    return wrapper
