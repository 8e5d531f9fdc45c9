"""Map exceptions raised while handling a request onto enveloped responses."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from backoffice.api.envelope import to_envelope
from backoffice.domain import logger
from backoffice.shared.errors import BusinessRuleViolation, Conflict, NotFound

VALIDATION_MESSAGE = "Validation failed."
UNEXPECTED_MESSAGE = "An unexpected error occurred."


def _error_response(status_code: int, message, errors: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(to_envelope(message, error=True, errors=errors)),
    )


def _request_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "__all__"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return errors


def _domain_errors(exc: ValidationError) -> dict[str, list[str]]:
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        return {field: [str(m) for m in (msgs if isinstance(msgs, list) else [msgs])] for field, msgs in messages.items()}
    return {"__all__": [str(exc)]}


def _flatten(errors: dict[str, list[str]]) -> list[str]:
    return [f"{field}: {message}" if field != "__all__" else message for field, msgs in errors.items() for message in msgs]


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = _request_errors(exc)
    logger.info("Rejected request", path=request.url.path, reason="invalid_body", errors=errors)
    return _error_response(422, _flatten(errors) or VALIDATION_MESSAGE, errors)


async def domain_validation_handler(request: Request, exc: ValidationError):
    errors = _domain_errors(exc)
    logger.info("Rejected request", path=request.url.path, reason="validation", errors=errors)
    return _error_response(422, _flatten(errors) or VALIDATION_MESSAGE, errors)


async def not_found_handler(request: Request, exc: NotFound):
    logger.info("Record not found", path=request.url.path, kind=exc.kind, **exc.context)
    return _error_response(404, exc.message)


async def object_not_found_handler(request: Request, exc: ObjectNotFoundError):
    logger.info("Record not found", path=request.url.path, kind="ObjectNotFound")
    return _error_response(404, NotFound.default_message)


async def business_rule_handler(request: Request, exc: BusinessRuleViolation):
    logger.info("Rejected request", path=request.url.path, reason=exc.kind, **exc.context)
    return _error_response(400, exc.message)


async def conflict_handler(request: Request, exc: Conflict):
    logger.warning("Rejected request", path=request.url.path, reason=exc.kind, **exc.context)
    return _error_response(409, exc.message)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", method=request.method, path=request.url.path)
    return _error_response(500, UNEXPECTED_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(ObjectNotFoundError, object_not_found_handler)
    app.add_exception_handler(BusinessRuleViolation, business_rule_handler)
    app.add_exception_handler(Conflict, conflict_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
