"""The response envelope shared by every endpoint."""

from typing import Any

SUCCESS = "Success"
ERROR = "Error"


def to_envelope(message, data: Any = None, *, error: bool = False, errors: dict | None = None) -> dict:
    """Wrap ``data`` as ``{status, message, data}``.

    ``message`` may be a single string or a list of strings; it is always
    reported as a list. Error envelopes never carry data. Field-level
    validation messages go under ``errors``.
    """
    messages = [message] if isinstance(message, str) else list(message)

    envelope = {
        "status": ERROR if error else SUCCESS,
        "message": messages,
        "data": None if error else data,
    }
    if errors:
        envelope["errors"] = errors
    return envelope
