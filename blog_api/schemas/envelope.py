"""Response Envelope — the uniform {status, data, message} success wrapper.

Invariants:
    - data and message keys are omitted when not supplied (never null)
    - Error envelopes are built by core/errors.py, not here
"""

from typing import Any


def success(data: dict[str, Any] | None = None, message: str | None = None) -> dict:
    envelope: dict[str, Any] = {"status": "success"}
    if data is not None:
        envelope["data"] = data
    if message is not None:
        envelope["message"] = message
    return envelope
