"""
Encoding of request payloads and decoding of response bodies.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import OneFuseDecodeError

T = TypeVar("T", bound=BaseModel)


def encode_payload(payload: BaseModel) -> str:
    """Serialize by wire alias, leaving out fields still at their default."""
    return payload.model_dump_json(by_alias=True, exclude_defaults=True)


def decode_json(
    resp: httpx.Response, *, operation: Optional[str] = None
) -> Dict[str, Any]:
    # Handle empty responses (204 No Content, etc.)
    if not resp.content:
        return {}

    where = f"{resp.request.method} {resp.request.url}"
    prefix = f"{operation}: " if operation else ""
    try:
        data = resp.json()
    except ValueError as exc:
        snippet = (resp.text or "")[:500]
        raise OneFuseDecodeError(
            f"{prefix}Expected JSON from {where}, got non-JSON body snippet: "
            f"{snippet!r}"
        ) from exc

    if not isinstance(data, dict):
        raise OneFuseDecodeError(
            f"{prefix}Expected top-level JSON object from {where}, "
            f"got {type(data).__name__}"
        )
    return data


def decode_record(
    model: Type[T], payload: Any, *, operation: Optional[str] = None
) -> T:
    prefix = f"{operation}: " if operation else ""
    if not isinstance(payload, dict) or not payload:
        raise OneFuseDecodeError(
            f"{prefix}Cannot decode {model.__name__} from "
            f"{type(payload).__name__ if payload else 'an empty body'}"
        )
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise OneFuseDecodeError(
            f"{prefix}Response did not match model {model.__name__}: {exc}"
        ) from exc


__all__ = ["encode_payload", "decode_json", "decode_record"]
