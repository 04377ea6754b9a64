"""
Response classification.

Status >= 500 is a server error, >= 400 a client error, anything lower a
success. Failure bodies are read and the response closed during
classification; success bodies are left for the caller to read.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import httpx

from .errors import OneFuseHTTPClientError, OneFuseHTTPError, OneFuseHTTPServerError


class Verdict(str, Enum):
    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class Classification:
    verdict: Verdict
    status_code: int
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.verdict is Verdict.SUCCESS


def classify_response(resp: httpx.Response) -> Classification:
    status = resp.status_code
    if status >= 500:
        verdict = Verdict.SERVER_ERROR
    elif status >= 400:
        verdict = Verdict.CLIENT_ERROR
    else:
        return Classification(verdict=Verdict.SUCCESS, status_code=status)

    try:
        detail = resp.text
    finally:
        resp.close()
    return Classification(verdict=verdict, status_code=status, detail=detail)


def to_http_error(
    classification: Classification,
    *,
    method: str,
    url: str,
    operation: Optional[str] = None,
) -> OneFuseHTTPError:
    error_cls = (
        OneFuseHTTPServerError
        if classification.verdict is Verdict.SERVER_ERROR
        else OneFuseHTTPClientError
    )
    return error_cls(
        status_code=classification.status_code,
        method=method,
        url=url,
        operation=operation,
        response_text=classification.detail,
    )


def raise_for_classification(
    classification: Classification,
    *,
    method: str,
    url: str,
    operation: Optional[str] = None,
) -> None:
    if not classification.ok:
        raise to_http_error(classification, method=method, url=url, operation=operation)


__all__ = [
    "Verdict",
    "Classification",
    "classify_response",
    "to_http_error",
    "raise_for_classification",
]
