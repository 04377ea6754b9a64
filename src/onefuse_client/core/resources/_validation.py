"""
Local precondition checks shared by the resource modules.
"""

from typing import Any

from onefuse_client.core.errors import OneFuseValidationError


def require_id(resource_id: Any, *, operation: str, field: str = "id") -> int:
    # bool is an int subclass; True must not pass as id 1
    if isinstance(resource_id, bool) or not isinstance(resource_id, int):
        raise OneFuseValidationError(
            f"{field} must be an integer, got {resource_id!r}",
            operation=operation,
            fields=(field,),
        )
    if resource_id <= 0:
        raise OneFuseValidationError(
            f"{field} must be a positive server-issued id, got {resource_id}",
            operation=operation,
            fields=(field,),
        )
    return resource_id


def require_text(value: Any, *, operation: str, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise OneFuseValidationError(
            f"{field} must not be empty", operation=operation, fields=(field,)
        )
    return value
