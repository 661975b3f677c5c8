"""
Ownership gate: the one check applied before reading or mutating an owned row.
A missing row and someone else's row are reported identically.
"""

from typing import Protocol, TypeVar

from rentkaro.core.exceptions import NotFoundError


class Owned(Protocol):
    owner_id: int | None


R = TypeVar("R", bound=Owned)


def authorize(user_id: int, resource: R | None, message: str = "Not found") -> R:
    """Return `resource` if `user_id` owns it, else raise NotFoundError."""
    if resource is None or resource.owner_id is None or resource.owner_id != user_id:
        raise NotFoundError(message)
    return resource
