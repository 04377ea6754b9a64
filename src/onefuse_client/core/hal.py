from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

from .errors import LinkResolutionError, OneFuseDecodeError


def get_link(payload: Dict[str, Any], relation: str) -> Optional[Dict[str, Any]]:
    """
    Safely retrieves a link object from the _links dictionary.
    """
    if not payload or not isinstance(payload.get("_links"), dict):
        return None
    link = payload["_links"].get(relation)
    return link if isinstance(link, dict) else None


def get_link_href(payload: Dict[str, Any], relation: str) -> Optional[str]:
    """
    Extracts the 'href' (URL) from a specific link relation.
    Example: get_link_href(policy_json, 'workspace')
             -> '/api/v3/onefuse/workspaces/2/'
    """
    link = get_link(payload, relation)
    return link.get("href") if link else None


def get_link_title(payload: Dict[str, Any], relation: str) -> Optional[str]:
    """
    Extracts the 'title' (readable name) from a specific link relation.
    Example: get_link_title(policy_json, 'workspace') -> 'Default'
    """
    link = get_link(payload, relation)
    return link.get("title") if link else None


def get_embedded(payload: Dict[str, Any], relation: str) -> Any:
    """
    Extracts an embedded resource (or list of resources) from _embedded.
    Example: get_embedded(list_json, 'workspaces') -> [{'id': 2, ...}]
    """
    if not payload or not isinstance(payload.get("_embedded"), dict):
        return None
    return payload["_embedded"].get(relation)


def embedded_items(payload: Dict[str, Any], relation: str) -> List[Dict[str, Any]]:
    """
    Extract the named array from a HAL collection payload.
    A missing _embedded block or relation is an empty collection; a relation
    that is present but not a list is malformed.
    """
    items = get_embedded(payload, relation)
    if items is None:
        return []
    if not isinstance(items, list):
        raise OneFuseDecodeError(f"Expected _embedded.{relation} to be a list.")
    return [i for i in items if isinstance(i, dict)]


def parse_id_from_href(href: Optional[str]) -> int:
    """
    Extracts the ID from a OneFuse link of the shape '.../<resource_type>/<id>/'.

    The path is split on '/' and the second-to-last segment (the one before
    the empty segment left by the trailing slash) is parsed as an integer:

        '/api/v3/onefuse/endpoints/42/' -> 42
        '/api/v3/onefuse/endpoints/42'  -> LinkResolutionError ('endpoints')
        '42'                            -> LinkResolutionError (one segment)
    """
    if not href:
        raise LinkResolutionError("Link has no href.", href=href)

    segments = urlsplit(href).path.split("/")
    if len(segments) < 2:
        raise LinkResolutionError(
            f"Link {href!r} has fewer than two path segments.", href=href
        )

    candidate = segments[-2]
    if not (candidate.isascii() and candidate.isdigit()):
        raise LinkResolutionError(
            f"Link {href!r} does not end in a numeric id segment "
            f"(found {candidate!r}).",
            href=href,
        )
    return int(candidate)


def link_id(payload: Dict[str, Any], relation: str) -> Optional[int]:
    """
    ID of the resource a relation points at, or None if the relation is absent.
    A present but malformed href raises LinkResolutionError.
    """
    link = get_link(payload, relation)
    if link is None or not link.get("href"):
        return None
    return parse_id_from_href(link["href"])


__all__ = [
    "get_link",
    "get_link_href",
    "get_link_title",
    "get_embedded",
    "embedded_items",
    "parse_id_from_href",
    "link_id",
]
