"""
Encoding of a car's additional-photos list and reconciliation of its photo set.

The list is stored in a single text column as a versioned JSON document::

    {"v": 1, "photos": ["/uploads/cars/a.jpg", "/uploads/cars/b.png"]}

A bare JSON array (the format written by earlier versions) is still accepted
when decoding.
"""
import json
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

PHOTO_LIST_VERSION = 1


class MalformedPhotoListError(ValueError):
    """Raised by strict decoding when a stored photo list cannot be read."""


def encode_photo_list(photos: Sequence[str]) -> Optional[str]:
    """Serialize the additional photos. An empty list is stored as NULL."""
    if not photos:
        return None
    return json.dumps({"v": PHOTO_LIST_VERSION, "photos": list(photos)})


def decode_photo_list_strict(payload: Optional[str]) -> List[str]:
    if payload is None or not payload.strip():
        return []
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedPhotoListError(f"Invalid photo list payload: {e}") from e

    if isinstance(data, dict):
        if data.get("v") != PHOTO_LIST_VERSION:
            raise MalformedPhotoListError(f"Unsupported photo list version: {data.get('v')!r}")
        data = data.get("photos")

    if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
        raise MalformedPhotoListError("Photo list must be a list of strings")
    return [p for p in data if p]


def decode_photo_list(payload: Optional[str]) -> List[str]:
    """Decode a stored list, degrading to an empty list when the payload is corrupt."""
    try:
        return decode_photo_list_strict(payload)
    except MalformedPhotoListError as e:
        logger.warning(f"Ignoring malformed additional photos payload: {e}")
        return []


def current_photos(photo_path: Optional[str], additional_payload: Optional[str]) -> List[str]:
    """The ordered photo sequence of a car: primary first, then the additional ones."""
    photos = []
    if photo_path:
        photos.append(photo_path)
    photos.extend(decode_photo_list(additional_payload))
    return _unique(photos)


def reconcile_photos(
    current: Sequence[str],
    removed: Iterable[str],
    added: Sequence[str],
) -> Tuple[List[str], Optional[str], List[str]]:
    """
    Compute the next photo state.

    Survivors keep their order and come before new uploads. Removal paths
    that are not part of ``current`` are ignored.

    Returns:
        (paths actually removed, new primary photo, new additional photos)
    """
    removed_set = set(removed)
    dropped = [p for p in current if p in removed_set]
    photos = _unique([p for p in current if p not in removed_set] + list(added))

    if not photos:
        return dropped, None, []
    return dropped, photos[0], photos[1:]


def _unique(paths: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(paths))
