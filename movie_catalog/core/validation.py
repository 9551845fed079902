"""
Structural validation of movie payloads.

Payloads arrive as untyped JSON objects. Validation checks the key set
first, then the primitive type of each field, and returns the payload
unchanged on success.
"""

from typing import Any, Mapping

from movie_catalog.core.errors import ValidationError

REQUIRED_KEYS = ("name", "duration", "price")
OPTIONAL_KEYS = ("description",)
UPDATE_KEYS = ("name", "description", "duration", "price")

TEXT_FIELDS = ("name", "description")
NUMBER_FIELDS = ("duration", "price")


def _join(keys) -> str:
    return ",".join(str(key) for key in keys)


def _is_number(value: Any) -> bool:
    # JSON true/false decode to bool, which is an int subclass
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_type(field: str, value: Any) -> None:
    if field in TEXT_FIELDS and not isinstance(value, str):
        raise ValidationError(f'Type of "{field}" must be string')
    if field in NUMBER_FIELDS and not _is_number(value):
        raise ValidationError(f'Type of "{field}" must be number')


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return payload


def validate_movie_create(payload: Any) -> Mapping[str, Any]:
    """
    Validate a create payload.

    The key set must be exactly ``name``, ``duration`` and ``price``, plus
    an optional ``description``. ``description`` is type-checked only when
    it is truthy, so ``null`` or ``""`` is stored as given.

    Raises:
        ValidationError: On missing keys, unsolicited keys or wrong types.
    """
    payload = _require_mapping(payload)
    payload_keys = list(payload.keys())

    if not all(key in payload for key in REQUIRED_KEYS):
        raise ValidationError(
            f'Required keys are "{_join(REQUIRED_KEYS)}". '
            f'You sent "{_join(payload_keys)}"'
        )

    allowed = REQUIRED_KEYS + OPTIONAL_KEYS
    extra_keys = [key for key in payload_keys if key not in allowed]
    if extra_keys:
        raise ValidationError(
            f'Your request has an unsolicited key "{_join(extra_keys)}". '
            f'We only accept "{_join(allowed)}".'
        )

    _check_type("name", payload["name"])
    if payload.get("description"):
        _check_type("description", payload["description"])
    _check_type("duration", payload["duration"])
    _check_type("price", payload["price"])

    return payload


def validate_movie_update(payload: Any) -> Mapping[str, Any]:
    """
    Validate a partial update payload.

    Every key is optional but must be one of ``UPDATE_KEYS``. A field is
    type-checked only when its value is truthy, so ``0``, ``""`` and
    ``null`` pass unchecked.

    Raises:
        ValidationError: On unsolicited keys or wrong types.
    """
    payload = _require_mapping(payload)

    extra_keys = [key for key in payload if key not in UPDATE_KEYS]
    if extra_keys:
        raise ValidationError(
            f'Your request has an unsolicited key "{_join(extra_keys)}". '
            f'We only accept "{_join(UPDATE_KEYS)}".'
        )

    for field in UPDATE_KEYS:
        value = payload.get(field)
        if value:
            _check_type(field, value)

    return payload


def reject_client_id(payload: Mapping[str, Any], message: str) -> None:
    """Raise ValidationError if the client tried to set ``id``."""
    if payload.get("id"):
        raise ValidationError(message)
