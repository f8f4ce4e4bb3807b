"""
Pin codec for documents exchanged with the pin store.

This module provides pure functions for turning JSON pin documents into
Pin models and back. Missing or null fields are not errors; they decode
to None. Only input that is not JSON, or that does not have the shape of
a pin document, is rejected with DecodeError.
"""

import json
import logging
from typing import Any, Iterable, List, Optional, Union

from pydantic import ValidationError

from compass.config import settings
from compass.models.pin import Pin

logger = logging.getLogger(__name__)

RawDocument = Union[str, bytes, bytearray, dict]


class DecodeError(ValueError):
    """Raised when a pin document is malformed or has the wrong shape."""


class EncodeError(ValueError):
    """Raised when a pin cannot be written as standard JSON."""


def _dump(document: Any, indent: Optional[int]) -> str:
    # Store clients reject the non-standard NaN and Infinity literals
    try:
        return json.dumps(document, indent=indent, allow_nan=False)
    except ValueError as e:
        logger.warning(f"Refused to encode pin document: {e}")
        raise EncodeError(f"Pin has a non-finite number: {e}") from e


def _load(data: RawDocument) -> Any:
    """Parse raw JSON text, passing already-parsed documents through."""
    if isinstance(data, (dict, list)):
        return data
    if not isinstance(data, (str, bytes, bytearray)):
        raise DecodeError(f"Expected JSON text or a parsed document, got {type(data).__name__}")

    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        logger.warning(f"Rejected pin document, invalid JSON: {e}")
        raise DecodeError(f"Invalid JSON: {e}") from e


def _validate(document: Any) -> Pin:
    if not isinstance(document, dict):
        raise DecodeError(f"Pin document must be a JSON object, got {type(document).__name__}")

    try:
        return Pin.model_validate(document)
    except ValidationError as e:
        logger.warning(f"Rejected pin document with {e.error_count()} field error(s)")
        raise DecodeError(f"Pin document has the wrong shape: {e}") from e


def decode_pin(data: Union[RawDocument, list]) -> Pin:
    """
    Decode a single pin document.

    Args:
        data: JSON text (str or bytes) or an already-parsed dict

    Returns:
        Pin with absent or null fields set to None

    Raises:
        DecodeError: If the input is not JSON or not a pin-shaped object
    """
    return _validate(_load(data))


def decode_pins(data: Union[RawDocument, list]) -> List[Pin]:
    """
    Decode a JSON array of pin documents.

    Raises:
        DecodeError: If the top level is not an array, or any element
            fails to decode. The message names the failing index.
    """
    documents = _load(data)
    if not isinstance(documents, list):
        raise DecodeError(f"Pin list must be a JSON array, got {type(documents).__name__}")

    pins = []
    for index, document in enumerate(documents):
        try:
            pins.append(_validate(document))
        except DecodeError as e:
            raise DecodeError(f"Pin at index {index}: {e}") from e.__cause__

    logger.debug(f"Decoded {len(pins)} pins")
    return pins


def pin_to_document(pin: Pin, omit_absent: Optional[bool] = None) -> dict:
    """
    Convert a Pin to a plain dict keyed by the stored document's field names.

    Args:
        pin: Pin to convert
        omit_absent: Drop None fields instead of keeping them as null.
            Defaults to settings.omit_absent_fields.
    """
    if omit_absent is None:
        omit_absent = settings.omit_absent_fields
    return pin.model_dump(mode="json", by_alias=True, exclude_none=omit_absent)


def encode_pin(pin: Pin, omit_absent: Optional[bool] = None, indent: Optional[int] = None) -> str:
    """
    Encode a Pin as JSON text. The result decodes back to an equal Pin.

    Raises:
        EncodeError: If a coordinate is NaN or infinite
    """
    return _dump(pin_to_document(pin, omit_absent), indent)


def encode_pins(pins: Iterable[Pin], omit_absent: Optional[bool] = None, indent: Optional[int] = None) -> str:
    """Encode pins as a JSON array."""
    return _dump([pin_to_document(pin, omit_absent) for pin in pins], indent)
