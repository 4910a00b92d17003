"""XML handling utilities for S3-compatible documents."""

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, List, Optional, Union
from xml.parsers.expat import ExpatError

import xmltodict

logger = logging.getLogger(__name__)

S3_NAMESPACE = "http://s3.amazonaws.com/doc/2006-03-01/"

# Elements that repeat inside a parent and must always parse to a list
REPEATED_ELEMENTS = ("Bucket", "Contents", "Object")


def parse_xml(document: Union[str, bytes]) -> Optional[dict]:
    """Parse an XML document into a dictionary.

    Args:
        document: Raw XML text or bytes

    Returns:
        dict: Parsed XML data, or None if the document is empty or not XML
    """
    if not document or not document.strip():
        return None
    try:
        return xmltodict.parse(document, force_list=REPEATED_ELEMENTS)
    except ExpatError as e:
        logger.debug(f"Response body is not XML: {str(e)}")
        return None


def unparse_xml(data: dict, declaration: bool = True) -> str:
    """Serialize a dictionary to an XML document."""
    return xmltodict.unparse(data, full_document=declaration)


def get_nested_value(data, path):
    """Get a nested value from a dictionary using a path.

    Args:
        data (dict): Dictionary to traverse
        path (list): List of keys forming the path

    Returns:
        Any: Value at the path or None if not found
    """
    current = data
    for key in path:
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def element_text(value: Any) -> Optional[str]:
    """Inner text of a parsed element, whether or not it carried attributes."""
    if isinstance(value, dict):
        return value.get("#text")
    return value


def as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def parse_location_constraint(document: Union[str, bytes]) -> Optional[str]:
    """Extract the region token from a GetBucketLocation response.

    Returns:
        str: Inner text of the LocationConstraint element, or None if absent
    """
    data = parse_xml(document)
    if data is None:
        return None
    token = element_text(data.get("LocationConstraint"))
    if not token:
        return None
    return token.strip()


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp as used in listing documents."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparseable timestamp: {value}")
        return None


def parse_http_date(value: Optional[str]) -> Optional[datetime]:
    """Leniently parse an HTTP Date header; None if it cannot be parsed."""
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return parse_timestamp(value)
    if parsed is None:
        return parse_timestamp(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
