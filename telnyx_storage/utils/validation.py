"""Bucket name validation."""

import re

BUCKET_NAME_VALIDITY_MESSAGE = (
    "The bucket name must be 3-65 characters long and can consist only of lowercase letters, "
    "numbers, dots and hyphens; each dot-separated label must start and end with a lowercase "
    "letter or number, and the name must not be formatted as an IP address"
)

MIN_BUCKET_NAME_LENGTH = 3
MAX_BUCKET_NAME_LENGTH = 65

_LABEL_PATTERN = re.compile(r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?")
_IP_ADDRESS_PATTERN = re.compile(r"\d{1,3}(?:\.\d{1,3}){3}")


def is_bucket_name_valid(bucket_name: str) -> bool:
    """Validate a bucket name.

    Args:
        bucket_name: Name of the bucket to validate

    Returns:
        bool: True if the name may be used to create a bucket
    """
    if not MIN_BUCKET_NAME_LENGTH <= len(bucket_name) <= MAX_BUCKET_NAME_LENGTH:
        return False

    if _IP_ADDRESS_PATTERN.fullmatch(bucket_name):
        return False

    return all(_LABEL_PATTERN.fullmatch(label) for label in bucket_name.split("."))
