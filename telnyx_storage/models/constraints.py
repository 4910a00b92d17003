"""Regions a bucket can be assigned to."""
from enum import Enum
from typing import Optional


class LocationConstraint(Enum):
    """Region a bucket is created in; the value is the wire-level token."""
    CENTRAL = "us-central-1"
    EAST = "us-east-1"
    WEST = "us-west-1"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: Optional[str]) -> Optional["LocationConstraint"]:
        """Decode a region token returned by the provider; None if unrecognised."""
        if not token:
            return None
        try:
            return cls(token.strip().lower())
        except ValueError:
            return None
