"""Request documents sent to the storage API."""

from dataclasses import dataclass, field
from typing import List

from ..utils.xml import S3_NAMESPACE, unparse_xml
from .constraints import LocationConstraint


@dataclass
class CreateBucketConfiguration:
    """Body of a create-bucket request"""
    location_constraint: LocationConstraint = LocationConstraint.CENTRAL

    def to_xml(self) -> str:
        return unparse_xml({
            "CreateBucketConfiguration": {
                "@xmlns": S3_NAMESPACE,
                "LocationConstraint": self.location_constraint.token
            }
        })


@dataclass
class DeleteObjectsRequest:
    """Body of a batch delete request"""
    keys: List[str] = field(default_factory=list)

    def to_xml(self) -> str:
        return unparse_xml({
            "Delete": {
                "@xmlns": S3_NAMESPACE,
                "Object": [{"Key": key} for key in self.keys]
            }
        }, declaration=False)
