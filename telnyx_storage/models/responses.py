"""Response documents returned by the storage API."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Union

from ..utils.xml import as_list, element_text, get_nested_value, parse_http_date, parse_timestamp, parse_xml


@dataclass
class Owner:
    """Account that owns the listed buckets"""
    id: Optional[str] = None
    display_name: Optional[str] = None


@dataclass
class Bucket:
    name: str
    creation_date: Optional[datetime] = None


@dataclass
class ListAllMyBucketsResult:
    """Result of listing every bucket on the account"""
    owner: Optional[Owner] = None
    buckets: List[Bucket] = field(default_factory=list)

    @classmethod
    def from_xml(cls, document: Union[str, bytes]) -> "ListAllMyBucketsResult":
        """Build from a ListAllMyBucketsResult document.

        Raises:
            ValueError: If the document is not a ListAllMyBucketsResult
        """
        data = parse_xml(document)
        root = data.get("ListAllMyBucketsResult") if data else None
        if root is None:
            raise ValueError("Invalid ListAllMyBucketsResult XML format")

        owner = None
        if root.get("Owner") is not None:
            owner = Owner(
                id=element_text(root["Owner"].get("ID")),
                display_name=element_text(root["Owner"].get("DisplayName"))
            )

        buckets = [
            Bucket(
                name=element_text(bucket.get("Name")),
                creation_date=parse_timestamp(element_text(bucket.get("CreationDate")))
            )
            for bucket in as_list(get_nested_value(root, ["Buckets", "Bucket"]))
        ]
        return cls(owner=owner, buckets=buckets)


@dataclass
class Content:
    """One object entry in a bucket listing"""
    key: str
    size: int = 0
    last_modified: Optional[datetime] = None


@dataclass
class ListBucketResult:
    """Result of listing the objects in a bucket.

    An empty bucket has no Contents elements and yields an empty list.
    """
    name: Optional[str] = None
    contents: List[Content] = field(default_factory=list)

    @classmethod
    def from_xml(cls, document: Union[str, bytes]) -> "ListBucketResult":
        """Build from a ListBucketResult document.

        Raises:
            ValueError: If the document is not a ListBucketResult
        """
        data = parse_xml(document)
        root = data.get("ListBucketResult") if data else None
        if root is None:
            raise ValueError("Invalid ListBucketResult XML format")

        contents = [
            Content(
                key=element_text(entry.get("Key")),
                size=int(element_text(entry.get("Size")) or 0),
                last_modified=parse_timestamp(element_text(entry.get("LastModified")))
            )
            for entry in as_list(root.get("Contents"))
            if entry is not None
        ]
        return cls(name=element_text(root.get("Name")), contents=contents)


@dataclass
class ErrorResponse:
    """The <Error> envelope the provider returns on failures"""
    code: str = ""
    request_id: str = ""
    host_id: str = ""
    message: Optional[str] = None
    bucket_name: Optional[str] = None

    @classmethod
    def from_xml(cls, document: Union[str, bytes]) -> Optional["ErrorResponse"]:
        """Build from an <Error> document; None if the document is not one."""
        data = parse_xml(document)
        root = data.get("Error") if data else None
        if not isinstance(root, dict):
            return None
        return cls(
            code=element_text(root.get("Code")) or "",
            request_id=element_text(root.get("RequestId")) or "",
            host_id=element_text(root.get("HostId")) or "",
            message=element_text(root.get("Message")),
            bucket_name=element_text(root.get("BucketName"))
        )


@dataclass
class HeadObjectResponse:
    """Object metadata returned by a HEAD request; missing headers are None"""
    accept_ranges: Optional[str] = None
    etag: Optional[str] = None
    request_id: Optional[str] = None
    date: Optional[datetime] = None
    server: Optional[str] = None

    @classmethod
    def from_headers(cls, headers: Dict[str, str]) -> "HeadObjectResponse":
        """Map response headers (lower-cased names) onto the expected fields."""
        return cls(
            accept_ranges=headers.get("accept-ranges"),
            etag=headers.get("etag"),
            request_id=headers.get("x-amz-request-id"),
            date=parse_http_date(headers.get("date")),
            server=headers.get("server")
        )
