"""Unit tests for XML helpers."""
import unittest
from datetime import datetime, timezone

from telnyx_storage.utils.xml import (
    get_nested_value,
    parse_http_date,
    parse_location_constraint,
    parse_timestamp,
    parse_xml
)

LOCATION_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<LocationConstraint xmlns="http://s3.amazonaws.com/doc/2006-03-01/">us-central-1</LocationConstraint>'
)


class TestLocationParsing(unittest.TestCase):
    """Test cases for region token extraction."""

    def test_parse_location_result(self):
        self.assertEqual(parse_location_constraint(LOCATION_XML), "us-central-1")

    def test_extraction_is_idempotent(self):
        first = parse_location_constraint(LOCATION_XML)
        second = parse_location_constraint(LOCATION_XML)
        self.assertEqual(first, second)

    def test_bytes_body(self):
        self.assertEqual(parse_location_constraint(LOCATION_XML.encode("utf-8")), "us-central-1")

    def test_without_namespace_or_declaration(self):
        self.assertEqual(parse_location_constraint("<LocationConstraint>us-east-1</LocationConstraint>"), "us-east-1")

    def test_surrounding_whitespace_is_not_part_of_the_token(self):
        xml = "<LocationConstraint>\n  us-west-1\n</LocationConstraint>"
        self.assertEqual(parse_location_constraint(xml), "us-west-1")

    def test_error_document_has_no_token(self):
        xml = "<Error><Code>NoSuchBucket</Code><RequestId>r</RequestId><HostId>h</HostId></Error>"
        self.assertIsNone(parse_location_constraint(xml))

    def test_empty_element_has_no_token(self):
        self.assertIsNone(parse_location_constraint("<LocationConstraint/>"))

    def test_non_xml_has_no_token(self):
        self.assertIsNone(parse_location_constraint(""))
        self.assertIsNone(parse_location_constraint("us-central-1"))


class TestXmlHelpers(unittest.TestCase):
    """Test cases for generic helpers."""

    def test_parse_xml_forces_repeated_elements_to_lists(self):
        data = parse_xml("<Delete><Object><Key>a</Key></Object></Delete>")
        self.assertEqual(data["Delete"]["Object"], [{"Key": "a"}])

    def test_get_nested_value(self):
        data = {"a": {"b": {"c": 1}}}
        self.assertEqual(get_nested_value(data, ["a", "b", "c"]), 1)
        self.assertIsNone(get_nested_value(data, ["a", "x"]))
        self.assertIsNone(get_nested_value(data, ["a", "b", "c", "d"]))

    def test_parse_timestamp(self):
        self.assertEqual(
            parse_timestamp("2023-08-19T01:21:31.958Z"),
            datetime(2023, 8, 19, 1, 21, 31, 958000, tzinfo=timezone.utc)
        )
        self.assertIsNone(parse_timestamp(None))
        self.assertIsNone(parse_timestamp("yesterday"))

    def test_parse_http_date(self):
        self.assertEqual(
            parse_http_date("Tue, 14 Nov 2023 01:51:59 GMT"),
            datetime(2023, 11, 14, 1, 51, 59, tzinfo=timezone.utc)
        )

    def test_parse_http_date_falls_back_to_iso(self):
        self.assertEqual(
            parse_http_date("2023-11-14T01:51:59Z"),
            datetime(2023, 11, 14, 1, 51, 59, tzinfo=timezone.utc)
        )

    def test_parse_http_date_is_lenient(self):
        self.assertIsNone(parse_http_date("not a date"))
        self.assertIsNone(parse_http_date(""))
        self.assertIsNone(parse_http_date(None))


if __name__ == '__main__':
    unittest.main()
