"""Unit tests for the endpoint cache."""
import unittest

from telnyx_storage.routing.cache import EndpointCache


class TestEndpointCache(unittest.TestCase):
    """Test cases for endpoint cache."""

    def setUp(self):
        """Set up test environment."""
        self.cache = EndpointCache()

    def test_set_and_get(self):
        self.cache.set("bucket-one", "us-central-1")
        self.assertEqual(self.cache.get("bucket-one"), "us-central-1")
        self.assertIn("bucket-one", self.cache)
        self.assertEqual(len(self.cache), 1)

    def test_missing_entry(self):
        self.assertIsNone(self.cache.get("bucket-one"))
        self.assertNotIn("bucket-one", self.cache)

    def test_keys_are_case_insensitive(self):
        self.cache.set("Bucket-One", "us-east-1")
        self.assertEqual(self.cache.get("bucket-one"), "us-east-1")
        self.assertEqual(self.cache.get("BUCKET-ONE"), "us-east-1")

        self.cache.set("bucket-one", "us-west-1")
        self.assertEqual(len(self.cache), 1)
        self.assertEqual(self.cache.get("Bucket-One"), "us-west-1")

    def test_remove(self):
        self.cache.set("bucket-one", "us-central-1")
        self.assertTrue(self.cache.remove("BUCKET-ONE"))
        self.assertIsNone(self.cache.get("bucket-one"))

    def test_remove_is_idempotent(self):
        self.assertFalse(self.cache.remove("bucket-one"))
        self.cache.set("bucket-one", "us-central-1")
        self.assertTrue(self.cache.remove("bucket-one"))
        self.assertFalse(self.cache.remove("bucket-one"))

    def test_refresh_updates_existing_entry(self):
        self.cache.set("bucket-one", "us-central-1")
        self.assertTrue(self.cache.refresh("bucket-one", "us-east-1"))
        self.assertEqual(self.cache.get("bucket-one"), "us-east-1")

    def test_refresh_does_not_resurrect_removed_entry(self):
        self.cache.set("bucket-one", "us-central-1")
        self.cache.remove("bucket-one")
        self.assertFalse(self.cache.refresh("bucket-one", "us-central-1"))
        self.assertNotIn("bucket-one", self.cache)

    def test_clear(self):
        self.cache.set("bucket-one", "us-central-1")
        self.cache.set("bucket-two", "us-east-1")
        self.cache.clear()
        self.assertEqual(len(self.cache), 0)


if __name__ == '__main__':
    unittest.main()
