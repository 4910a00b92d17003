"""Unit tests for client metrics."""
import pytest
from prometheus_client import REGISTRY

from telnyx_storage import ValidityFailure


def sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestRoutingMetrics:
    @pytest.mark.asyncio
    async def test_cache_access_and_lookup_outcomes(self, client, fake_storage):
        hits = sample('telnyx_storage_endpoint_cache_access_total', result='hit')
        misses = sample('telnyx_storage_endpoint_cache_access_total', result='miss')
        found = sample('telnyx_storage_location_lookups_total', outcome='found')

        fake_storage.add_bucket("bucket-one", "us-east-1")
        await client.head_bucket("bucket-one")
        await client.get_bucket_location("bucket-one")
        await client.head_bucket("bucket-one")

        assert sample('telnyx_storage_endpoint_cache_access_total', result='miss') == misses + 1
        assert sample('telnyx_storage_endpoint_cache_access_total', result='hit') == hits + 1
        assert sample('telnyx_storage_location_lookups_total', outcome='found') == found + 2

    @pytest.mark.asyncio
    async def test_invalidation_is_counted(self, client, fake_storage):
        before = sample('telnyx_storage_endpoint_cache_invalidations_total')
        fake_storage.add_bucket("bucket-one", "us-east-1")
        client.endpoint_cache.set("bucket-one", "us-east-1")

        await client.delete_bucket("bucket-one")

        assert sample('telnyx_storage_endpoint_cache_invalidations_total') == before + 1


class TestOperationMetrics:
    @pytest.mark.asyncio
    async def test_operation_outcomes(self, client):
        success = sample('telnyx_storage_operations_total', operation='list_buckets', status='success')
        errors = sample('telnyx_storage_operations_total', operation='create_bucket', status='error')

        await client.list_buckets()
        with pytest.raises(ValidityFailure):
            await client.create_bucket("Not_Valid")

        assert sample('telnyx_storage_operations_total', operation='list_buckets', status='success') == success + 1
        assert sample('telnyx_storage_operations_total', operation='create_bucket', status='error') == errors + 1
        assert sample('telnyx_storage_operation_latency_seconds_count', operation='list_buckets') >= 1
