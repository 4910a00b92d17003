from prometheus_client import Counter, Histogram
import time

# Endpoint routing metrics
ENDPOINT_CACHE_ACCESS = Counter(
    'telnyx_storage_endpoint_cache_access_total',
    'Endpoint cache accesses',
    ['result']  # 'hit' or 'miss'
)

ENDPOINT_CACHE_INVALIDATIONS = Counter(
    'telnyx_storage_endpoint_cache_invalidations_total',
    'Cached bucket endpoints removed after a bucket delete'
)

LOCATION_LOOKUPS = Counter(
    'telnyx_storage_location_lookups_total',
    'Bucket location lookups against the default endpoint',
    ['outcome']  # 'found', 'empty' or 'error'
)

# Operation metrics
OPERATION_LATENCY = Histogram(
    'telnyx_storage_operation_latency_seconds',
    'Time spent in client operations',
    ['operation'],
    buckets=[0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0]
)

OPERATION_COUNTER = Counter(
    'telnyx_storage_operations_total',
    'Total number of client operations',
    ['operation', 'status']
)


def record_cache_access(hit):
    """Record endpoint cache hit/miss"""
    ENDPOINT_CACHE_ACCESS.labels(result='hit' if hit else 'miss').inc()


def record_cache_invalidation():
    ENDPOINT_CACHE_INVALIDATIONS.inc()


def record_location_lookup(outcome):
    LOCATION_LOOKUPS.labels(outcome=outcome).inc()


def track_operation(operation_name):
    """Context manager to track operation latency and count"""
    return OperationTracker(operation_name)


class OperationTracker:
    def __init__(self, operation_name):
        self.operation_name = operation_name
        self.start_time = None

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time
        OPERATION_LATENCY.labels(operation=self.operation_name).observe(duration)

        status = 'error' if exc_type else 'success'
        OPERATION_COUNTER.labels(operation=self.operation_name, status=status).inc()
