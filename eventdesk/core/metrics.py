"""
Metrics instrumentation for observability.
Collectors live in the default prometheus_client registry; no exporter is started.
"""

from prometheus_client import Counter

# Operation outcomes recorded at the BookingSystem boundary
operations = Counter(
    'eventdesk_operations_total',
    'Operations handled by the booking system',
    ['operation', 'status']  # ok, forbidden, not_found, validation_error
)

# Access control
access_denied = Counter(
    'eventdesk_access_denied_total',
    'Operations rejected by a role gate',
    ['gate']  # member, admin
)


def record_operation(operation: str, status: str):
    """Record an operation outcome. Status: ok, forbidden, not_found, validation_error"""
    operations.labels(operation=operation, status=status).inc()


def record_access_denied(gate: str):
    access_denied.labels(gate=gate).inc()
