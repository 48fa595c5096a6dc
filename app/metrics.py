"""Prometheus metrics definitions for the venue registry.

Exposes metrics for:
1. HTTP API metrics (requests, latency, errors)
2. Venue storage operations (create, update, delete)
3. Listing and CSV export activity
"""
from prometheus_client import Counter, Histogram, Gauge, Info

# =============================================================================
# HTTP API METRICS
# =============================================================================

# Request counter with method, endpoint, and status labels
HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status_code"],
)

# Request latency histogram
HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# Active requests gauge
HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "http_requests_in_progress",
    "Number of HTTP requests currently being processed",
    ["method", "endpoint"],
)

# Request size histogram
HTTP_REQUEST_SIZE_BYTES = Histogram(
    "http_request_size_bytes",
    "HTTP request body size in bytes",
    ["method", "endpoint"],
    buckets=(100, 500, 1000, 5000, 10000, 50000, 100000),
)

# Response size histogram
HTTP_RESPONSE_SIZE_BYTES = Histogram(
    "http_response_size_bytes",
    "HTTP response body size in bytes",
    ["method", "endpoint"],
    buckets=(100, 500, 1000, 5000, 10000, 50000, 100000, 500000),
)

# =============================================================================
# VENUE STORAGE METRICS
# =============================================================================

VENUE_OPERATIONS_TOTAL = Counter(
    "venue_operations_total",
    "Venue write operations",
    ["operation", "status"],  # operation: create, update, delete; status: success, not_found, error
)

# =============================================================================
# LISTING / EXPORT METRICS
# =============================================================================

# Venues matching the last listing request
VENUES_LISTED = Gauge(
    "venues_listed",
    "Number of venues matching the most recent listing filters",
)

VENUE_EXPORTS_TOTAL = Counter(
    "venue_exports_total",
    "CSV exports delivered",
    ["kind"],  # kind: listing, operator
)

VENUE_EXPORT_ROWS = Histogram(
    "venue_export_rows",
    "Rows per CSV export",
    buckets=(0, 10, 50, 100, 500, 1000, 5000),
)

# =============================================================================
# APPLICATION INFO
# =============================================================================

APP_INFO = Info(
    "salles_registry",
    "Venue registry application information",
)

# Set application info at module load
APP_INFO.info({
    "version": "1.0.0",
    "description": "Gaming venue registry: filtering, reporting periods and CSV exports",
})
