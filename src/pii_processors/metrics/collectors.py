"""Prometheus metrics collectors for pii-processors.

Defines the metrics a driver can scrape while an anonymization run is in
progress.
"""

from prometheus_client import Counter, Gauge, Histogram

# Dispatch metrics
VALUES_PROCESSED = Counter(
    "pii_processors_values_processed_total",
    "Total column values processed",
    ["processor"],
)

PROCESSOR_ERRORS = Counter(
    "pii_processors_errors_total",
    "Processor failures",
    ["processor", "error_type"],
)

# Similarity gate
SIMILARITY_ATTEMPTS = Histogram(
    "pii_processors_similarity_attempts",
    "Synthetic candidates drawn before one cleared the similarity threshold",
    buckets=[1, 2, 5, 10, 25, 50, 75, 100],
)

# Consistency tables
CONSISTENCY_TABLE_SIZE = Gauge(
    "pii_processors_consistency_table_size",
    "Remembered replacements per consistency table in the most recently active run",
    ["table"],
)
