"""Prometheus metrics definitions"""

from prometheus_client import Counter, Histogram, Gauge


# Fairness scoring
decisions_analyzed = Counter(
    'fairlens_decisions_analyzed_total',
    'Decision records passed through a dashboard build'
)

fairness_score = Gauge(
    'fairlens_fairness_score',
    'Most recently computed fairness score (0-100)'
)

biased_decisions_seen = Counter(
    'fairlens_biased_decisions_total',
    'Biased decisions seen, by severity',
    labelnames=['severity']
)

# Fraud alerts
fraud_alerts_summarized = Counter(
    'fairlens_fraud_alerts_summarized_total',
    'Fraud alerts summarized, by risk level',
    labelnames=['risk_level']
)

alert_status_updates = Counter(
    'fairlens_alert_status_updates_total',
    'Alert status changes requested by the user',
    labelnames=['status']  # APPROVED, BLOCKED
)

# Data source
data_source_fetch_latency = Histogram(
    'fairlens_data_source_fetch_latency_seconds',
    'Latency of data source fetches',
    labelnames=['operation'],
    buckets=[0.01, 0.05, 0.1, 0.5, 1, 5]
)

data_source_failures = Counter(
    'fairlens_data_source_failures_total',
    'Data source fetches that still raised DataUnavailable after retries',
    labelnames=['operation']
)

decision_cache_lookups = Counter(
    'fairlens_decision_cache_lookups_total',
    'Decision cache lookups',
    labelnames=['result']  # hit, miss, stale
)

records_rejected = Counter(
    'fairlens_records_rejected_total',
    'Source rows skipped because they failed validation',
    labelnames=['record_type']  # decision, fraud_alert
)
