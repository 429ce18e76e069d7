"""Metrics definitions for the listing filter engine."""

from prometheus_client import Counter, Histogram


# Filter Metrics
FILTER_EVALUATIONS_TOTAL = Counter(
    'filter_evaluations_total',
    'Total filter evaluations over the catalog',
    ['has_query']
)

FILTER_EVALUATION_DURATION_SECONDS = Histogram(
    'filter_evaluation_duration_seconds',
    'Filter evaluation duration',
    ['has_query'],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5]
)

FILTER_RESULTS_COUNT = Histogram(
    'filter_results_count',
    'Number of catalog records passing the filters'
)

ACTIVE_FILTERS_COUNT = Histogram(
    'active_filters_count',
    'Number of active filters per evaluation',
    buckets=[0, 1, 2, 3, 4, 5, 6, 7, 8]
)

ZERO_RESULTS_FILTERS_TOTAL = Counter(
    'zero_results_filters_total',
    'Total filter evaluations with zero results'
)


# Suggestion Metrics
SEARCH_SUGGESTIONS_TOTAL = Counter(
    'search_suggestions_total',
    'Total search suggestion requests',
    ['outcome']
)


def record_filter_evaluation(duration: float, result_count: int, active_filters: int, has_query: bool):
    """Record filter evaluation metrics."""
    label = "true" if has_query else "false"

    FILTER_EVALUATIONS_TOTAL.labels(has_query=label).inc()
    FILTER_EVALUATION_DURATION_SECONDS.labels(has_query=label).observe(duration)
    FILTER_RESULTS_COUNT.observe(result_count)
    ACTIVE_FILTERS_COUNT.observe(active_filters)

    if result_count == 0:
        ZERO_RESULTS_FILTERS_TOTAL.inc()


def record_suggestion_request(suggestion_count: int):
    """Record a search suggestion request."""
    outcome = "hit" if suggestion_count > 0 else "empty"
    SEARCH_SUGGESTIONS_TOTAL.labels(outcome=outcome).inc()
