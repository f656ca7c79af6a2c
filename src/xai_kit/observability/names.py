# src/xai_kit/observability/names.py

"""Standard metric names for xai-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# API client metrics
# ============================================================================

# Duration
API_REQUEST_DURATION = "api_request_duration"

# Counters
API_REQUESTS_TOTAL = "api_requests_total"
API_ERRORS_TOTAL = "api_errors_total"

# Counters (liveness probe outcomes)
API_HEALTH_CHECKS_TOTAL = "api_health_checks_total"


# ============================================================================
# Assistant metrics
# ============================================================================

# Duration
ASSISTANT_TASK_DURATION = "assistant_task_duration"

# Counters
ASSISTANT_TASKS_TOTAL = "assistant_tasks_total"
ASSISTANT_ERRORS_TOTAL = "assistant_errors_total"
