# src/aoc_kit/observability/names.py

"""Standard metric names for aoc-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Input Loader Metrics
# ============================================================================

# Duration (labels: operation)
INPUT_READ_DURATION = "input_read_duration"

# Gauges
INPUT_BYTES_READ = "input_bytes_read"

# Counters
INPUT_LINES_PARSED = "input_lines_parsed"
INPUT_ERRORS_TOTAL = "input_errors_total"


# ============================================================================
# Solver Metrics
# ============================================================================

# Duration (labels: day)
SOLVER_DURATION = "solver_duration"

# Counters
SOLVER_RUNS_TOTAL = "solver_runs_total"
SOLVER_ERRORS_TOTAL = "solver_errors_total"
