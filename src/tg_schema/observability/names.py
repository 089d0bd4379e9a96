# src/tg_schema/observability/names.py

"""Standard metric names for tg-schema observability.

Durations are in milliseconds. Section-level metrics carry a
``section`` label ("types", "methods", "recent_changes").
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "schema_parse_duration"
SECTION_PARSE_DURATION = "schema_section_parse_duration"

# ============================================================================
# Segmentation Metrics
# ============================================================================

# Counters
RECORDS_SEGMENTED = "schema_records_segmented"
ORPHAN_NODES_TOTAL = "schema_orphan_nodes_total"

# ============================================================================
# Transform Metrics
# ============================================================================

# Counters
FIELDS_RESOLVED = "schema_fields_resolved"
PARAMS_RESOLVED = "schema_params_resolved"
METHODS_PARSED = "schema_methods_parsed"
CHANGES_PARSED = "schema_changes_parsed"
