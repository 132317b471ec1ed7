"""Audit hooks: log analyzer invocations for the audit trail.

Each call is logged as one JSON record. Results with degraded fields are
logged at warning level so zero-denominator fallbacks stand out.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


def collect_degraded_fields(result: Any) -> list[str]:
    """Degraded field names in a result.

    For list results (cash flow, budget variance) each name is prefixed with
    the item's position, e.g. ``"2.variance_percentage"``.
    """
    if isinstance(result, (list, tuple)):
        return [
            f"{index}.{name}"
            for index, item in enumerate(result)
            for name in getattr(item, "degraded_fields", [])
        ]
    return list(getattr(result, "degraded_fields", []))


def log_analysis_call(
    analyzer: str,
    arguments: dict[str, Any] | None = None,
    result: Any = None,
) -> dict[str, Any]:
    """Log an analyzer invocation and return the logged entry."""
    if isinstance(result, (list, tuple)):
        result_count = len(result)
    else:
        result_count = 0 if result is None else 1

    degraded = collect_degraded_fields(result)
    entry = {
        "analyzer": analyzer,
        "arguments": arguments or {},
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "result_count": result_count,
        "degraded_fields": degraded,
    }
    level = logging.WARNING if degraded else logging.INFO
    logger.log(level, "Analysis audit: %s", json.dumps(entry, default=str))
    return entry
