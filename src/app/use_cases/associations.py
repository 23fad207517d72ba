"""Helpers for id-list driven many-to-many updates

Requested ids are resolved with a partial-match lookup; ids that match no
record are dropped and reported in the log.
"""

import logging
from typing import List, Sequence

logger = logging.getLogger(__name__)


def report_unknown_ids(requested_ids: Sequence[int], found: Sequence, entity: str) -> List[int]:
    """
    Log requested ids that were not found

    Args:
        requested_ids: Ids supplied by the caller
        found: Records returned by the lookup
        entity: Entity label for the log line (e.g., "role")

    Returns:
        Sorted list of unknown ids
    """
    found_ids = {record.id for record in found}
    unknown = sorted(set(requested_ids) - found_ids)
    if unknown:
        logger.warning(f"Ignoring unknown {entity} ids: {unknown}")
    return unknown
