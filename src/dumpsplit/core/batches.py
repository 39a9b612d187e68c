"""Row-window planning for per-table batch dumps."""

from __future__ import annotations

from collections.abc import Iterator

from dumpsplit.core.errors import ConfigurationError
from dumpsplit.core.models import BatchWindow


def plan_batches(row_count: int, batch_size: int) -> Iterator[BatchWindow]:
    """
    Yield the row windows covering a table of `row_count` rows.

    Windows start at offset 0 and advance by `batch_size` while the offset
    is <= `row_count`. The boundary is inclusive: when `row_count` is an
    exact multiple of `batch_size` a trailing empty window is yielded, and
    an empty table still gets one window. Existing backup sets rely on this
    file count.

    Raises:
        ConfigurationError: If `batch_size` is not positive.
    """
    if batch_size <= 0:
        raise ConfigurationError(f"batch size must be > 0, got {batch_size}")

    offset = 0
    while offset <= row_count:
        yield BatchWindow(offset=offset, limit=batch_size)
        offset += batch_size
