import pytest

from dumpsplit.core.batches import plan_batches
from dumpsplit.core.errors import ConfigurationError
from dumpsplit.core.models import BatchWindow


def test_plan_batches_covers_partial_last_batch():
    windows = list(plan_batches(2_500_000, 1_000_000))

    assert [w.offset for w in windows] == [0, 1_000_000, 2_000_000]
    assert all(w.limit == 1_000_000 for w in windows)


def test_plan_batches_exact_multiple_emits_trailing_empty_window():
    windows = list(plan_batches(2_000_000, 1_000_000))

    assert [w.offset for w in windows] == [0, 1_000_000, 2_000_000]


def test_plan_batches_empty_table_gets_one_window():
    assert list(plan_batches(0, 1_000_000)) == [BatchWindow(offset=0, limit=1_000_000)]


def test_plan_batches_is_lazy_and_restartable():
    first = plan_batches(25, 10)

    assert next(first) == BatchWindow(offset=0, limit=10)
    assert list(plan_batches(25, 10)) == list(plan_batches(25, 10))


@pytest.mark.parametrize("batch_size", [0, -1])
def test_plan_batches_rejects_non_positive_batch_size(batch_size: int):
    with pytest.raises(ConfigurationError, match="batch size"):
        list(plan_batches(10, batch_size))


def test_batch_window_where_clause():
    assert BatchWindow(offset=1_000_000, limit=1_000_000).where_clause() == (
        "1=1 LIMIT 1000000, 1000000"
    )
