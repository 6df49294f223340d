from core.enums import RemovalStep, ResourceKind
from purger.observers import LoggingObserver, MetricsObserver
from purger.types import PurgeResult, RemovalOutcome, StepOutcome

from conftest import NOW


def _outcome(kind, name, *errors):
    steps = [StepOutcome(step=RemovalStep.REMOVED, error=e) for e in errors]
    return RemovalOutcome(kind=kind, id=f"id-{name}", name=name, steps=steps)


def test_purge_result_counts_and_errors():
    result = PurgeResult(started_at=NOW, swarm_mode=True)
    result.record(_outcome(ResourceKind.SERVICE, "svc", None))
    result.record(_outcome(ResourceKind.CONTAINER, "ok", None))
    result.record(_outcome(ResourceKind.CONTAINER, "bad", "gone"))

    assert result.services_removed == 1
    assert result.containers_removed == 1
    assert result.errors == ["container bad: removed failed: gone"]
    assert not result.success
    assert not result.aborted


def test_purge_result_aborted_is_failure():
    result = PurgeResult(started_at=NOW, aborted=True, error_message="Failed to list containers: x")

    assert not result.success
    assert result.errors == ["Failed to list containers: x"]


def test_metrics_observer_accumulates_across_cycles():
    metrics = MetricsObserver()
    ok = PurgeResult(started_at=NOW)
    ok.record(_outcome(ResourceKind.CONTAINER, "a", None))
    partial = PurgeResult(started_at=NOW)
    partial.record(_outcome(ResourceKind.CONTAINER, "b", "boom"))
    aborted = PurgeResult(started_at=NOW, aborted=True, error_message="down")

    metrics.on_purge_completed(ok)
    metrics.on_purge_failed(partial)
    metrics.on_purge_failed(aborted)

    stats = metrics.get_metrics()
    assert stats["total_cycles"] == 3
    assert stats["total_success"] == 1
    assert stats["total_failures"] == 2
    assert stats["total_aborted"] == 1
    assert stats["containers_removed"] == 1
    assert stats["failed_steps"] == 1


def test_logging_observer_reports_failed_steps(log_records):
    result = PurgeResult(started_at=NOW)
    result.record(_outcome(ResourceKind.CONTAINER, "bad", "gone"))

    LoggingObserver().on_purge_failed(result)

    warnings = [r["message"] for r in log_records if r["level"].name == "WARNING"]
    assert any("1 failed steps" in m for m in warnings)
    assert any("container bad" in m for m in warnings)
