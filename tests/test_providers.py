import operator

import pytest

from providers import (
    MissingTaskOutput,
    MissingValueError,
    PendingTask,
    Property,
    PropertyFinalized,
    TaskDependencyDetector,
    TaskOutputProvider,
    ValueProvider,
    has_task_dependency,
    of,
)


def test_value_provider_resolves_without_dependencies():
    provider = of(3)
    assert provider.get() == 3
    assert not has_task_dependency(provider)


def test_task_output_requires_execution(pending):
    task, provider = pending(True)
    assert has_task_dependency(provider)
    with pytest.raises(MissingTaskOutput) as exc_info:
        provider.get()
    assert "upstream" in str(exc_info.value)

    task.execute()
    assert provider.get() is True
    assert not has_task_dependency(provider)


def test_pending_task_runs_action_once(pending):
    task, _ = pending(7)
    assert task.execute() == 7
    assert task.execute() == 7
    assert task.calls == 1


def test_map_and_zip_do_not_resolve_sources(pending):
    task, provider = pending(2)
    composed = provider.map(lambda v: v * 10).zip(of(1), operator.add)

    assert task.calls == 0
    assert has_task_dependency(composed)

    task.execute()
    assert composed.get() == 21
    assert composed.get() == 21


def test_detector_is_reusable_across_queries(pending):
    _, deferred = pending(1)
    detector = TaskDependencyDetector()
    assert detector.has_task_dependency(deferred)
    assert not detector.has_task_dependency(of(1))


def test_property_without_value_raises():
    with pytest.raises(MissingValueError):
        Property(bool).get()


def test_property_rejects_wrong_type():
    with pytest.raises(TypeError):
        Property(bool).set(1)


def test_property_accepts_providers(pending):
    _, deferred = pending(False)
    prop = Property(bool).value(deferred)
    assert prop.source is deferred
    assert has_task_dependency(prop)


def test_finalize_on_read_pins_value():
    prop = Property(bool).value(True).finalize_value_on_read()
    prop.set(False)  # still allowed before the first read
    assert prop.get() is False
    assert prop.is_finalized
    with pytest.raises(PropertyFinalized):
        prop.set(True)


def test_property_without_finalize_can_be_reassigned():
    prop = Property(int).value(1)
    assert prop.get() == 1
    prop.set(2)
    assert prop.get() == 2


def test_finalized_property_pins_task_output(pending):
    task, deferred = pending(True)
    prop = Property(bool).value(deferred).finalize_value_on_read()
    task.execute()
    assert prop.get() is True
    assert isinstance(prop.source, ValueProvider)


def test_pending_task_repr():
    task = PendingTask("compile", lambda: None)
    assert "compile" in repr(task)
    assert "executed=False" in repr(task)
