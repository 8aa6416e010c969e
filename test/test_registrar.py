"""
Registrar Tests

Test classes:
    TestHookBinding       binding record defaults and callback targets
    TestRegistrarCollect  add_action / add_filter bookkeeping
    TestRegistrarRunner   flush order, pass-through values, re-runs
"""

from __future__ import annotations

import dataclasses

import pytest

from hookloader.exceptions import HostNotConfiguredError
from hookloader.plugins.registrar import HookBinding, Registrar

# ══════════════════════════════════════════════════════════════════════════════
# 1. TestHookBinding
# ══════════════════════════════════════════════════════════════════════════════


class TestHookBinding:
    def test_is_frozen_dataclass(self):
        assert dataclasses.is_dataclass(HookBinding)
        binding = HookBinding("init", object(), "setup")
        with pytest.raises(dataclasses.FrozenInstanceError):
            binding.priority = 1  # type: ignore[misc]

    def test_defaults(self):
        binding = HookBinding("init", object(), "setup")
        assert binding.priority == 10
        assert binding.accepted_args == 1
        assert binding.callback is None

    def test_target_is_component_method_pair(self, component):
        binding = HookBinding("the_content", component, "render")
        assert binding.target == (component, "render")
        assert binding.target[0] is component

    def test_target_prefers_captured_callable(self, component):
        binding = HookBinding("the_content", component, "render", callback=component.render)
        assert binding.target == component.render


# ══════════════════════════════════════════════════════════════════════════════
# 2. TestRegistrarCollect
# ══════════════════════════════════════════════════════════════════════════════


class TestRegistrarCollect:
    def test_starts_empty(self):
        registrar = Registrar()
        assert registrar.actions == ()
        assert registrar.filters == ()

    def test_counts_match_calls(self, registrar, component):
        for i in range(3):
            registrar.add_action(f"action_{i}", component, "setup")
        for i in range(5):
            registrar.add_filter(f"filter_{i}", component, "render")
        assert len(registrar.actions) == 3
        assert len(registrar.filters) == 5

    def test_defaults_applied(self, registrar, component):
        registrar.add_action("init", component, "setup")
        registrar.add_filter("the_content", component, "render")
        for binding in (*registrar.actions, *registrar.filters):
            assert binding.priority == 10
            assert binding.accepted_args == 1

    def test_explicit_values_kept(self, registrar, component):
        registrar.add_action("init", component, "setup", 5, 0)
        binding = registrar.actions[0]
        assert binding == HookBinding("init", component, "setup", 5, 0)

    def test_duplicate_hook_names_allowed(self, registrar, component):
        registrar.add_filter("the_content", component, "render")
        registrar.add_filter("the_content", component, "render")
        assert len(registrar.filters) == 2

    def test_no_validation(self, registrar):
        registrar.add_action("", None, "does_not_exist", -100, 99)
        assert registrar.actions[0].component is None
        assert registrar.actions[0].callback_name == "does_not_exist"

    def test_callable_captured_at_add_time(self, registrar, component):
        registrar.add_filter("the_content", component, component.render)
        binding = registrar.filters[0]
        assert binding.callback == component.render
        assert binding.callback_name == "render"

    def test_views_are_snapshots(self, registrar, component):
        registrar.add_action("init", component, "setup")
        snapshot = registrar.actions
        registrar.add_action("init", component, "setup")
        assert len(snapshot) == 1
        assert len(registrar.actions) == 2


# ══════════════════════════════════════════════════════════════════════════════
# 3. TestRegistrarRunner
# ══════════════════════════════════════════════════════════════════════════════


class TestRegistrarRunner:
    def test_documented_example(self, registrar, recording_host, component):
        registrar.add_filter("the_content", component, "render")
        registrar.add_action("init", component, "setup", 5, 0)
        registrar.runner()
        assert recording_host.calls == [
            ("filter", "the_content", (component, "render"), 10, 1),
            ("action", "init", (component, "setup"), 5, 0),
        ]

    def test_filters_flushed_before_actions(self, registrar, recording_host, component):
        registrar.add_action("a1", component, "setup")
        registrar.add_filter("f1", component, "render")
        registrar.add_action("a2", component, "setup")
        registrar.add_filter("f2", component, "render")
        registrar.runner()
        kinds = [call[0] for call in recording_host.calls]
        names = [call[1] for call in recording_host.calls]
        assert kinds == ["filter", "filter", "action", "action"]
        assert names == ["f1", "f2", "a1", "a2"]

    def test_insertion_order_preserved(self, registrar, recording_host, component):
        hooks = [f"hook_{i}" for i in range(10)]
        for i, name in enumerate(hooks):
            registrar.add_action(name, component, "setup", priority=100 - i)
        registrar.runner()
        assert [call[1] for call in recording_host.calls] == hooks

    def test_runner_twice_registers_twice(self, registrar, recording_host, component):
        registrar.add_filter("the_content", component, "render")
        registrar.add_action("init", component, "setup")
        registrar.runner()
        registrar.runner()
        assert len(recording_host.calls) == 4
        assert recording_host.calls[:2] == recording_host.calls[2:]

    def test_add_after_runner_waits_for_next_run(self, registrar, recording_host, component):
        registrar.runner()
        registrar.add_action("init", component, "setup")
        assert recording_host.calls == []
        registrar.runner()
        assert len(recording_host.calls) == 1

    def test_empty_runner_registers_nothing(self, registrar, recording_host):
        registrar.runner()
        assert recording_host.calls == []

    def test_callable_passed_through(self, registrar, recording_host, component):
        registrar.add_filter("the_content", component, component.render)
        registrar.runner()
        assert recording_host.calls[0][2] == component.render

    def test_host_override(self, recording_host, component):
        other = type(recording_host)()
        registrar = Registrar(recording_host)
        registrar.add_action("init", component, "setup")
        registrar.runner(other)
        assert recording_host.calls == []
        assert len(other.calls) == 1

    def test_missing_host_raises(self, component):
        registrar = Registrar()
        registrar.add_action("init", component, "setup")
        with pytest.raises(HostNotConfiguredError):
            registrar.runner()

    def test_runner_returns_none(self, registrar):
        assert registrar.runner() is None
