"""
Hook Host

HookHost: the interface the Registrar registers into.
InMemoryHookHost: an in-process host with WordPress dispatch semantics.

Actions and filters share one callback table per hook name. Callbacks run
in ascending priority order; callbacks with equal priority run in the
order they were registered. Each callback receives at most
`accepted_args` positional arguments.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from hookloader.exceptions import CallbackResolutionError, InvalidCallbackError

logger = logging.getLogger(__name__)


class HookHost(Protocol):
    """Registration primitives supplied by the host framework."""

    def register_filter(self, hook_name: str, callback: Any, priority: int, accepted_args: int) -> None: ...

    def register_action(self, hook_name: str, callback: Any, priority: int, accepted_args: int) -> None: ...


@dataclass(frozen=True)
class Registration:
    """One call received by a host registration primitive."""

    kind: str
    hook_name: str
    callback: Any
    priority: int
    accepted_args: int


class InMemoryHookHost:
    """
    In-process hook host.

    Registration never validates its arguments; callback targets are
    resolved when the hook is dispatched.
    """

    def __init__(self) -> None:
        self._callbacks: dict[str, list[Registration]] = defaultdict(list)
        self._action_counts: Counter[str] = Counter()
        self.registrations: list[Registration] = []

    # ── Registration ──────────────────────────────────────────────────────────

    def register_filter(self, hook_name: str, callback: Any, priority: int = 10, accepted_args: int = 1) -> None:
        self._register("filter", hook_name, callback, priority, accepted_args)

    def register_action(self, hook_name: str, callback: Any, priority: int = 10, accepted_args: int = 1) -> None:
        self._register("action", hook_name, callback, priority, accepted_args)

    def _register(self, kind: str, hook_name: str, callback: Any, priority: int, accepted_args: int) -> None:
        registration = Registration(kind, hook_name, callback, priority, accepted_args)
        self._callbacks[hook_name].append(registration)
        self.registrations.append(registration)

    # ── Lookup ────────────────────────────────────────────────────────────────

    def has_hook(self, hook_name: str) -> bool:
        """Return True if any callback is registered for the hook."""
        return bool(self._callbacks.get(hook_name))

    def did_action(self, hook_name: str) -> int:
        """Return how many times do_action() has run for the hook."""
        return self._action_counts[hook_name]

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def do_action(self, hook_name: str, *args: Any) -> None:
        """
        Run every callback attached to an action hook.

        Return values are discarded. Exceptions raised by a callback
        propagate to the caller.
        """
        self._action_counts[hook_name] += 1
        for registration in self._ordered(hook_name):
            callback = self._resolve(registration)
            callback(*args[: registration.accepted_args])

    def apply_filters(self, hook_name: str, value: Any, *args: Any) -> Any:
        """
        Pass `value` through every callback attached to a filter hook.

        Each callback's return value becomes the value given to the next.

        Returns:
            The filtered value, or `value` unchanged if nothing is hooked.
        """
        for registration in self._ordered(hook_name):
            callback = self._resolve(registration)
            value = callback(*(value, *args)[: registration.accepted_args])
        return value

    def _ordered(self, hook_name: str) -> list[Registration]:
        # sorted() is stable, so equal priorities keep registration order
        return sorted(self._callbacks.get(hook_name, []), key=lambda r: r.priority)

    @staticmethod
    def _resolve(registration: Registration) -> Callable[..., Any]:
        target = registration.callback
        if callable(target):
            return target
        if isinstance(target, tuple) and len(target) == 2 and isinstance(target[1], str):
            component, name = target
            method = getattr(component, name, None)
            if method is None or not callable(method):
                logger.warning("Unresolvable callback %s on hook %s", name, registration.hook_name)
                raise CallbackResolutionError(registration.hook_name, name)
            return method
        raise InvalidCallbackError(registration.hook_name)
