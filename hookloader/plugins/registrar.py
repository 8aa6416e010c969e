"""
Hook Registrar

Registrar: collects action and filter bindings while a plugin initialises,
then registers all of them with the host in one pass.

Filters are flushed before actions; each sequence keeps insertion order.
Nothing is validated and nothing is deduplicated: calling runner() twice
registers every binding twice.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hookloader.exceptions import HostNotConfiguredError

if TYPE_CHECKING:
    from hookloader.plugins.host import HookHost

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10
DEFAULT_ACCEPTED_ARGS = 1


@dataclass(frozen=True)
class HookBinding:
    """
    One deferred registration request.

    Attributes:
        hook_name:     Name of the host hook, e.g. "init".
        component:     Object owning the callback. Referenced, not owned.
        callback_name: Method name on `component`.
        priority:      Ordering key passed through to the host.
        accepted_args: Number of arguments the host passes to the callback.
        callback:      Callable captured at add time, if one was given.
    """

    hook_name: str
    component: Any
    callback_name: str
    priority: int = DEFAULT_PRIORITY
    accepted_args: int = DEFAULT_ACCEPTED_ARGS
    callback: Callable[..., Any] | None = None

    @property
    def target(self) -> Any:
        """The callback target handed to the host."""
        if self.callback is not None:
            return self.callback
        return (self.component, self.callback_name)


def _make_binding(
    hook_name: str,
    component: Any,
    callback: str | Callable[..., Any],
    priority: int,
    accepted_args: int,
) -> HookBinding:
    if isinstance(callback, str):
        return HookBinding(hook_name, component, callback, priority, accepted_args)
    name = getattr(callback, "__name__", repr(callback))
    return HookBinding(hook_name, component, name, priority, accepted_args, callback=callback)


class Registrar:
    """
    Deferred registrar for plugin actions and filters.

    Bindings are appended by add_action()/add_filter() and handed to the
    host by runner().
    """

    def __init__(self, host: HookHost | None = None) -> None:
        self._host = host
        self._actions: list[HookBinding] = []
        self._filters: list[HookBinding] = []

    # ── Collection ────────────────────────────────────────────────────────────

    def add_action(
        self,
        hook_name: str,
        component: Any,
        callback: str | Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> None:
        """
        Add a new action to the collection to be registered with the host.

        Args:
            hook_name:     The host action being hooked.
            component:     The object on which the callback is defined.
            callback:      Method name on `component`, or a callable.
            priority:      Priority at which the callback should fire.
            accepted_args: Number of arguments passed to the callback.
        """
        self._actions.append(_make_binding(hook_name, component, callback, priority, accepted_args))

    def add_filter(
        self,
        hook_name: str,
        component: Any,
        callback: str | Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> None:
        """Add a new filter to the collection. Same contract as add_action()."""
        self._filters.append(_make_binding(hook_name, component, callback, priority, accepted_args))

    # ── Inspection ────────────────────────────────────────────────────────────

    @property
    def actions(self) -> tuple[HookBinding, ...]:
        """Collected action bindings in insertion order."""
        return tuple(self._actions)

    @property
    def filters(self) -> tuple[HookBinding, ...]:
        """Collected filter bindings in insertion order."""
        return tuple(self._filters)

    # ── Flush ─────────────────────────────────────────────────────────────────

    def runner(self, host: HookHost | None = None) -> None:
        """
        Register every collected filter, then every action, with the host.

        Args:
            host: Host to register into for this call; defaults to the host
                  given at construction.

        Raises:
            HostNotConfiguredError: If no host is available.
        """
        if host is None:
            host = self._host
        if host is None:
            raise HostNotConfiguredError()

        for binding in self._filters:
            logger.debug(
                "Registering filter %s -> %s",
                binding.hook_name,
                binding.callback_name,
                extra={"hook_name": binding.hook_name, "kind": "filter", "priority": binding.priority},
            )
            host.register_filter(binding.hook_name, binding.target, binding.priority, binding.accepted_args)

        for binding in self._actions:
            logger.debug(
                "Registering action %s -> %s",
                binding.hook_name,
                binding.callback_name,
                extra={"hook_name": binding.hook_name, "kind": "action", "priority": binding.priority},
            )
            host.register_action(binding.hook_name, binding.target, binding.priority, binding.accepted_args)

        logger.info("Hooks registered: %d filters, %d actions", len(self._filters), len(self._actions))
