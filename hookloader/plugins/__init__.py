"""
Plugin System

Public API for the plugin system:
    HookBinding       one deferred action/filter registration
    Registrar         collects bindings and flushes them to a host
    HookHost          host registration interface
    InMemoryHookHost  in-process host with WordPress dispatch semantics
    PluginMeta        plugin metadata dataclass
    PluginBase        abstract base class for all plugins
"""

from .base import PluginBase, PluginMeta
from .host import HookHost, InMemoryHookHost
from .registrar import HookBinding, Registrar

__all__ = ["HookBinding", "HookHost", "InMemoryHookHost", "PluginBase", "PluginMeta", "Registrar"]
