"""
hookloader

Deferred action/filter hook registration for WordPress-style plugins.

Typical bootstrap:

    from hookloader.logging_config import configure_logging
    from hookloader.plugins.loader import initialize_plugins

    configure_logging()
    registrar = initialize_plugins(host)
"""

from .plugins import HookBinding, InMemoryHookHost, PluginBase, PluginMeta, Registrar

__version__ = "1.0.0"

__all__ = ["HookBinding", "InMemoryHookHost", "PluginBase", "PluginMeta", "Registrar", "__version__"]
