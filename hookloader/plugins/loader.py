"""
Plugin Loader

Handles reading/writing plugin configuration from the JSON file named by
settings.plugins_config_file, and bootstrapping plugins: every enabled
plugin defines its hooks on one shared Registrar, which is then flushed to
the host once.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from hookloader.config import settings
from hookloader.plugins.registrar import Registrar

if TYPE_CHECKING:
    from hookloader.plugins.base import PluginBase
    from hookloader.plugins.host import HookHost

logger = logging.getLogger(__name__)

# ── Default plugin config (all built-in plugins enabled) ─────────────────────
_DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "menu_options": {"enabled": True},
}


# ── Config I/O ────────────────────────────────────────────────────────────────


def load_plugins_config(path: Path | None = None) -> dict[str, dict[str, Any]]:
    """
    Load plugin configuration from disk.

    Returns defaults if the file does not exist, cannot be decoded or parsed,
    or does not hold a JSON object.
    """
    path = path or settings.plugins_config_file
    if path.exists():
        try:
            config = json.loads(path.read_text(encoding="utf-8"))
        except (ValueError, OSError) as exc:
            logger.warning("Failed to read plugins config %s: %s", path, exc)
        else:
            if isinstance(config, dict):
                return config
            logger.warning("Plugins config %s is not a JSON object, using defaults", path)
    return copy.deepcopy(_DEFAULT_CONFIG)


def save_plugins_config(config: dict[str, dict[str, Any]], path: Path | None = None) -> None:
    """Persist plugin configuration to disk."""
    path = path or settings.plugins_config_file
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(config, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )


# ── Bootstrap ─────────────────────────────────────────────────────────────────


def initialize_plugins(
    host: HookHost,
    plugin_classes: list[type[PluginBase]] | None = None,
    config: dict[str, dict[str, Any]] | None = None,
) -> Registrar:
    """
    Load enabled plugins and register their hooks with the host.

    Args:
        host:           Host receiving the registrations.
        plugin_classes: Plugins to load; defaults to the built-in plugins.
        config:         Per-plugin config; defaults to load_plugins_config().

    Returns:
        The registrar, already flushed to the host.
    """
    if plugin_classes is None:
        from hookloader.plugins.menu_options_plugin import MenuOptionsPlugin

        plugin_classes = [MenuOptionsPlugin]
    if config is None:
        config = load_plugins_config()

    registrar = Registrar(host)
    loaded = 0
    for plugin_class in plugin_classes:
        plugin = plugin_class()
        plugin_config = config.get(plugin.meta.name, {})
        if not isinstance(plugin_config, dict):
            logger.warning("Ignoring malformed config for plugin %s: %r", plugin.meta.name, plugin_config)
            plugin_config = {}
        if not plugin_config.get("enabled", True):
            logger.info("Plugin disabled, skipping: %s", plugin.meta.name)
            continue
        plugin.on_load(plugin_config)
        plugin.define_hooks(registrar)
        loaded += 1
        logger.info(
            "Plugin registered: %s v%s",
            plugin.meta.name,
            plugin.meta.version,
            extra={"plugin": plugin.meta.name},
        )

    registrar.runner()
    logger.info("Plugin initialisation complete: %d plugins loaded", loaded)
    return registrar
