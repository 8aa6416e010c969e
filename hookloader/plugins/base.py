"""
Plugin Base Classes

PluginMeta: declarative metadata for a plugin (name, version, hooks, config schema).
PluginBase: abstract base class all plugins must subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hookloader.plugins.registrar import Registrar


@dataclass
class PluginMeta:
    """
    Declarative metadata describing a plugin.

    Attributes:
        name:          Machine-readable slug, e.g. "menu_options".
        version:       Semver string, e.g. "1.0.0".
        description:   Human-readable description.
        author:        Plugin author (defaults to "Plugin Team").
        hooks:         Hook names this plugin attaches to.
        config_schema: JSON Schema fragments describing configurable options.
    """

    name: str
    version: str
    description: str
    author: str = "Plugin Team"
    hooks: list[str] = field(default_factory=list)
    config_schema: dict[str, Any] = field(default_factory=dict)


class PluginBase(ABC):
    """
    Abstract base class for all plugins.

    Subclasses must implement the `meta` property. Lifecycle methods are
    no-ops by default so subclasses only override what they need.
    """

    @property
    @abstractmethod
    def meta(self) -> PluginMeta:
        """Return the plugin's metadata."""
        ...

    def on_load(self, config: dict[str, Any]) -> None:  # noqa: B027
        """
        Called once at bootstrap with the plugin's persisted config dict,
        before define_hooks().
        """

    def define_hooks(self, registrar: Registrar) -> None:  # noqa: B027
        """
        Add the plugin's actions and filters to the registrar.

        Nothing reaches the host until the loader calls registrar.runner().
        """
