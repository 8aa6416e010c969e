"""
Menu Options Plugin

Per-item visibility options for navigation menus.

Hook bindings:
  - init                    (action, priority 5, no args)  -> mark plugin ready
  - wp_update_nav_menu_item (action, 3 args)               -> store item visibility
  - wp_nav_menu_objects     (filter, 2 args)               -> hide items by login state
  - the_content             (filter)                       -> append configured suffix
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from hookloader.plugins.base import PluginBase, PluginMeta
from hookloader.plugins.hooks import HOOK_INIT, HOOK_NAV_MENU_OBJECTS, HOOK_THE_CONTENT, HOOK_UPDATE_NAV_MENU_ITEM

if TYPE_CHECKING:
    from hookloader.plugins.registrar import Registrar

logger = logging.getLogger(__name__)

VISIBILITY_EVERYONE = "everyone"
VISIBILITY_LOGGED_IN = "logged_in"
VISIBILITY_LOGGED_OUT = "logged_out"

_META = PluginMeta(
    name="menu_options",
    version="1.0.0",
    description="Show or hide navigation menu items depending on whether the visitor is logged in",
    hooks=[HOOK_INIT, HOOK_UPDATE_NAV_MENU_ITEM, HOOK_NAV_MENU_OBJECTS, HOOK_THE_CONTENT],
    config_schema={
        "content_suffix": {"type": "string", "default": ""},
    },
)


class MenuOptionsPlugin(PluginBase):
    """Menu item visibility plugin."""

    def __init__(self) -> None:
        self.ready = False
        self._config: dict[str, Any] = {}
        self._visibility: dict[Any, str] = {}

    @property
    def meta(self) -> PluginMeta:
        return _META

    def on_load(self, config: dict[str, Any]) -> None:
        self._config = config

    def define_hooks(self, registrar: Registrar) -> None:
        registrar.add_action(HOOK_INIT, self, "setup", 5, 0)
        registrar.add_action(HOOK_UPDATE_NAV_MENU_ITEM, self, "save_item_options", 10, 3)
        registrar.add_filter(HOOK_NAV_MENU_OBJECTS, self, "filter_menu_items", 10, 2)
        registrar.add_filter(HOOK_THE_CONTENT, self, "render_content")

    # ── Callbacks ─────────────────────────────────────────────────────────────

    def setup(self) -> None:
        self.ready = True
        logger.debug("MenuOptionsPlugin ready")

    def save_item_options(self, menu_id: Any, item_id: Any, data: dict[str, Any]) -> None:
        """Store the visibility option submitted for one menu item."""
        self._visibility[item_id] = data.get("visibility", VISIBILITY_EVERYONE)
        logger.debug("Menu %s item %s visibility=%s", menu_id, item_id, self._visibility[item_id])

    def visibility_for(self, item: dict[str, Any]) -> str:
        return self._visibility.get(item.get("id"), item.get("visibility", VISIBILITY_EVERYONE))

    def filter_menu_items(
        self, items: list[dict[str, Any]], args: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        logged_in = bool((args or {}).get("logged_in", False))
        visible = []
        for item in items:
            visibility = self.visibility_for(item)
            if visibility == VISIBILITY_LOGGED_IN and not logged_in:
                continue
            if visibility == VISIBILITY_LOGGED_OUT and logged_in:
                continue
            visible.append(item)
        return visible

    def render_content(self, content: str) -> str:
        suffix = self._config.get("content_suffix", "")
        return f"{content}{suffix}" if suffix else content
