"""
Plugin Hook Constants

Centralised list of WordPress core hook names used by bundled plugins.
"""

from __future__ import annotations

# ── Bootstrap ─────────────────────────────────────────────────────────────────
HOOK_INIT = "init"

# ── Content ───────────────────────────────────────────────────────────────────
HOOK_THE_CONTENT = "the_content"

# ── Navigation menus ──────────────────────────────────────────────────────────
HOOK_NAV_MENU_OBJECTS = "wp_nav_menu_objects"
HOOK_UPDATE_NAV_MENU_ITEM = "wp_update_nav_menu_item"

# ── Master list ───────────────────────────────────────────────────────────────
ALL_HOOKS: list[str] = [
    HOOK_INIT,
    HOOK_THE_CONTENT,
    HOOK_NAV_MENU_OBJECTS,
    HOOK_UPDATE_NAV_MENU_ITEM,
]
