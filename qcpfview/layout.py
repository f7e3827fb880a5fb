"""Turn a view configuration into a toolkit-neutral description of the window."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from pathlib import Path

from .viewconfig import MenuNode, ViewConfig, WidgetItem

IMAGES_DIR = "Images"


@dataclass
class MenuEntry:
    """One entry of the menu bar: a menu, an action or a separator."""

    title: str = ""
    object_name: str = ""
    shortcut: str = ""
    icon_path: str = ""
    enabled: bool = True
    checkable: bool = False
    separator: bool = False
    submenu: bool = False
    plugin_type: int = 0
    plugin_id: str = ""
    children: list["MenuEntry"] = field(default_factory=list)

    @property
    def is_action(self) -> bool:
        return not self.separator and not self.submenu


class DockFeature(IntFlag):
    """Behaviours a dock widget may allow."""

    NONE = 0
    CLOSABLE = 0x01
    MOVABLE = 0x02
    FLOATABLE = 0x04


def resolve_icon_path(icon_path: str, application_dir: str | Path) -> str:
    """Return the icon path if it exists, else the same file under the images folder.

    An empty string is returned when neither location holds the file.
    """
    if icon_path and Path(icon_path).is_file():
        return icon_path
    name = Path(icon_path).name if icon_path else ""
    if not name:
        return ""
    fallback = Path(application_dir) / IMAGES_DIR / name
    if fallback.is_file():
        return str(fallback)
    return ""


def _is_enabled(authority: int, required: int) -> bool:
    return authority <= required


def _build_entry(node: MenuNode, authority: int, application_dir: str | Path) -> MenuEntry:
    if not node.children:
        if node.is_separator:
            return MenuEntry(separator=True, enabled=True)
        return MenuEntry(
            title=node.action_name,
            object_name=node.action_name,
            shortcut=node.shortcut,
            icon_path=resolve_icon_path(node.icon_path, application_dir),
            enabled=_is_enabled(authority, node.authority),
            checkable=node.checkable,
            plugin_type=node.plugin_type,
            plugin_id=node.plugin_id,
        )
    return MenuEntry(
        title=node.title,
        shortcut=node.shortcut,
        icon_path=resolve_icon_path(node.icon_path, application_dir),
        enabled=_is_enabled(authority, node.authority),
        submenu=True,
        plugin_type=node.plugin_type,
        plugin_id=node.plugin_id,
        children=[_build_entry(child, authority, application_dir) for child in node.children],
    )


def build_menus(config: ViewConfig, authority: int, application_dir: str | Path) -> list[MenuEntry]:
    """Describe the menu bar for a user of the given authority level.

    A lower authority number is more privileged: an entry is enabled when the
    user's authority does not exceed the entry's required authority.
    """
    menus = []
    for top in config.menus:
        menus.append(
            MenuEntry(
                title=top.title,
                icon_path=top.icon_path,
                enabled=_is_enabled(authority, top.authority),
                submenu=True,
                plugin_type=top.plugin_type,
                plugin_id=top.plugin_id,
                children=[_build_entry(child, authority, application_dir) for child in top.children],
            )
        )
    return menus


def dock_features(config: ViewConfig) -> DockFeature:
    """Combine the configuration's dock flags."""
    features = DockFeature.NONE
    if config.dock_floatable:
        features |= DockFeature.FLOATABLE
    if config.dock_movable:
        features |= DockFeature.MOVABLE
    if config.dock_closable:
        features |= DockFeature.CLOSABLE
    return features


def dock_object_name(item: WidgetItem) -> str:
    """Return the unique object name of the dock holding a workspace widget."""
    return f"{item.plugin_id}_{item.copy_id}_{item.object_name}"


def visible_workspace_items(config: ViewConfig) -> list[WidgetItem]:
    """Return the workspace widgets that are to be shown, in configured order."""
    return [item for item in config.workspace_widgets if item.visible]