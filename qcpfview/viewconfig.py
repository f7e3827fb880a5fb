"""View layout configuration: menus, tool bars, status bar and workspace docks."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TypeVar

from .datastream import DataStreamReader, DataStreamWriter


class BarItemType(IntEnum):
    ACTION = 0
    WIDGET = 1
    SEPARATOR = 2
    SPACER = 3


class BarItemStyle(IntEnum):
    NO_TEXT = 0
    TEXT_BESIDE_ICON = 1
    TEXT_UNDER_ICON = 2


class StatusbarItemType(IntEnum):
    COMMON = 0
    PERMANENT = 1


_E = TypeVar("_E", bound=IntEnum)


def _as_enum(enum_cls: type[_E], value: int) -> int:
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass
class ActionItem:
    object_name: str = ""
    detail: str = ""
    authority: int = 0
    enabled: bool = False
    visible: bool = False

    def _write(self, writer: DataStreamWriter) -> None:
        writer.write_string(self.object_name)
        writer.write_string(self.detail)
        writer.write_int32(self.authority)
        writer.write_bool(self.enabled)
        writer.write_bool(self.visible)

    @classmethod
    def _read(cls, reader: DataStreamReader) -> "ActionItem":
        return cls(
            object_name=reader.read_string(),
            detail=reader.read_string(),
            authority=reader.read_int32(),
            enabled=reader.read_bool(),
            visible=reader.read_bool(),
        )


@dataclass
class WidgetItem:
    plugin_type: int = 0
    plugin_id: str = ""
    copy_id: str = ""
    object_name: str = ""
    detail: str = ""
    authority: int = 0
    enabled: bool = False
    visible: bool = False
    orig_width: int = 0
    orig_height: int = 0

    def _write(self, writer: DataStreamWriter) -> None:
        writer.write_int32(self.plugin_type)
        writer.write_string(self.plugin_id)
        writer.write_string(self.copy_id)
        writer.write_string(self.object_name)
        writer.write_string(self.detail)
        writer.write_int32(self.authority)
        writer.write_bool(self.enabled)
        writer.write_bool(self.visible)
        writer.write_int32(self.orig_width)
        writer.write_int32(self.orig_height)

    @classmethod
    def _read(cls, reader: DataStreamReader) -> "WidgetItem":
        return cls(
            plugin_type=reader.read_int32(),
            plugin_id=reader.read_string(),
            copy_id=reader.read_string(),
            object_name=reader.read_string(),
            detail=reader.read_string(),
            authority=reader.read_int32(),
            enabled=reader.read_bool(),
            visible=reader.read_bool(),
            orig_width=reader.read_int32(),
            orig_height=reader.read_int32(),
        )


@dataclass
class StatusbarItem(WidgetItem):
    item_type: int = StatusbarItemType.COMMON

    def _write(self, writer: DataStreamWriter) -> None:
        super()._write(writer)
        writer.write_int32(self.item_type)

    @classmethod
    def _read(cls, reader: DataStreamReader) -> "StatusbarItem":
        base = WidgetItem._read(reader)
        item_type = _as_enum(StatusbarItemType, reader.read_int32())
        return cls(**vars(base), item_type=item_type)


@dataclass
class BarItem:
    type: int = BarItemType.ACTION
    action: ActionItem | None = None
    widget: WidgetItem | None = None
    width: int = 0
    height: int = 0

    def _write(self, writer: DataStreamWriter) -> None:
        writer.write_int32(self.type)
        if self.type == BarItemType.ACTION:
            (self.action or ActionItem())._write(writer)
        elif self.type == BarItemType.WIDGET:
            (self.widget or WidgetItem())._write(writer)
        else:
            return
        writer.write_int32(self.width)
        writer.write_int32(self.height)

    @classmethod
    def _read(cls, reader: DataStreamReader) -> "BarItem":
        item = cls(type=_as_enum(BarItemType, reader.read_int32()))
        if item.type == BarItemType.ACTION:
            item.action = ActionItem._read(reader)
        elif item.type == BarItemType.WIDGET:
            item.widget = WidgetItem._read(reader)
        else:
            return item
        item.width = reader.read_int32()
        item.height = reader.read_int32()
        return item


@dataclass
class MenuNode:
    title: str = ""
    shortcut: str = ""
    icon_path: str = ""
    authority: int = 0
    enabled: bool = False
    visible: bool = False
    checkable: bool = False
    is_separator: bool = False
    plugin_type: int = 0
    plugin_id: str = ""
    copy_id: str = ""
    action_name: str = ""
    action_detail: str = ""
    parent_title: str = ""
    children: list["MenuNode"] = field(default_factory=list)


def read_menu_tree(reader: DataStreamReader) -> MenuNode:
    """Read a menu node and, depth first, all of its children."""
    node = MenuNode(
        title=reader.read_string(),
        shortcut=reader.read_string(),
        icon_path=reader.read_string(),
        authority=reader.read_int32(),
        enabled=reader.read_bool(),
        visible=reader.read_bool(),
        checkable=reader.read_bool(),
        is_separator=reader.read_bool(),
        plugin_type=reader.read_int32(),
        plugin_id=reader.read_string(),
        copy_id=reader.read_string(),
        action_name=reader.read_string(),
        action_detail=reader.read_string(),
        parent_title=reader.read_string(),
    )
    count = reader.read_int32()
    node.children = [read_menu_tree(reader) for _ in range(max(count, 0))]
    return node


def write_menu_tree(writer: DataStreamWriter, node: MenuNode) -> None:
    """Write a menu node and, depth first, all of its children."""
    writer.write_string(node.title)
    writer.write_string(node.shortcut)
    writer.write_string(node.icon_path)
    writer.write_int32(node.authority)
    writer.write_bool(node.enabled)
    writer.write_bool(node.visible)
    writer.write_bool(node.checkable)
    writer.write_bool(node.is_separator)
    writer.write_int32(node.plugin_type)
    writer.write_string(node.plugin_id)
    writer.write_string(node.copy_id)
    writer.write_string(node.action_name)
    writer.write_string(node.action_detail)
    writer.write_string(node.parent_title)
    writer.write_int32(len(node.children))
    for child in node.children:
        write_menu_tree(writer, child)


@dataclass
class ToolBar:
    number: int = 0
    title: str = ""
    icon_size: tuple[int, int] = (0, 0)
    text_style: int = BarItemStyle.NO_TEXT
    items: list[BarItem] = field(default_factory=list)

    def _write(self, writer: DataStreamWriter) -> None:
        writer.write_int32(self.number)
        writer.write_string(self.title)
        writer.write_size(self.icon_size)
        writer.write_int32(self.text_style)
        writer.write_int32(len(self.items))
        for item in self.items:
            item._write(writer)

    @classmethod
    def _read(cls, reader: DataStreamReader) -> "ToolBar":
        bar = cls(
            number=reader.read_int32(),
            title=reader.read_string(),
            icon_size=reader.read_size(),
            text_style=_as_enum(BarItemStyle, reader.read_int32()),
        )
        count = reader.read_int32()
        bar.items = [BarItem._read(reader) for _ in range(max(count, 0))]
        return bar


@dataclass
class ViewConfig:
    """The complete persisted layout of the main window."""

    show_menu: bool = False
    show_toolbar: bool = False
    show_statusbar: bool = False
    dock_floatable: bool = False
    dock_movable: bool = False
    dock_closable: bool = False
    menus: list[MenuNode] = field(default_factory=list)
    toolbars: list[ToolBar] = field(default_factory=list)
    statusbar_items: list[StatusbarItem] = field(default_factory=list)
    workspace_widgets: list[WidgetItem] = field(default_factory=list)

    def reset(self) -> None:
        """Clear every flag and list."""
        self.show_menu = False
        self.show_toolbar = False
        self.show_statusbar = False
        self.dock_floatable = False
        self.dock_movable = False
        self.dock_closable = False
        self.menus = []
        self.toolbars = []
        self.statusbar_items = []
        self.workspace_widgets = []

    def copy_from(self, other: "ViewConfig") -> "ViewConfig":
        """Replace this configuration's contents with a deep copy of another's."""
        duplicate = copy.deepcopy(other)
        self.show_menu = duplicate.show_menu
        self.show_toolbar = duplicate.show_toolbar
        self.show_statusbar = duplicate.show_statusbar
        self.dock_floatable = duplicate.dock_floatable
        self.dock_movable = duplicate.dock_movable
        self.dock_closable = duplicate.dock_closable
        self.menus = duplicate.menus
        self.toolbars = duplicate.toolbars
        self.statusbar_items = duplicate.statusbar_items
        self.workspace_widgets = duplicate.workspace_widgets
        return self

    def write_to(self, writer: DataStreamWriter) -> None:
        writer.write_bool(self.show_menu)
        writer.write_bool(self.show_toolbar)
        writer.write_bool(self.show_statusbar)
        writer.write_bool(self.dock_floatable)
        writer.write_bool(self.dock_movable)
        writer.write_bool(self.dock_closable)

        writer.write_int32(len(self.menus))
        for node in self.menus:
            write_menu_tree(writer, node)

        writer.write_int32(len(self.toolbars))
        for bar in self.toolbars:
            bar._write(writer)

        writer.write_int32(len(self.statusbar_items))
        for item in self.statusbar_items:
            item._write(writer)

        writer.write_int32(len(self.workspace_widgets))
        for widget in self.workspace_widgets:
            widget._write(writer)

    def read_from(self, reader: DataStreamReader) -> None:
        """Replace this configuration's contents with data read from ``reader``."""
        self.reset()
        self.show_menu = reader.read_bool()
        self.show_toolbar = reader.read_bool()
        self.show_statusbar = reader.read_bool()
        self.dock_floatable = reader.read_bool()
        self.dock_movable = reader.read_bool()
        self.dock_closable = reader.read_bool()

        count = reader.read_int32()
        self.menus = [read_menu_tree(reader) for _ in range(max(count, 0))]

        count = reader.read_int32()
        self.toolbars = [ToolBar._read(reader) for _ in range(max(count, 0))]

        count = reader.read_int32()
        self.statusbar_items = [StatusbarItem._read(reader) for _ in range(max(count, 0))]

        count = reader.read_int32()
        self.workspace_widgets = [WidgetItem._read(reader) for _ in range(max(count, 0))]

    def to_bytes(self) -> bytes:
        writer = DataStreamWriter()
        self.write_to(writer)
        return writer.getvalue()

    @classmethod
    def from_bytes(cls, data: bytes) -> "ViewConfig":
        config = cls()
        config.read_from(DataStreamReader(data))
        return config