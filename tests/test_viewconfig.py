import pytest

from qcpfview.datastream import DataStreamError, DataStreamReader, DataStreamWriter
from qcpfview.viewconfig import (
    ActionItem,
    BarItem,
    BarItemStyle,
    BarItemType,
    MenuNode,
    StatusbarItem,
    StatusbarItemType,
    ToolBar,
    ViewConfig,
    WidgetItem,
    read_menu_tree,
    write_menu_tree,
)


def _sample_config():
    leaf = MenuNode(title="Sum", action_name="Sum", plugin_id="QPlugin1", copy_id="0",
                    authority=3, enabled=True, visible=True, checkable=True,
                    parent_title="Tools")
    sep = MenuNode(is_separator=True)
    sub = MenuNode(title="More", children=[MenuNode(title="Deep", action_name="Deep")])
    top = MenuNode(title="Tools", shortcut="Ctrl+T", icon_path="tools.png",
                   children=[leaf, sep, sub])
    widget = WidgetItem(plugin_type=1, plugin_id="QPlugin1", copy_id="0",
                        object_name="wdt_search", detail="search", authority=2,
                        enabled=True, visible=True, orig_width=200, orig_height=30)
    bar = ToolBar(number=1, title="Main", icon_size=(32, 32),
                  text_style=BarItemStyle.TEXT_UNDER_ICON,
                  items=[
                      BarItem(type=BarItemType.ACTION,
                              action=ActionItem("Sum", "sum it", 1, True, False),
                              width=40, height=40),
                      BarItem(type=BarItemType.WIDGET, widget=widget, width=200, height=30),
                      BarItem(type=BarItemType.SEPARATOR),
                      BarItem(type=BarItemType.SPACER),
                  ])
    status = StatusbarItem(plugin_id="QPlugin2", object_name="wdt_hud",
                           visible=True, item_type=StatusbarItemType.PERMANENT)
    dock = WidgetItem(plugin_id="QPluginChart", copy_id="1", object_name="wdt_ZoomChart",
                      visible=False)
    return ViewConfig(show_menu=True, show_toolbar=True, show_statusbar=False,
                      dock_floatable=True, dock_movable=False, dock_closable=True,
                      menus=[top], toolbars=[bar], statusbar_items=[status],
                      workspace_widgets=[dock])


def test_empty_config_encoding():
    # six bools followed by four zero counts
    assert ViewConfig().to_bytes() == b"\x00" * 6 + b"\x00\x00\x00\x00" * 4


def test_default_config_has_everything_off():
    config = ViewConfig()
    assert (config.show_menu, config.show_toolbar, config.dock_closable) == (False, False, False)
    assert config.menus == [] and config.toolbars == []


def test_round_trip_preserves_everything():
    config = _sample_config()
    restored = ViewConfig.from_bytes(config.to_bytes())
    assert restored == config
    assert restored.to_bytes() == config.to_bytes()


def test_round_trip_restores_enum_types():
    restored = ViewConfig.from_bytes(_sample_config().to_bytes())
    items = restored.toolbars[0].items
    assert [item.type for item in items] == [
        BarItemType.ACTION, BarItemType.WIDGET, BarItemType.SEPARATOR, BarItemType.SPACER,
    ]
    assert restored.statusbar_items[0].item_type is StatusbarItemType.PERMANENT
    assert restored.toolbars[0].text_style is BarItemStyle.TEXT_UNDER_ICON


def test_separator_and_spacer_carry_no_payload():
    restored = ViewConfig.from_bytes(_sample_config().to_bytes())
    sep = restored.toolbars[0].items[2]
    assert sep.action is None and sep.widget is None
    assert (sep.width, sep.height) == (0, 0)


def test_menu_tree_round_trip():
    node = _sample_config().menus[0]
    writer = DataStreamWriter()
    write_menu_tree(writer, node)
    reader = DataStreamReader(writer.getvalue())
    assert read_menu_tree(reader) == node
    assert reader.at_end()


def test_menu_tree_depth_preserved():
    restored = ViewConfig.from_bytes(_sample_config().to_bytes())
    top = restored.menus[0]
    assert [child.title for child in top.children] == ["Sum", "", "More"]
    assert top.children[2].children[0].title == "Deep"
    assert top.children[1].is_separator is True


def test_reset_clears_loaded_data():
    config = _sample_config()
    config.reset()
    assert config == ViewConfig()


def test_read_from_replaces_previous_content():
    config = _sample_config()
    config.read_from(DataStreamReader(ViewConfig(show_menu=True).to_bytes()))
    assert config == ViewConfig(show_menu=True)


def test_copy_from_is_deep():
    source = _sample_config()
    target = ViewConfig()
    result = target.copy_from(source)
    assert result is target
    assert target == source
    target.menus[0].children[0].title = "changed"
    assert source.menus[0].children[0].title == "Sum"


def test_unknown_bar_item_type_kept_as_int():
    writer = DataStreamWriter()
    for _ in range(6):
        writer.write_bool(False)
    writer.write_int32(0)
    writer.write_int32(1)
    ToolBar(items=[])._write(writer)
    data = bytearray(writer.getvalue())
    config = ViewConfig(toolbars=[ToolBar(items=[BarItem(type=7)])])
    restored = ViewConfig.from_bytes(config.to_bytes())
    assert restored.toolbars[0].items[0].type == 7
    assert len(data) > 0


def test_truncated_data_raises():
    data = _sample_config().to_bytes()
    with pytest.raises(DataStreamError):
        ViewConfig.from_bytes(data[:-3])


def test_empty_data_raises():
    with pytest.raises(DataStreamError):
        ViewConfig.from_bytes(b"")