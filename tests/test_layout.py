from pathlib import Path

import pytest

from qcpfview.layout import (
    DockFeature,
    MenuEntry,
    build_menus,
    dock_features,
    dock_object_name,
    resolve_icon_path,
    visible_workspace_items,
)
from qcpfview.viewconfig import MenuNode, ViewConfig, WidgetItem


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    images = tmp_path / "Images"
    images.mkdir()
    (images / "open.png").write_bytes(b"png")
    return tmp_path


def test_resolve_existing_path_is_kept(tmp_path, app_dir):
    icon = tmp_path / "direct.png"
    icon.write_bytes(b"x")
    assert resolve_icon_path(str(icon), app_dir) == str(icon)


def test_resolve_falls_back_to_images_dir(app_dir):
    result = resolve_icon_path("/nowhere/at/all/open.png", app_dir)
    assert result == str(app_dir / "Images" / "open.png")


def test_resolve_missing_everywhere_is_empty(app_dir):
    assert resolve_icon_path("/nowhere/missing.png", app_dir) == ""
    assert resolve_icon_path("", app_dir) == ""


def _config(app_dir) -> ViewConfig:
    leaf = MenuNode(
        action_name="Sum",
        shortcut="Ctrl+S",
        icon_path="/gone/open.png",
        authority=2,
        checkable=True,
        plugin_id="QPlugin1",
    )
    sep = MenuNode(is_separator=True)
    sub_leaf = MenuNode(action_name="Search", authority=0)
    sub = MenuNode(title="Tools", authority=1, children=[sub_leaf])
    top = MenuNode(title="File", icon_path="raw.png", authority=3, children=[leaf, sep, sub])
    return ViewConfig(menus=[top])


def test_build_menus_structure(app_dir):
    menus = build_menus(_config(app_dir), 1, app_dir)
    assert len(menus) == 1
    top = menus[0]
    assert top.submenu and top.title == "File"
    assert top.icon_path == "raw.png"
    assert top.enabled is True
    action, sep, sub = top.children
    assert action.is_action
    assert action.object_name == "Sum" and action.title == "Sum"
    assert action.shortcut == "Ctrl+S"
    assert action.checkable is True
    assert action.plugin_id == "QPlugin1"
    assert action.icon_path == str(app_dir / "Images" / "open.png")
    assert sep.separator and not sep.is_action
    assert sub.submenu and sub.title == "Tools"
    assert [child.object_name for child in sub.children] == ["Search"]


def test_build_menus_authority(app_dir):
    menus = build_menus(_config(app_dir), 1, app_dir)
    sub = menus[0].children[2]
    assert sub.enabled is True
    assert sub.children[0].enabled is False

    restricted = build_menus(_config(app_dir), 5, app_dir)
    assert restricted[0].enabled is False
    assert restricted[0].children[0].enabled is False


def test_build_menus_empty_config(app_dir):
    assert build_menus(ViewConfig(), 0, app_dir) == []


def test_menu_entry_default_is_action():
    assert MenuEntry(title="x").is_action is True


def test_dock_features_flags():
    assert dock_features(ViewConfig()) == DockFeature.NONE
    config = ViewConfig(dock_floatable=True, dock_movable=True, dock_closable=False)
    features = dock_features(config)
    assert DockFeature.FLOATABLE in features
    assert DockFeature.MOVABLE in features
    assert DockFeature.CLOSABLE not in features


def test_dock_feature_values():
    assert int(dock_features(ViewConfig(dock_closable=True))) == 0x01
    assert int(dock_features(ViewConfig(dock_movable=True))) == 0x02
    assert int(dock_features(ViewConfig(dock_floatable=True))) == 0x04
    all_set = ViewConfig(dock_closable=True, dock_movable=True, dock_floatable=True)
    assert int(dock_features(all_set)) == 0x07


def test_dock_object_name():
    item = WidgetItem(plugin_id="QPluginChart", copy_id="1", object_name="wdt_ZoomChart")
    assert dock_object_name(item) == "QPluginChart_1_wdt_ZoomChart"


def test_visible_workspace_items_keeps_order():
    a = WidgetItem(object_name="a", visible=True)
    b = WidgetItem(object_name="b", visible=False)
    c = WidgetItem(object_name="c", visible=True)
    config = ViewConfig(workspace_widgets=[a, b, c])
    assert [item.object_name for item in visible_workspace_items(config)] == ["a", "c"]