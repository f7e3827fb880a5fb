# qcpfview

The view layer of a plugin-based application framework. It does not depend on a GUI
toolkit. It describes menus, tool bars, status bars and dock widgets as plain data,
and it stores that description in a big-endian binary config file. It also includes
a few sample plugins.

## Install

    pip install qcpfview

## Modules

### `qcpfview.datastream`

`DataStreamWriter` and `DataStreamReader` handle the binary format of the config file:

- Booleans take one byte.
- 32-bit integers are big-endian.
- Sizes are two 32-bit integers.
- Strings are a 32-bit byte length followed by UTF-16BE. A length of `0xFFFFFFFF` marks a null string, which reads back as `""`.

The writer methods are:

- `write_bool`
- `write_int32`
- `write_string`
- `write_size`
- `getvalue`

The reader methods are:

- `read_bool`
- `read_int32`
- `read_string`
- `read_size`
- `at_end`

The reader raises `DataStreamError` (a `ValueError`) when the data is truncated or a string has an odd byte length. The writer raises it for an integer outside the int32 range.

### `qcpfview.viewconfig`

This module holds the view description as dataclasses:

- `ViewConfig`
- `MenuNode`
- `ToolBar`
- `BarItem`
- `ActionItem`
- `WidgetItem`
- `StatusbarItem`

It also defines the enums `BarItemType`, `BarItemStyle` and `StatusbarItemType`.

A `ViewConfig` holds:

- the flags `show_menu`, `show_toolbar`, `show_statusbar`, `dock_floatable`, `dock_movable` and `dock_closable`;
- the lists `menus`, `toolbars`, `statusbar_items` and `workspace_widgets`.

Its methods are:

- `to_bytes()` and `ViewConfig.from_bytes(data)` convert to and from the binary format.
- `write_to(writer)` and `read_from(reader)` do the same through a writer or a reader.
- `reset()` clears every flag and list.
- `copy_from(other)` deep-copies another config into this one.

`read_menu_tree` and `write_menu_tree` serialise one menu node and its children, depth first.

### `qcpfview.viewmodel`

`ViewModel(config_dir, config_file_name, listener=None)` keeps a `ViewConfig` in step with a file on disk. It reports progress by calling `listener` with `OutputInfo` records, each tagged with an `OutputKind`. If the file is missing when the model is constructed, it starts with an empty config.

To compare the in-memory config with the file, the model writes it to `temp_<file name>` in the config directory. `.dat` is appended to that name if it does not already end in `.dat`.

The methods are:

- `load_config()` resets the config and reads it from the file. It raises `ConfigMissingError`, a `FileNotFoundError`, if the file does not exist.
- `save_config()` writes the config to the file when it differs. It emits `VIEW_CONFIG_CHANGED` and returns whether it wrote.
- `apply_config()` emits `VIEW_CONFIG_CHANGED` when the config differs from the file, and returns whether it does.
- `cancel_config()` reloads the config from the file when it differs, and returns whether it reloaded.
- `initialize()` loads the config, ignoring a missing file, and emits `INITIALIZE_FINISHED`. If the file is malformed, it emits `MSG_INFO` and re-raises `DataStreamError`.

`save_config()`, `apply_config()` and `cancel_config()` raise `ConfigMissingError` when the file is missing.

`files_differ(path1, path2)` returns `True` unless both files can be read and hold identical bytes.

### `qcpfview.layout`

This module turns a config into a description of what a host window would build:

- `build_menus(config, authority, application_dir)` returns a tree of `MenuEntry` objects. An entry is enabled when `authority <= ` the entry's required authority.
- `resolve_icon_path(icon_path, application_dir)` returns the path if the file exists. Otherwise it tries the same file name under `<application_dir>/Images`. If neither exists, it returns `""`.
- `dock_features(config)` combines the config's dock flags into `DockFeature` flags.
- `dock_object_name(item)` returns `<plugin_id>_<copy_id>_<object_name>`.
- `visible_workspace_items(config)` returns the visible workspace widgets, in order.

### `qcpfview.plugins`

The `Plugin` base class offers:

- `actions()`, which returns `PluginAction` objects;
- `functions()`, which returns `PluginFunction` objects;
- `widgets()`, which returns `PluginWidget` objects;
- `emit(info)`, which passes an `OutputInfo` to the plugin's listener.

The sample plugins are:

- `DataDownloadPlugin` has eight actions, all bound to `sum_action`, and three docked widgets.
- `DataUploadPlugin` has two widgets.
- `DataHandlePlugin` has a `StepUp` action and four functions:
  - `step_up` reports 1 to 10 and returns `(0, None)`.
  - `step_down` reports 10 down to 1 and returns `(1, None)`.
  - A repeating timer calls `timer_tick`.
  - `step_thread` starts two counting threads and returns `(2, True)`.

  The delays are set by the keyword arguments `step_delay`, `thread_delay` and `timer_interval`.
- `DataSavePlugin` offers nothing beyond its identity.
- `ChartPlugin` has three chart widgets.

The module also provides these helpers:

- `spin_box_style(normal_color, focus_color)` and `line_edit_style(normal_color, focus_color)` return style-sheet strings.
- `sum_values(first, second)` returns the sum of its two arguments.

### `qcpfview.charts`

- `SeriesBuffer` turns unsigned 8-bit PCM audio into a rolling window of points. The default window is 2000 samples, taking every 4th byte, mapped to `(byte - 128) / 128`.
  - `write(data)` returns the number of bytes consumed.
  - `read()` raises `io.UnsupportedOperation`.
  - `points` returns the current series.
- `key_command(key)` maps `+`/`plus`, `-`/`minus`, `left`, `right`, `up` and `down` to a `ChartCommand`. For any other key it returns `None`. `ChartCommand.scroll` gives the `(dx, dy)` step of 10.
- `area_chart_series()` returns the demo area chart's upper and lower lines.
- `zoom_chart_series(rng)` returns a 500-point noisy sine wave.

## Example

```python
from qcpfview.viewconfig import MenuNode, ViewConfig

config = ViewConfig()
config.show_menu = True
config.menus.append(MenuNode(title="File"))

restored = ViewConfig.from_bytes(config.to_bytes())
assert restored.menus[0].title == "File"
```

## What this package does not do

- It does not create windows, menus, tool bars or dialogs. `qcpfview.layout` only describes them, and a host application must build them with a toolkit of its choice.
- It does not discover or load plugins from disk. Plugins are plain Python classes that you instantiate yourself.
- It has no command-line program.

## Tests

    pip install "qcpfview[test]"
    pytest