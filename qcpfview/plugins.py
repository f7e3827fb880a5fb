"""The bundled plugins: their actions, functions and widgets."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

from .viewmodel import OutputInfo, OutputKind

logger = logging.getLogger(__name__)

Listener = Callable[[OutputInfo], None]
FunctionResult = tuple[int, Any]

_NORMAL_COLOR = "#DCE4EC"
_FOCUS_COLOR = "#34495E"


def _input_style(widget_class: str, normal_color: str, focus_color: str) -> str:
    return (
        f"{widget_class}{{border-style:none;padding:6px;border-radius:5px;"
        f"border:2px solid {normal_color};}}"
        f"{widget_class}:focus{{border:2px solid {focus_color};}}"
    )


def spin_box_style(normal_color: str = _NORMAL_COLOR, focus_color: str = _FOCUS_COLOR) -> str:
    """Style sheet for a rounded spin box with a focus colour."""
    return _input_style("QSpinBox", normal_color, focus_color)


def line_edit_style(normal_color: str = _NORMAL_COLOR, focus_color: str = _FOCUS_COLOR) -> str:
    """Style sheet for a rounded line edit with a focus colour."""
    return _input_style("QLineEdit", normal_color, focus_color)


def sum_values(first: int, second: int) -> int:
    """The value the tool bar sum widget shows for its two inputs."""
    return first + second


@dataclass(frozen=True)
class PluginAction:
    """A menu or tool bar action a plugin offers."""

    name: str
    detail: str
    handler: Callable[[bool], None]


@dataclass(frozen=True)
class PluginFunction:
    """A callable service a plugin offers; returns a status code and an output."""

    name: str
    detail: str
    handler: Callable[[Any], FunctionResult]


@dataclass(frozen=True)
class PluginWidget:
    """A widget a plugin contributes to the main window."""

    object_name: str
    detail: str
    docked: bool = False


class Plugin:
    """Base of every plugin: identity, offered items and a notification sink."""

    plugin_id = ""
    alias = ""
    version = ""
    comment = ""
    tag = ""
    authority = "USER1"
    system = False

    def __init__(self, listener: Listener | None = None) -> None:
        self._listener = listener

    def actions(self) -> list[PluginAction]:
        return []

    def functions(self) -> list[PluginFunction]:
        return []

    def widgets(self) -> list[PluginWidget]:
        return []

    def emit(self, info: OutputInfo) -> None:
        """Pass a notification to the listener, if there is one."""
        if self._listener is not None:
            self._listener(info)


class DataDownloadPlugin(Plugin):
    plugin_id = "QPlugin1"
    alias = "QPlugin1"
    version = "1.0.0.1"
    comment = "QPlugin1 Comment"
    tag = "NON-SINGLETON\\NON_SYSTEM\\DataDownLoad"

    _ACTIONS = (
        ("Sum", "Sum two data at backgroud."),
        ("Wave", ""),
        ("Database", ""),
        ("Net", ""),
        ("Python", ""),
        ("Plane", ""),
        ("Report", ""),
        ("Search", ""),
    )

    def actions(self) -> list[PluginAction]:
        return [PluginAction(name, detail, self.sum_action) for name, detail in self._ACTIONS]

    def widgets(self) -> list[PluginWidget]:
        return [
            PluginWidget("SumWidgetForToolbar", "sum function.", docked=True),
            PluginWidget("wdt_search", "search function.", docked=True),
            PluginWidget("wdt_Map", "map control.", docked=True),
        ]

    def sum_action(self, checked: bool = False) -> None:
        self.emit(OutputInfo(OutputKind.MSG_INFO, content="the end = 7", title="sum"))


class DataUploadPlugin(Plugin):
    plugin_id = "QPlugin2"
    alias = "QPlugin2"
    version = "1.0.0.2"
    comment = "QPlugin2 comment"
    tag = "NON-SINGLETON\\NON_SYSTEM\\DataUpLoad"

    def widgets(self) -> list[PluginWidget]:
        return [
            PluginWidget("wdt_Hud", "hud control."),
            PluginWidget("wdt_ParamPanel", "paramPanel."),
        ]


class DataHandlePlugin(Plugin):
    plugin_id = "QPlugin3"
    alias = "QPlugin3"
    version = "1.0.0.3"
    comment = "QPlugin3 comment"
    tag = "NON-SINGLETON\\NON_SYSTEM\\DataHandle"

    def __init__(
        self,
        listener: Listener | None = None,
        *,
        step_delay: float = 0.2,
        thread_delay: float = 0.1,
        timer_interval: float = 0.5,
    ) -> None:
        super().__init__(listener)
        self.step_delay = step_delay
        self.thread_delay = thread_delay
        self.timer_interval = timer_interval
        self.workers: list[threading.Thread] = []
        self._timer_stops: list[threading.Event] = []

    def actions(self) -> list[PluginAction]:
        return [PluginAction("StepUp", "Step Up form 0 ~ 10.", self.sum_action)]

    def functions(self) -> list[PluginFunction]:
        functions = [
            PluginFunction("StepUp", "Step Up form 0 ~ 10.", self.step_up),
            PluginFunction("StepDown", "Step Up form 10 ~ 0.", self.step_down),
            PluginFunction("StepTimer", "Start Timer Step Up", self._start_timer),
            PluginFunction(
                "StepThread",
                "Thread1 Step Up form 0 ~ 10. and Thread2 Step Down form 100 ~ 90",
                self.step_thread,
            ),
        ]
        self.emit(OutputInfo(OutputKind.STATUS_INFO, content="the Sum Action end = %1", title="Sum"))
        return functions

    def sum_action(self, checked: bool = False) -> None:
        total = sum_values(1, 1)
        self.emit(
            OutputInfo(OutputKind.STATUS_INFO, content=f"the Sum Action end = {total}", title="Sum")
        )

    def step_up(self, arg: Any = None) -> FunctionResult:
        """Report the numbers 1 to 10, pausing between steps."""
        for step in range(1, 11):
            self.emit(
                OutputInfo(OutputKind.STATUS_INFO, content=f"the StepUp end = {step}", title="StepUp")
            )
            time.sleep(self.step_delay)
        return 0, None

    def step_down(self, arg: Any = None) -> FunctionResult:
        """Report the numbers 10 down to 1, pausing between steps."""
        for step in range(10, 0, -1):
            self.emit(
                OutputInfo(OutputKind.STATUS_INFO, content=f"the StepDown end = {step}", title="StepDown")
            )
            time.sleep(self.step_delay)
        return 1, None

    def timer_tick(self) -> None:
        self.emit(OutputInfo(OutputKind.STATUS_INFO, content="the Timer Started.", title="Timeout"))

    def _start_timer(self, arg: Any = None) -> FunctionResult:
        stop = threading.Event()
        self._timer_stops.append(stop)

        def run() -> None:
            while not stop.wait(self.timer_interval):
                self.timer_tick()

        threading.Thread(target=run, daemon=True).start()
        return 0, None

    def _stop_timers(self) -> None:
        for stop in self._timer_stops:
            stop.set()
        self._timer_stops.clear()

    def _count_up(self) -> None:
        for step in range(1, 51):
            logger.debug("Plugin Thread, StepUp end = %d", step)
            time.sleep(self.thread_delay)

    def _count_down(self) -> None:
        for step in range(99, -1, -1):
            logger.debug("Plugin Thread, StepDown end = %d", step)
            time.sleep(self.thread_delay)

    def step_thread(self, arg: Any = None) -> FunctionResult:
        """Start one counting-up and one counting-down worker thread."""
        started = [
            threading.Thread(target=self._count_up, daemon=True),
            threading.Thread(target=self._count_down, daemon=True),
        ]
        for worker in started:
            worker.start()
        self.workers.extend(started)
        return 2, True


class DataSavePlugin(Plugin):
    plugin_id = "QPlugin4"
    alias = "QPlugin4"
    version = "1.0.0.4"
    comment = "QPlugin4 comment"
    tag = "NON-SINGLETON\\NON_SYSTEM\\DataSave"


class ChartPlugin(Plugin):
    plugin_id = "QPluginChart"
    alias = "QPluginChart"
    version = "1.0.0.1"
    comment = "Custom chart"
    tag = ""

    def widgets(self) -> list[PluginWidget]:
        return [
            PluginWidget("wdt_ZoomChart", "zoom chart."),
            PluginWidget("wdt_AreaChart", "area chart."),
            PluginWidget("wdt_Audio", "audio chart."),
        ]