"""Loading, saving, applying and reverting the persisted view configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Callable

from .datastream import DataStreamError
from .viewconfig import ViewConfig

VERSION = "1.0.0.6"
CONFIG_SUFFIX = ".dat"
TEMP_PREFIX = "temp_"


class OutputKind(Enum):
    """The kinds of notification a view model reports."""

    STATUS_INFO = auto()
    MSG_INFO = auto()
    MSG_WARN = auto()
    MSG_ERROR = auto()
    MSG_QUESTION = auto()
    APPLICATION_CLOSE = auto()
    PLUGIN_COLLECT = auto()
    VIEW_CONFIG_CHANGED = auto()
    STATUSBAR_TEMP = auto()
    INITIALIZE_FINISHED = auto()


@dataclass
class OutputInfo:
    """A notification sent to whoever listens to the view model."""

    kind: OutputKind
    content: str = ""
    title: str = ""
    timeout: int = 0


class ConfigMissingError(FileNotFoundError):
    """Raised when the view configuration file does not exist."""


def files_differ(path1: str | Path, path2: str | Path) -> bool:
    """Return True unless both files exist and hold identical bytes."""
    try:
        first = Path(path1).read_bytes()
        second = Path(path2).read_bytes()
    except OSError:
        return True
    return first != second


class ViewModel:
    """Owns a :class:`ViewConfig` and keeps it in step with its file on disk."""

    version = VERSION

    def __init__(
        self,
        config_dir: str | Path,
        config_file_name: str,
        *,
        listener: Callable[[OutputInfo], None] | None = None,
    ) -> None:
        self.config_dir = Path(config_dir)
        self.config_file_name = config_file_name
        self.config_path = self.config_dir / config_file_name
        self.config = ViewConfig()
        self._listener = listener
        try:
            self.load_config()
        except ConfigMissingError:
            pass

    @property
    def _temp_path(self) -> Path:
        return self.config_dir / (TEMP_PREFIX + self.config_file_name)

    def _emit(self, kind: OutputKind, content: str = "") -> None:
        if self._listener is not None:
            self._listener(OutputInfo(kind=kind, content=content))

    def _write_config(self, path: Path) -> Path:
        if not path.name.endswith(CONFIG_SUFFIX):
            path = path.with_name(path.name + CONFIG_SUFFIX)
        path.write_bytes(self.config.to_bytes())
        return path

    def _require_config_file(self) -> None:
        if not self.config_path.exists():
            raise ConfigMissingError(f"view config file not found: {self.config_path}")

    def _differs_from_disk(self) -> bool:
        temp = self._temp_path
        self._write_config(temp)
        return files_differ(temp, self.config_path)

    def load_config(self) -> ViewConfig:
        """Reset the configuration and read it from the configuration file."""
        self.config.reset()
        self._emit(OutputKind.STATUS_INFO, "Trying to read view config file...")
        if not self.config_path.exists():
            self._emit(OutputKind.STATUS_INFO, "The View config file lost!")
            raise ConfigMissingError(f"view config file not found: {self.config_path}")
        self.config.read_from_bytes = None  # type: ignore[attr-defined]
        del self.config.read_from_bytes  # type: ignore[attr-defined]
        loaded = ViewConfig.from_bytes(self.config_path.read_bytes())
        self.config.copy_from(loaded)
        return self.config

    def save_config(self) -> bool:
        """Write the configuration to its file if it changed; return whether it did."""
        content = "trying to save config file."
        self._emit(OutputKind.STATUS_INFO, content)
        self._require_config_file()
        if self._differs_from_disk():
            self._write_config(self.config_path)
            self._emit(OutputKind.VIEW_CONFIG_CHANGED, content)
            return True
        return False

    def apply_config(self) -> bool:
        """Announce a change if the configuration differs from its file."""
        self._emit(OutputKind.STATUS_INFO, "apply view config.")
        self._require_config_file()
        if self._differs_from_disk():
            self._emit(OutputKind.VIEW_CONFIG_CHANGED, "trying to save config file.")
            return True
        return False

    def cancel_config(self) -> bool:
        """Reload the configuration from its file if it was changed in memory."""
        self._emit(OutputKind.STATUS_INFO, "recover view config.")
        self._require_config_file()
        if self._differs_from_disk():
            self.load_config()
            return True
        return False

    def initialize(self) -> None:
        """Load the configuration and report that initialisation finished."""
        try:
            try:
                self.load_config()
            except ConfigMissingError:
                pass
        except DataStreamError:
            self._emit(OutputKind.MSG_INFO, "ViewModel Initialize failed!")
            raise
        self._emit(OutputKind.INITIALIZE_FINISHED)