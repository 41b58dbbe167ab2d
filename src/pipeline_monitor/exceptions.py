"""Exceptions for the pipeline monitor generator."""


class MonitorError(Exception):
    """Base exception for pipeline monitor errors."""

    pass


class StageReferenceError(MonitorError, IndexError):
    """A forward or caller addressed a stage the pipeline does not have."""

    pass


class PresetNotFoundError(MonitorError, KeyError):
    """No pipeline preset registered under this name."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class TemplateRenderError(MonitorError):
    """The testbench skeleton could not be loaded or rendered."""

    pass


class SettingsError(MonitorError):
    """Settings file is unreadable or invalid."""

    pass
