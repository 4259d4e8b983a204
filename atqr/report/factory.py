from atqr.config.settings import Settings
from atqr.report.base import BaseReportSink
from atqr.report.log_sink import LogReportSink


class ReportSinkFactory:
    """Creates the report sink named in settings."""

    SINKS: dict[str, type[BaseReportSink]] = {
        "log": LogReportSink,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseReportSink:
        name = settings.report_sink.lower()
        sink_cls = cls.SINKS.get(name)
        if sink_cls is None:
            raise ValueError(f"Unknown report sink '{name}'. Choose from: {list(cls.SINKS)}")
        return sink_cls()
