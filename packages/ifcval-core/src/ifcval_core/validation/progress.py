from __future__ import annotations

from typing import Callable

from ifcval_core.models.report import ProgressNotification, Stage

ProgressSink = Callable[[ProgressNotification], None]

# (on entry, on exit) percentages per checker stage
STAGE_PROGRESS: dict[Stage, tuple[int, int]] = {
    Stage.SYNTAX_VALIDATION: (10, 25),
    Stage.HEADER_VALIDATION: (30, 40),
    Stage.SCHEMA_VALIDATION: (45, 55),
    Stage.NORMATIVE_RULES: (60, 70),
    Stage.INDUSTRY_PRACTICES: (75, 85),
}
FINALIZING_PROGRESS = 90


class ProgressEmitter:
    """Forwards stage/percent updates to a caller-owned sink.

    Delivery is synchronous; a sink that needs to cross a thread or process
    boundary does its own buffering. Exceptions raised by the sink propagate.
    """

    def __init__(self, sink: ProgressSink | None = None, estimated_time: float = 0.0):
        self.sink = sink
        self.estimated_time = estimated_time

    def emit(self, stage: Stage, progress: int) -> None:
        if self.sink is None:
            return
        self.sink(
            ProgressNotification(
                stage=stage,
                progress=progress,
                estimated_time_left=self.time_left(progress),
            )
        )

    def time_left(self, progress: int) -> float:
        if progress >= 100:
            return 0.0
        return round(self.estimated_time * (100 - progress) / 100, 2)

    def started(self) -> None:
        self.emit(Stage.STARTING, 0)

    def finalizing(self) -> None:
        self.emit(Stage.FINALIZING, FINALIZING_PROGRESS)

    def completed(self) -> None:
        self.emit(Stage.COMPLETED, 100)
