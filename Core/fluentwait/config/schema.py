from __future__ import annotations

from typing import Iterable, TypeVar

from pydantic import BaseModel, Field, model_validator

from fluentwait.core.wait import DEFAULT_POLL_INTERVAL, FailureHook, Wait
from fluentwait.logging.artifacts import ArtifactManager, ScreenshotOnFailure

T = TypeVar("T")


class WaitConfig(BaseModel):
    timeout_seconds: float = Field(default=4.0, gt=0)
    poll_interval_seconds: float = Field(default=DEFAULT_POLL_INTERVAL, ge=0)
    artifacts_root: str = "artifacts"
    screenshot_on_failure: bool = False

    @model_validator(mode="after")
    def validate_poll_interval(self) -> WaitConfig:
        if self.poll_interval_seconds >= self.timeout_seconds:
            raise ValueError("poll_interval_seconds must be smaller than timeout_seconds")
        return self

    def wait_for(self, entity: T, failure_hooks: Iterable[FailureHook] = ()) -> Wait[T]:
        return Wait(
            entity,
            self.timeout_seconds,
            failure_hooks,
            poll_interval=self.poll_interval_seconds,
        )

    def failure_hooks_for(self, driver, label: str = "timeout") -> list[FailureHook]:
        if not self.screenshot_on_failure:
            return []
        return [ScreenshotOnFailure(driver, ArtifactManager(self.artifacts_root), label)]
