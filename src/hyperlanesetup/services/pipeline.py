"""Linear provisioning pipeline with first-failure short-circuit."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from hyperlanesetup.errors import SetupError
from hyperlanesetup.models import StepStatus


@dataclass
class StepOutcome:
    name: str
    status: StepStatus
    error: Optional[str] = None


@dataclass
class PipelineResult:
    outcomes: List[StepOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed_step is None

    @property
    def failed_step(self) -> Optional[str]:
        for outcome in self.outcomes:
            if outcome.status == StepStatus.FAILED:
                return outcome.name
        return None

    @property
    def error(self) -> Optional[str]:
        for outcome in self.outcomes:
            if outcome.status == StepStatus.FAILED:
                return outcome.error
        return None

    def status_of(self, name: str) -> Optional[StepStatus]:
        for outcome in self.outcomes:
            if outcome.name == name:
                return outcome.status
        return None


class ProvisioningPipeline:
    """Runs installer steps in order and stops at the first failure.

    Steps already completed are not undone and later steps are never
    attempted once one has failed.
    """

    def __init__(self, steps: Sequence, logger):
        self.steps = list(steps)
        self.logger = logger

    def run(self) -> PipelineResult:
        result = PipelineResult()
        for step in self.steps:
            self.logger.debug("Running step: %s", step.name)
            try:
                status = step.ensure()
            except SetupError as exc:
                self.logger.debug("Step %s failed: %s", step.name, exc)
                result.outcomes.append(StepOutcome(step.name, StepStatus.FAILED, str(exc)))
                return result
            result.outcomes.append(StepOutcome(step.name, status))
        return result
