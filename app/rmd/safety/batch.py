"""Batch processing of removal targets.

Targets are handled strictly in the order given: each one is classified,
resolved (prompting if needed) and executed before the next is looked
at. A failing target never stops the batch.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from rmd.safety.classifier import PathClassifier
from rmd.safety.config import ProtectionConfig
from rmd.safety.executor import ActionExecutor
from rmd.safety.models import ExitCode, Flags, PathResult
from rmd.safety.resolver import Prompter, resolve
from rmd.safety.trash import TrashStore

logger = logging.getLogger(__name__)

ResultCallback = Callable[[PathResult], None]


@dataclass(slots=True)
class BatchResult:
    """Aggregated results of a batch.

    Attributes:
        results: One PathResult per input path, in input order.
    """

    results: list[PathResult] = field(default_factory=list)

    @property
    def exit_code(self) -> ExitCode:
        """Most severe per-path exit code.

        A protection refusal (2) outranks a generic failure (1) so calling
        scripts can tell them apart.
        """
        return max((r.exit_code for r in self.results), default=ExitCode.SUCCESS)

    @property
    def failed(self) -> list[PathResult]:
        return [r for r in self.results if not r.success]


class BatchController:
    """Runs the classify, resolve, execute pipeline over a list of paths.

    Attributes:
        _flags: Invocation flags shared by every path.
        _prompt: Asks the user for a decision.
        _classifier: Classifier with the protection rules in effect.
        _executor: Executor bound to the trash store.
    """

    def __init__(
        self,
        flags: Flags,
        prompt: Prompter,
        store: TrashStore | None = None,
        config: ProtectionConfig | None = None,
    ) -> None:
        self._flags = flags
        self._prompt = prompt
        self._classifier = PathClassifier(config)
        self._executor = ActionExecutor(store if store is not None else TrashStore())

    def process_path(self, path: str) -> PathResult:
        """Classify, resolve and execute a single path."""
        target = self._classifier.classify(path)
        resolution = resolve(target, self._flags, self._prompt)
        return self._executor.execute(resolution)

    def process(
        self,
        paths: Iterable[str],
        on_result: ResultCallback | None = None,
    ) -> BatchResult:
        """Process paths in order.

        Args:
            paths: Paths as given on the command line.
            on_result: Called with each result as soon as it is available,
                before the next path is prompted for.

        Returns:
            BatchResult with one entry per path.
        """
        batch = BatchResult()
        for path in paths:
            result = self.process_path(path)
            batch.results.append(result)
            if not result.success:
                logger.debug("%s: %s (%s)", path, result.outcome.value, result.error)
            if on_result is not None:
                on_result(result)
        return batch
