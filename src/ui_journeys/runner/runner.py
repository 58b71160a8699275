"""
Scenario Runner

Executes scenarios step by step, each in its own freshly launched browser
session. The first failing step ends its scenario; nothing is retried.
Scenarios never share a session, so they can run concurrently and in any
order.
"""

import asyncio
import logging
import time
from datetime import datetime
from typing import AsyncContextManager, Callable, Iterable, Optional, Sequence

from ..browser import BrowserSession, open_session
from ..config import SuiteConfig
from ..errors import JourneyError
from ..reporting import ReportSink
from ..results import Outcome, ScenarioResult, StepResult
from .context import ScenarioContext
from .scenario import Scenario, Step

logger = logging.getLogger(__name__)

SessionFactory = Callable[[SuiteConfig], AsyncContextManager[BrowserSession]]

SESSION_STEP = "browser session"


def _elapsed_ms(start: float) -> float:
    return (time.monotonic() - start) * 1000


class ScenarioRunner:
    """
    Runs scenarios and hands each result to the reporting sinks.

    Usage:
        >>> runner = ScenarioRunner(SuiteConfig.from_env(), sinks=[ConsoleReporter()])
        >>> results = await runner.run_all(JOURNEYS.values(), concurrency=2)
    """

    def __init__(
        self,
        config: Optional[SuiteConfig] = None,
        session_factory: Optional[SessionFactory] = None,
        sinks: Iterable[ReportSink] = (),
    ):
        """
        Initialize the runner.

        Args:
            config: Suite configuration (uses env if None)
            session_factory: Opens an isolated BrowserSession per scenario
            sinks: Receivers of every ScenarioResult
        """
        self.config = config or SuiteConfig.from_env()
        self.session_factory = session_factory or open_session
        self.sinks = list(sinks)

    async def run(self, scenario: Scenario) -> ScenarioResult:
        """
        Run one scenario in a fresh browser session.

        Never raises for scenario failures; they are reported in the result.
        """
        logger.info(f"Scenario {scenario.name}: starting ({len(scenario.steps)} steps)")
        started_at = datetime.now()
        start = time.monotonic()
        steps: list[StepResult] = []
        failed_index: Optional[int] = None
        viewport = scenario.viewport

        try:
            async with self.session_factory(self.config) as session:
                ctx = ScenarioContext(session, self.config)
                if scenario.viewport is not None:
                    await ctx.set_viewport(scenario.viewport)
                viewport = ctx.viewport

                for index, step in enumerate(scenario.steps, start=1):
                    step_result = await self._run_step(step, ctx)
                    steps.append(step_result)
                    if not step_result.success:
                        failed_index = index
                        break
        except Exception as e:
            # Launch, viewport or teardown failure outside any step
            logger.exception(f"Scenario {scenario.name}: browser session failed")
            if failed_index is None:
                steps.append(
                    StepResult(
                        name=SESSION_STEP,
                        success=False,
                        elapsed_ms=_elapsed_ms(start),
                        error_kind=type(e).__name__,
                        error=str(e),
                    )
                )
                failed_index = len(steps)

        result = ScenarioResult(
            name=scenario.name,
            description=scenario.description,
            viewport=str(viewport) if viewport is not None else None,
            outcome=Outcome.PASS if failed_index is None else Outcome.FAIL,
            steps=steps,
            started_at=started_at,
            duration_ms=_elapsed_ms(start),
        )
        if failed_index is not None:
            failing = steps[-1]
            result.failing_step = failing.name
            result.diagnostic = self._diagnose(failed_index, len(scenario.steps), failing)
            logger.warning(f"Scenario {scenario.name}: FAIL - {result.diagnostic}")
        else:
            logger.info(f"Scenario {scenario.name}: PASS in {result.duration_ms:.0f}ms")

        for sink in self.sinks:
            sink.record(result)
        return result

    async def run_all(
        self,
        scenarios: Iterable[Scenario],
        concurrency: int = 1,
    ) -> list[ScenarioResult]:
        """
        Run scenarios with at most ``concurrency`` browsers open at a time.

        Results keep the input order. A failing scenario never stops the
        others.
        """
        semaphore = asyncio.Semaphore(max(1, concurrency))

        async def guarded(scenario: Scenario) -> ScenarioResult:
            async with semaphore:
                return await self.run(scenario)

        return list(await asyncio.gather(*(guarded(s) for s in scenarios)))

    async def _run_step(self, step: Step, ctx: ScenarioContext) -> StepResult:
        logger.debug(f"Step: {step.name}")
        start = time.monotonic()
        try:
            value = await step.action(ctx)
            if step.store_as:
                ctx.values[step.store_as] = value
            if step.expect is not None:
                await step.expect(ctx)
        except JourneyError as e:
            return StepResult(
                name=step.name,
                success=False,
                elapsed_ms=_elapsed_ms(start),
                error_kind=e.kind,
                error=e.message,
                deadline_ms=e.deadline_ms,
                url=e.url or ctx.session.current_url(),
            )
        except Exception as e:
            logger.exception(f"Step '{step.name}' raised unexpectedly")
            return StepResult(
                name=step.name,
                success=False,
                elapsed_ms=_elapsed_ms(start),
                error_kind=type(e).__name__,
                error=str(e),
                url=ctx.session.current_url(),
            )

        return StepResult(
            name=step.name,
            success=True,
            elapsed_ms=_elapsed_ms(start),
            url=ctx.session.current_url(),
        )

    @staticmethod
    def _diagnose(index: int, total: int, step: StepResult) -> str:
        text = (
            f'Step {index}/{total} "{step.name}" failed after {step.elapsed_ms:.0f}ms: '
            f"{step.error_kind}: {step.error}"
        )
        if step.deadline_ms is not None:
            text += f" (deadline {step.deadline_ms}ms)"
        if step.url:
            text += f" at {step.url}"
        return text


async def run_scenarios(
    scenarios: Sequence[Scenario],
    config: Optional[SuiteConfig] = None,
    *,
    concurrency: int = 1,
    sinks: Iterable[ReportSink] = (),
    session_factory: Optional[SessionFactory] = None,
) -> list[ScenarioResult]:
    """Convenience wrapper: build a runner and run every scenario."""
    runner = ScenarioRunner(config, session_factory=session_factory, sinks=sinks)
    return await runner.run_all(scenarios, concurrency=concurrency)
