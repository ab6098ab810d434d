"""
Setup pipeline - scaffolds the auth templates and runs the follow-on steps.

Stages run in a fixed order:

1. Merge the schema templates (prisma/)
2. Merge the application code templates (src/)
3. Copy the example environment file
4. Install runtime and development dependencies
5. Create tsconfig.json if the project has none
6. Run the Prisma client generator

Every stage is isolated: a failure is logged and recorded in the report,
and the next stage still runs. Code generation is attempted even when the
dependency install failed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from .config import ScaffoldConfig
from .config_synthesizer import ConfigSynthesizer
from .merger import AtomicWriteError, ConflictAwareCopier, MergeReport, TreeMerger
from .paths import ProjectPaths
from .runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    """Pipeline stages, in execution order."""

    MERGE_SCHEMA = "merge_schema"
    MERGE_CODE = "merge_code"
    COPY_ENV_EXAMPLE = "copy_env_example"
    INSTALL_DEPENDENCIES = "install_dependencies"
    SYNTHESIZE_CONFIG = "synthesize_config"
    GENERATE_CLIENT = "generate_client"


class StageStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class StageResult:
    """Outcome of one pipeline stage."""

    stage: Stage
    status: StageStatus
    detail: str = ""
    merge_report: MergeReport | None = None


@dataclass
class PipelineReport:
    """Ordered stage outcomes of a pipeline run."""

    results: list[StageResult] = field(default_factory=list)

    @property
    def failed(self) -> list[StageResult]:
        return [r for r in self.results if r.status is StageStatus.FAILED]

    @property
    def succeeded(self) -> bool:
        return not self.failed

    def result_for(self, stage: Stage) -> StageResult | None:
        for result in self.results:
            if result.stage is stage:
                return result
        return None


class StageFailure(Exception):
    """Raised inside a stage to end it with a logged failure."""

    pass


class SetupPipeline:
    """Runs the scaffolding stages against one project directory."""

    def __init__(
        self,
        paths: ProjectPaths,
        config: ScaffoldConfig | None = None,
        runner: CommandRunner | None = None,
        skip_install: bool = False,
        skip_generate: bool = False,
    ):
        """Initialize the pipeline.

        Args:
            paths: Template and project locations
            config: Scaffolding configuration (defaults if None)
            runner: Executes the external tools (subprocess if None)
            skip_install: Do not run the package manager
            skip_generate: Do not run the code generator
        """
        self.paths = paths
        self.config = config or ScaffoldConfig()
        self.runner = runner or SubprocessRunner()
        self.skip_install = skip_install
        self.skip_generate = skip_generate

        self._copier = ConflictAwareCopier(display_root=paths.project_dir)
        self._merger = TreeMerger(self._copier, display_root=paths.project_dir)
        self._synthesizer = ConfigSynthesizer(display_root=paths.project_dir)

    def run(self) -> PipelineReport:
        """Run every stage in order and return their outcomes.

        Never raises for a stage failure.
        """
        logger.info("Installing mobeen-auth files into %s", self.paths.project_dir)
        report = PipelineReport()

        stages: list[tuple[Stage, Callable[[], StageResult]]] = [
            (Stage.MERGE_SCHEMA, lambda: self._merge_tree(Stage.MERGE_SCHEMA, self.config.schema_dir)),
            (Stage.MERGE_CODE, lambda: self._merge_tree(Stage.MERGE_CODE, self.config.code_dir)),
            (Stage.COPY_ENV_EXAMPLE, self._copy_env_example),
            (Stage.INSTALL_DEPENDENCIES, self._install_dependencies),
            (Stage.SYNTHESIZE_CONFIG, self._synthesize_config),
            (Stage.GENERATE_CLIENT, self._generate_client),
        ]
        for stage, action in stages:
            report.results.append(self._run_stage(stage, action))

        if report.failed:
            names = ", ".join(r.stage.value for r in report.failed)
            logger.warning("Some steps failed: %s", names)
        logger.info("mobeen-auth setup complete!")
        return report

    def _run_stage(self, stage: Stage, action: Callable[[], StageResult]) -> StageResult:
        logger.debug("Stage %s starting", stage.value)
        try:
            result = action()
        except StageFailure as e:
            logger.error("%s", e)
            result = StageResult(stage, StageStatus.FAILED, str(e))
        except (OSError, AtomicWriteError) as e:
            logger.error("Step %s failed: %s", stage.value, e)
            result = StageResult(stage, StageStatus.FAILED, str(e))
        logger.debug("Stage %s finished: %s", stage.value, result.status.value)
        return result

    def _merge_tree(self, stage: Stage, name: str) -> StageResult:
        merge_report = self._merger.merge(self.paths.template(name), self.paths.project(name))
        return StageResult(stage, StageStatus.OK, merge_report.summary(), merge_report)

    def _copy_env_example(self) -> StageResult:
        name = self.config.env_file
        outcome = self._copier.copy(self.paths.template(name), self.paths.project(name))
        merge_report = MergeReport()
        merge_report.record(outcome, self.paths.project(name))
        return StageResult(Stage.COPY_ENV_EXAMPLE, StageStatus.OK, outcome.value, merge_report)

    def _install_dependencies(self) -> StageResult:
        if self.skip_install:
            logger.info("Skipping dependency installation")
            return StageResult(Stage.INSTALL_DEPENDENCIES, StageStatus.SKIPPED)

        invocations = self.config.install_invocations()
        for label, args in invocations:
            logger.info("Installing %s...", label)
            result = self.runner.run(args, self.paths.project_dir)
            if not result.ok:
                raise StageFailure(f"Failed to install dependencies: {result.describe_failure()}")

        if invocations:
            logger.info("Dependencies installed successfully!")
        return StageResult(Stage.INSTALL_DEPENDENCIES, StageStatus.OK, f"{len(invocations)} install command(s)")

    def _synthesize_config(self) -> StageResult:
        path = self.paths.project(self.config.generated_config_name)
        outcome = self._synthesizer.ensure(path, self.config.generated_config)
        return StageResult(Stage.SYNTHESIZE_CONFIG, StageStatus.OK, outcome.value)

    def _generate_client(self) -> StageResult:
        if self.skip_generate:
            logger.info("Skipping code generation")
            return StageResult(Stage.GENERATE_CLIENT, StageStatus.SKIPPED)

        logger.info("Running %s...", " ".join(self.config.generate_command))
        result = self.runner.run(list(self.config.generate_command), self.paths.project_dir)
        if not result.ok:
            raise StageFailure(f"Failed to run {' '.join(self.config.generate_command)}: {result.describe_failure()}")

        logger.info("Prisma client generated!")
        return StageResult(Stage.GENERATE_CLIENT, StageStatus.OK)
