"""
Resolution of the template root and the target project directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

TEMPLATE_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class ProjectPaths:
    """Absolute locations every other component works from.

    Attributes:
        template_dir: Root of the bundled template tree
        project_dir: Project directory the templates are merged into
    """

    template_dir: Path
    project_dir: Path

    def template(self, *parts: str) -> Path:
        return self.template_dir.joinpath(*parts)

    def project(self, *parts: str) -> Path:
        return self.project_dir.joinpath(*parts)


def resolve_paths(
    project_dir: Path | str | None = None,
    template_dir: Path | str | None = None,
) -> ProjectPaths:
    """Build ProjectPaths, defaulting to the working directory and bundled templates.

    The working directory is read here, once, so that nothing downstream
    depends on process-wide state.
    """
    project = Path(project_dir) if project_dir is not None else Path.cwd()
    templates = Path(template_dir) if template_dir is not None else TEMPLATE_DIR
    return ProjectPaths(template_dir=templates.resolve(), project_dir=project.resolve())
