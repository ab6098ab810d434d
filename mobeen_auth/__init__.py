"""mobeen-auth installer

Scaffolds a NextAuth + Prisma authentication feature into an existing
Next.js project without overwriting files, then installs dependencies,
creates tsconfig.json if needed and generates the Prisma client.
"""

__version__ = "1.0.0"

from .config import ConfigError, ScaffoldConfig
from .config_synthesizer import ConfigSynthesizer, SynthesisOutcome
from .merger import AtomicWriter, ConflictAwareCopier, CopyOutcome, MergeReport, TreeMerger
from .paths import ProjectPaths, resolve_paths
from .pipeline import PipelineReport, SetupPipeline, Stage, StageResult, StageStatus
from .runner import CommandResult, CommandRunner, SubprocessRunner

__all__ = [
    "SetupPipeline",
    "PipelineReport",
    "Stage",
    "StageResult",
    "StageStatus",
    "ScaffoldConfig",
    "ConfigError",
    "ConfigSynthesizer",
    "SynthesisOutcome",
    "ConflictAwareCopier",
    "CopyOutcome",
    "MergeReport",
    "TreeMerger",
    "AtomicWriter",
    "ProjectPaths",
    "resolve_paths",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
]
