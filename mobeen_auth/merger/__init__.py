"""
Merger module.

Provides the non-destructive primitives used to scaffold template files
into a project: a single-file copier that never overwrites, a directory
merger built on it, and an atomic writer for generated files.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriteError, AtomicWriter
from .base import CopyOutcome, MergeReport
from .copier import ConflictAwareCopier
from .tree_merger import TreeMerger

__all__ = [
    "AtomicWriteError",
    "AtomicWriter",
    "ConflictAwareCopier",
    "CopyOutcome",
    "MergeReport",
    "TreeMerger",
]
