"""Core compile pipeline.

This module contains the compile workflow:

- Icon collection from manifests and source lists
- Artifact generation in dependency order
- The async compile entry points
"""

from iconforge.core.collector import IconCollector
from iconforge.core.compiler import (
    DEFAULT_FORMATS,
    compile_from_manifest,
    compile_from_sources,
)
from iconforge.core.orchestrator import FormatOrchestrator

__all__ = [
    "DEFAULT_FORMATS",
    "FormatOrchestrator",
    "IconCollector",
    "compile_from_manifest",
    "compile_from_sources",
]
