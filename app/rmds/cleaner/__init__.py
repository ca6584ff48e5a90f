"""Directory traversal and deletion engine.

This module provides the run configuration, the target name predicate,
the per-entry deletion policy, and the tree walker that ties them
together.
"""

from rmds.cleaner.config import APPLEDOUBLE_PREFIX, DS_STORE_NAME, CleanConfig
from rmds.cleaner.matcher import is_target
from rmds.cleaner.models import Outcome, SkipReason, WalkSummary
from rmds.cleaner.policy import DeletionPolicy
from rmds.cleaner.prompt import Confirmer, ask_confirmation
from rmds.cleaner.reporter import Reporter
from rmds.cleaner.walker import TreeWalker

__all__ = [
    "APPLEDOUBLE_PREFIX",
    "DS_STORE_NAME",
    "CleanConfig",
    "Confirmer",
    "DeletionPolicy",
    "Outcome",
    "Reporter",
    "SkipReason",
    "TreeWalker",
    "WalkSummary",
    "ask_confirmation",
    "is_target",
]
