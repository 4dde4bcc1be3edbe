# -*- coding: utf-8 -*-

"""Utility modules for cluster-validations."""

from cluster_validations.utils.terminal import terminal
from cluster_validations.utils.logging import configure_logging, VerbosityLevel

__all__ = [
    "terminal",
    "configure_logging",
    "VerbosityLevel",
]
