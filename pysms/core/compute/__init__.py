"""
Shared compute infrastructure for PySMS.

Submodules:
    timing: Execution timing utilities
"""

from pysms.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
