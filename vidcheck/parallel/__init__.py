"""
Concurrent batch validation.

Example:
    >>> from vidcheck.parallel import BatchRunner
    >>> async with BatchRunner(max_concurrent=10) as runner:
    ...     batch = await runner.run_batch(tokens)
"""

from .runner import BatchResult, BatchRunner, BatchRunnerConfig, run_batch_sync

__all__ = [
    "BatchResult",
    "BatchRunner",
    "BatchRunnerConfig",
    "run_batch_sync",
]
