"""
Parallel batch runner for video id validation.

Architecture:
    - One task per token, executed on a shared thread pool
    - Accepted short URLs collected into a lock-guarded list
    - Validation failures converted into results inside each task; a failing
      token never cancels its siblings
    - The batch returns only once every task has finished
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

from ..checksum.validator import check_id
from ..input.normalizer import format_short_url, normalize_token
from ..reporting import Notifier
from ..types import TokenResult

logger = logging.getLogger(__name__)


@dataclass
class BatchRunnerConfig:
    """Configuration for the batch runner.

    Attributes:
        max_concurrent: Worker threads in the pool
        timeout_per_request: Seconds to wait for one token, None waits forever
    """

    max_concurrent: int = 10
    timeout_per_request: Optional[float] = None


@dataclass
class BatchResult:
    """Aggregated result of one batch.

    Attributes:
        accepted: Short URLs of every token that passed, in completion order
        results: Per-token results, in input order
        total_time_ms: Wall-clock time for the batch
    """

    accepted: List[str] = field(default_factory=list)
    results: List[TokenResult] = field(default_factory=list)
    total_time_ms: float = 0.0

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failure_count(self) -> int:
        return len(self.results) - self.success_count


class _AcceptedSet:
    """Accepted short URLs shared by every task of one batch."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: List[str] = []

    def add(self, url: str) -> None:
        with self._lock:
            self._items.append(url)

    def snapshot(self) -> List[str]:
        with self._lock:
            return list(self._items)


class _BatchProgress:
    """Completed-task counter for one batch."""

    def __init__(self, total: int) -> None:
        self.total = total
        self._lock = threading.Lock()
        self._done = 0

    def advance(self) -> int:
        with self._lock:
            self._done += 1
            return self._done


class BatchRunner:
    """
    Validates many tokens concurrently.

    Tokens are normalized here, so callers may pass raw URLs. One runner can
    serve several batches at once; each batch keeps its own accepted set and
    progress.

    Example:
        >>> async with BatchRunner(max_concurrent=4) as runner:
        ...     batch = await runner.run_batch(["youtu.be/dQw4w9WgXcQ"])
        >>> batch.accepted
    """

    def __init__(
        self,
        max_concurrent: int = 10,
        timeout_per_request: Optional[float] = None,
        notifier: Notifier | None = None,
    ) -> None:
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")

        self._config = BatchRunnerConfig(
            max_concurrent=max_concurrent,
            timeout_per_request=timeout_per_request,
        )
        self._notifier = notifier
        self._executor = ThreadPoolExecutor(
            max_workers=max_concurrent,
            thread_name_prefix="vidcheck_worker",
        )

        logger.debug(
            "BatchRunner initialized: max_concurrent=%d, timeout=%s",
            max_concurrent,
            timeout_per_request,
        )

    @property
    def config(self) -> BatchRunnerConfig:
        return self._config

    async def run_batch(
        self,
        tokens: Sequence[str],
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> BatchResult:
        """
        Validate every token and wait for all of them.

        Args:
            tokens: Raw tokens; each is normalized exactly once before validation
            progress_callback: Optional callback(done, total)

        Returns:
            BatchResult with the accepted short URLs and per-token results
        """
        accepted = _AcceptedSet()
        progress = _BatchProgress(len(tokens))

        start_time = time.time()
        logger.info(
            "Starting batch: %d tokens, %d workers",
            len(tokens),
            self._config.max_concurrent,
        )

        tasks = [
            self._process_token(
                normalize_token(token), accepted, progress, progress_callback
            )
            for token in tokens
        ]
        results: List[TokenResult] = list(await asyncio.gather(*tasks))

        batch = BatchResult(
            accepted=accepted.snapshot(),
            results=results,
            total_time_ms=(time.time() - start_time) * 1000,
        )
        logger.info(
            "Batch complete: %d/%d accepted in %.1f ms",
            batch.success_count,
            len(results),
            batch.total_time_ms,
        )
        return batch

    async def _process_token(
        self,
        token: str,
        accepted: _AcceptedSet,
        progress: _BatchProgress,
        progress_callback: Callable[[int, int], None] | None,
    ) -> TokenResult:
        start_time = time.time()
        loop = asyncio.get_running_loop()
        try:
            future = loop.run_in_executor(self._executor, check_id, token)
            if self._config.timeout_per_request is None:
                result = await future
            else:
                result = await asyncio.wait_for(
                    future, timeout=self._config.timeout_per_request
                )
        except asyncio.TimeoutError:
            # The worker keeps running; whatever it returns later is discarded.
            logger.warning(
                "Token %s timed out after %.1fs",
                token,
                time.time() - start_time,
            )
            result = TokenResult(
                token=token,
                error=f"Timeout after {self._config.timeout_per_request}s",
                latency_ms=(time.time() - start_time) * 1000,
            )
        except Exception as e:
            logger.error("Token %s failed unexpectedly: %s", token, e)
            result = TokenResult(
                token=token,
                error=str(e),
                latency_ms=(time.time() - start_time) * 1000,
            )

        if result.success:
            accepted.add(format_short_url(token))
        if self._notifier is not None:
            self._notifier(result)

        done = progress.advance()
        if progress_callback:
            progress_callback(done, progress.total)

        return result

    async def run_single(self, token: str) -> TokenResult:
        """Validate a single token (convenience method)."""
        batch = await self.run_batch([token])
        return batch.results[0]

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)
        logger.debug("BatchRunner shutdown complete")

    async def __aenter__(self) -> "BatchRunner":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.shutdown()


def run_batch_sync(
    tokens: Sequence[str],
    max_concurrent: int = 10,
    timeout_per_request: Optional[float] = None,
    notifier: Notifier | None = None,
) -> BatchResult:
    """
    Synchronous wrapper for batch validation.

    Example:
        >>> from vidcheck.parallel import run_batch_sync
        >>> run_batch_sync(["youtu.be/dQw4w9WgXcQ"]).accepted
    """

    async def _run() -> BatchResult:
        async with BatchRunner(
            max_concurrent=max_concurrent,
            timeout_per_request=timeout_per_request,
            notifier=notifier,
        ) as runner:
            return await runner.run_batch(tokens)

    return asyncio.run(_run())
