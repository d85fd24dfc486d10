#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/driver.py
"""Debounced validation of edited MDX source.

An editor calls :meth:`ValidationDriver.submit` on every keystroke. The
driver waits for a quiet period, parses the latest text off the event loop
and publishes the result. Every submission is numbered; when a newer edit
arrives, the pending one is cancelled and any result it still produces is
discarded, so the published result always reflects the most recent edit.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Union

from mdxdoc.api import ParseResult, parse_mdx_async
from mdxdoc.constants import DEFAULT_DEBOUNCE_SECONDS
from mdxdoc.options import MdxParserOptions

logger = logging.getLogger(__name__)

ResultCallback = Callable[[ParseResult], None]


class ValidationDriver:
    """Debounce edits and run the parser on the most recent one.

    Parameters
    ----------
    on_result : callable, optional
        Called with each published :class:`ParseResult`
    debounce : float, default 0.5
        Quiet period in seconds before an edit is parsed
    options : MdxParserOptions or None, default = None
        Parser options

    Examples
    --------
        >>> import asyncio
        >>> async def main():
        ...     driver = ValidationDriver(debounce=0.01)
        ...     driver.submit("# Draft")
        ...     driver.submit("# Final")
        ...     return await driver.flush()
        >>> asyncio.run(main()).document.content[0].text_content()
        'Final'

    """

    def __init__(
        self,
        on_result: Optional[ResultCallback] = None,
        debounce: float = DEFAULT_DEBOUNCE_SECONDS,
        options: MdxParserOptions | None = None,
    ):
        if debounce < 0:
            raise ValueError(f"debounce must be non-negative, got {debounce}")
        self.on_result = on_result
        self.debounce = debounce
        self.options = options
        self._generation = 0
        self._pending: Optional[asyncio.Task[Optional[ParseResult]]] = None
        self._latest: Optional[ParseResult] = None

    @property
    def generation(self) -> int:
        """Number of edits submitted so far."""
        return self._generation

    @property
    def latest(self) -> Optional[ParseResult]:
        """Most recently published result, if any."""
        return self._latest

    @property
    def pending(self) -> bool:
        """Return True while an edit is waiting or being parsed."""
        return self._pending is not None and not self._pending.done()

    def submit(self, text: Union[str, bytes]) -> asyncio.Task[Optional[ParseResult]]:
        """Schedule validation of an edit, superseding any pending one.

        Must be called from a running event loop; returns immediately.

        Returns
        -------
        asyncio.Task
            Task resolving to the published result, or None if superseded

        """
        self._generation += 1
        if self.pending:
            logger.debug(f"Edit {self._generation} supersedes a pending validation")
            self._pending.cancel()  # type: ignore[union-attr]
        self._pending = asyncio.get_running_loop().create_task(self._run(text, self._generation))
        return self._pending

    def cancel(self) -> None:
        """Cancel the pending validation, if any; its result is never published."""
        self._generation += 1
        if self.pending:
            self._pending.cancel()  # type: ignore[union-attr]

    async def flush(self) -> Optional[ParseResult]:
        """Wait until no validation is pending and return the latest result."""
        while self.pending:
            await asyncio.wait({self._pending})  # type: ignore[arg-type]
        return self._latest

    async def _run(self, text: Union[str, bytes], generation: int) -> Optional[ParseResult]:
        if self.debounce:
            await asyncio.sleep(self.debounce)
        result = await parse_mdx_async(text, self.options)

        # The parse ran in a thread and may finish after a newer edit arrived
        if generation != self._generation:
            logger.debug(f"Discarding stale result of edit {generation} (latest is {self._generation})")
            return None

        self._latest = result
        if result.parse_error:
            logger.debug(f"Edit {generation} failed to parse at line {result.error_line}: {result.parse_error}")
        if self.on_result is not None:
            self.on_result(result)
        return result


__all__ = [
    "ResultCallback",
    "ValidationDriver",
]
