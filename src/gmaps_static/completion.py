from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Callable, Optional


class CompletionSignal(Future):
    """Future that also offers promise-style chaining via ``then``.

    A started load cannot be aborted, so the signal refuses cancellation.
    """

    def cancel(self) -> bool:
        return False

    def then(
        self,
        on_success: Optional[Callable[[Any], Any]] = None,
        on_error: Optional[Callable[[BaseException], Any]] = None,
    ) -> "CompletionSignal":
        chained = CompletionSignal()

        def _relay(done: Future) -> None:
            try:
                error = done.exception()
                if error is None:
                    value = done.result()
                    chained.set_result(on_success(value) if on_success else value)
                elif on_error is not None:
                    chained.set_result(on_error(error))
                else:
                    chained.set_exception(error)
            except Exception as e:
                chained.set_exception(e)

        self.add_done_callback(_relay)
        return chained
