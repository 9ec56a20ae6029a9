from __future__ import annotations

import logging
from typing import Any, Callable, Optional

LOGGER = logging.getLogger(__name__)


def safe_call(
    fn: Optional[Callable[..., Any]],
    *args: Any,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> None:
    """Invoke a view callback without letting it tear down the Tk loop."""
    if fn is None:
        return
    try:
        fn(*args)
    except Exception as exc:
        if on_error:
            on_error(exc)
        else:
            LOGGER.exception("Callback failed: %s", exc)


__all__ = ["safe_call"]
