from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for the synthesized types cache.

    Use ``THREAD`` when a single ``TypeSynthesizer`` is shared between threads.
    Use ``NONE`` when each thread (execution context) owns its synthesizer and
    the cache is therefore only ever touched from one thread.
    """

    THREAD = "thread"
    """Guard cache get-or-create with ``threading.Lock``."""

    NONE = "none"
    """Disable locking around cache reads/writes."""
