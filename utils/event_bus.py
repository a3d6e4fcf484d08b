# 📦 utils/event_bus.py
# ─────────────────────────────
# In-process publish/subscribe channel

import structlog

log = structlog.get_logger()


class EventBus:
    """Subscribers are called in subscription order on every publish."""

    def __init__(self):
        self._subscribers = []

    def subscribe(self, callback):
        """Register `callback`; returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, *args, **kwargs):
        for callback in list(self._subscribers):
            try:
                callback(*args, **kwargs)
            except Exception as e:
                log.error("Event subscriber failed", subscriber=getattr(callback, "__name__", repr(callback)), error=str(e))

    def __len__(self):
        return len(self._subscribers)
