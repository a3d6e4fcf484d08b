# 📦 /services/favorites_service.py

from utils.event_bus import EventBus


class FavoritesStore:
    """Ordered set of favorited creator usernames for one client session.

    Every change publishes the new favorites count on `bus`.
    """

    def __init__(self, bus: EventBus | None = None, favorites=None):
        self.bus = bus or EventBus()
        self._favorites: list[str] = []
        for username in favorites or []:
            if username not in self._favorites:
                self._favorites.append(username)

    @property
    def favorites(self) -> list[str]:
        return list(self._favorites)

    @property
    def count(self) -> int:
        return len(self._favorites)

    def is_favorite(self, username: str) -> bool:
        return username in self._favorites

    def add(self, username: str) -> bool:
        if username in self._favorites:
            return False
        self._favorites.append(username)
        self._notify()
        return True

    def remove(self, username: str) -> bool:
        if username not in self._favorites:
            return False
        self._favorites.remove(username)
        self._notify()
        return True

    def toggle(self, username: str) -> bool:
        """Flip the favorite state; returns True when now favorited."""
        if self.remove(username):
            return False
        self.add(username)
        return True

    def _notify(self):
        self.bus.publish(self.count)
