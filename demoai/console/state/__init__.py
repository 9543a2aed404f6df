"""Console State Management.

Architecture:
- AppState: User actions per screen, publishing outcome events
- NotificationCenter: Sink turning outcome events into notifications
- Store: Composition root wiring everything for one process
"""

from .app_state import AppState
from .notifications import Notification, NotificationCenter
from .store import Store

__all__ = ["AppState", "Notification", "NotificationCenter", "Store"]
