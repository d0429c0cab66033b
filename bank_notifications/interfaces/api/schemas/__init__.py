from .notification import NotificationCostSummary, NotificationCreate, NotificationRead

__all__ = [
    "NotificationCostSummary",
    "NotificationCreate",
    "NotificationRead",
]
