"""Modal popup windows and their state machines."""

from .base import PopupWindow
from .delete import Choice, DeletePopupWindow, PendingDeletion, ShowData

__all__ = ["Choice", "DeletePopupWindow", "PendingDeletion", "PopupWindow", "ShowData"]
