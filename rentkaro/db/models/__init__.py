from rentkaro.db.models.browse_history import BrowseHistoryEntry
from rentkaro.db.models.item import Item
from rentkaro.db.models.rental import Rental
from rentkaro.db.models.user import User

__all__ = ["User", "Item", "Rental", "BrowseHistoryEntry"]
