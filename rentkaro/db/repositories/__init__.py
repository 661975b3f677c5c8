# Repository pattern: services depend on these instead of raw queries

from rentkaro.db.repositories.history_repository import HistoryRepository
from rentkaro.db.repositories.item_repository import ItemRepository
from rentkaro.db.repositories.rental_repository import RentalRepository
from rentkaro.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "ItemRepository", "RentalRepository", "HistoryRepository"]
