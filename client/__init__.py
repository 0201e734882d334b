from client.api import ListNotFoundError, WishPocketClient, WishPocketError
from client.local_store import LocalListStore

__all__ = ["ListNotFoundError", "LocalListStore", "WishPocketClient", "WishPocketError"]
