from .auth import User
from .inventory import StockItem

__all__ = ['User', 'StockItem']
