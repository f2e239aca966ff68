"""
Headless rendition of the single-page client: a hash router, per-view
controllers and the in-memory product/sales state, talking to the stock API
over httpx.
"""

from .app import ClientApp
from .container import AppContainer
from .fragments import DirectoryFragmentLoader, HttpFragmentLoader
from .location import Location
from .router import ViewKind, ViewRegistry, ViewRouter
from .session import ClientSession
from .state import AppState, Product, Sale, SaleItem

__all__ = [
    'ClientApp', 'AppContainer', 'DirectoryFragmentLoader', 'HttpFragmentLoader',
    'Location', 'ViewKind', 'ViewRegistry', 'ViewRouter', 'ClientSession',
    'AppState', 'Product', 'Sale', 'SaleItem',
]
