from .base import ViewController, ViewHandle
from .dashboard import DashboardController, DashboardView
from .landing import LandingController, LandingView
from .products import ProductsController, ProductsView
from .reports import ReportsController, ReportsView
from .sales import SalesController, SalesView

__all__ = [
    'ViewController', 'ViewHandle',
    'LandingController', 'LandingView',
    'DashboardController', 'DashboardView',
    'ProductsController', 'ProductsView',
    'SalesController', 'SalesView',
    'ReportsController', 'ReportsView',
]
