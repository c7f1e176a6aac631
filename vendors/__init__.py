"""
Vendors domain package.

Public API:
- Domain models: Point, Vendor, Locatable
- Map projection: MapProjection, default_projection
- Loading: VendorFeedClient, VendorFeedError, build_vendors, load_records_csv
- Search: filter_vendors
"""
from .models import Locatable, Point, Vendor
from .projection import MapProjection, default_projection
from .feed import VendorFeedClient, VendorFeedError, build_vendors, load_records_csv
from .search import filter_vendors

__all__ = ["Point",
           "Vendor",
             "Locatable",
             "MapProjection",
             "default_projection",
             "VendorFeedClient",
             "VendorFeedError",
             "build_vendors",
             "load_records_csv",
             "filter_vendors",
               ]
