#Purpose: The vendor list "adapter/client".
#Sole responsibility: get the raw vendor list (HTTP JSON or a local CSV)
#and turn it into Vendor objects placed on the map.
#Encapsulates:
#URL construction (/list.json)
#timeouts/error handling
#id assignment + lat/lng -> pixel projection
#culling vendors that fall outside the map image
#It should not contain search or route logic.

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd
import requests
from dotenv import load_dotenv

from .models import Vendor
from .projection import MapProjection, default_projection

# Read vendor feed base URL from environment
# Example in .env:
# VENDOR_FEED_URL=http://localhost:8000
load_dotenv()
VENDOR_FEED_URL = os.getenv("VENDOR_FEED_URL")

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class VendorFeedError(Exception):
    """Raised when the vendor list cannot be downloaded or parsed."""
    pass


class VendorFeedClient:
    """
    Vendor feed client

    Sole responsibility:
    - Download /list.json
    - Return the raw records (list of dicts) untouched
    """
    def __init__(self, base_url: Optional[str] = None, timeout: int = 5):
        self.base_url = base_url or VENDOR_FEED_URL
        self.timeout = timeout #seconds to wait for the feed before giving up

        if not self.base_url:
            raise ValueError("Vendor feed URL not set. Please set VENDOR_FEED_URL in the .env file.")

    def list_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/list.json"

    def fetch_records(self) -> List[Record]:
        """
        GET /list.json and return the list of vendor records.

        Raises VendorFeedError on network errors, non-2xx responses,
        invalid JSON, or a payload that is not a list.
        """
        url = self.list_url()
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"Vendor feed request failed: {e}")
            raise VendorFeedError(f"could not download vendor list from {url}: {e}") from e
        except ValueError as e:
            logger.error(f"Vendor feed returned invalid JSON: {e}")
            raise VendorFeedError(f"vendor list at {url} is not valid JSON") from e

        if not isinstance(data, list):
            logger.error(f"Vendor feed returned {type(data).__name__}, expected list")
            raise VendorFeedError(f"vendor list at {url} is not a JSON array")

        logger.info(f"Downloaded {len(data)} vendor records from {url}")
        return data

    def fetch_vendors(self, projection: Optional[MapProjection] = None) -> List[Vendor]:
        return build_vendors(self.fetch_records(), projection=projection)


def load_records_csv(path: str) -> List[Record]:
    """
    Read vendor records from a CSV file (same columns as list.json).
    All cells are read as text; build_vendors does the numeric conversion.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    logger.info(f"Loaded {len(df)} vendor records from {path}")
    return df.to_dict(orient="records")


def build_vendors(
        records: Iterable[Record],
        projection: Optional[MapProjection] = None,
) -> List[Vendor]:
    """
    Assign ids, project to map pixels and drop vendors outside the map.

    Ids are 1-based positions in the FULL record list, assigned before
    culling, so a vendor keeps the same id whatever else is filtered out.
    Records without a usable latitude/longitude are skipped.
    """
    projection = projection or default_projection()

    vendors: List[Vendor] = []
    skipped = 0
    culled = 0

    for index, record in enumerate(records):
        vendor_id = index + 1
        try:
            latitude = float(record["latitude"])
            longitude = float(record["longitude"])
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Skipping vendor record {vendor_id}: missing or invalid latitude/longitude")
            skipped += 1
            continue

        x, y = projection.to_pixels(latitude, longitude)

        #filter entries not in display area (NaN coordinates fail this too)
        if not projection.contains(x, y):
            culled += 1
            continue

        vendors.append(
            Vendor(
                id=vendor_id,
                x=x,
                y=y,
                name=_text(record.get("name")),
                menu=_text(record.get("menu")),
                location=_text(record.get("location")),
                latitude=latitude,
                longitude=longitude,
            )
        )

    logger.info(f"Built {len(vendors)} vendors ({culled} outside map, {skipped} invalid)")
    return vendors


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
