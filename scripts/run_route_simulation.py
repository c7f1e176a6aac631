import csv
import logging
import os
import sys
import time
from typing import List, Optional

from routing.planner import plan_route
from routing.policy import RoutePolicy
from routing.metrics import route_length
from vendors.feed import VendorFeedClient, build_vendors, load_records_csv
from vendors.models import Vendor
from vendors.search import filter_vendors


def load_vendors(filepath: Optional[str] = "vendors_generated.csv") -> List[Vendor]:
    """
    Load vendors from a local CSV, or from VENDOR_FEED_URL when filepath is None.
    """
    if filepath is None:
        return VendorFeedClient().fetch_vendors()

    # Resolve the correct path depending on where the user runs the script from.
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    absolute_path = filepath if os.path.isabs(filepath) else os.path.join(base_dir, filepath)
    return build_vendors(load_records_csv(absolute_path))


def run_simulation(filepath: Optional[str] = "vendors_generated.csv", search: str = "", output_file: str = "route_results.csv"):
    print("=== STARTING VENDOR ROUTE SIMULATION ===")

    # 1. Load Data
    vendors = load_vendors(filepath)
    print(f"Loaded {len(vendors)} vendors on the map.\n")

    # 2. Filter by search terms
    selected = filter_vendors(vendors, search)
    print(f"Search '{search}' matched {len(selected)} vendors.\n")

    # 3. Plan the route
    policy = RoutePolicy(log_steps=True)
    start_time = time.time()
    route = plan_route(selected, policy=policy)
    print(f"Planned route through {len(route)} stops in {time.time() - start_time:.4f}s.\n")

    print("--- Route ---")
    for stop_number, vendor in enumerate(route, 1):
        print(f"{stop_number:>3}. [{vendor.id}] {vendor.name} @ {vendor.location} ({vendor.x:.0f}, {vendor.y:.0f})")

    # 4. Write results
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    output_path = os.path.join(base_dir, output_file)

    with open(output_path, "w", newline='') as file:
        writer = csv.DictWriter(file, fieldnames=["stop", "id", "name", "menu", "location", "latitude", "longitude", "x", "y"])
        writer.writeheader()
        for stop_number, vendor in enumerate(route, 1):
            writer.writerow({"stop": stop_number, **vendor.to_record()})

    print("\n=== SIMULATION COMPLETE ===")
    print(f"Route length: {route_length(route):.0f} px")
    print(f"Results written to '{output_file}'.")
    return route


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_simulation(search=" ".join(sys.argv[1:]))
