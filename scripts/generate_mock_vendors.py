import pandas as pd
import numpy as np

# Approximate edge of the map image
TOP_LAT = 37.81027
BOTTOM_LAT = 37.76555
LEFT_LNG = -122.45673
RIGHT_LNG = -122.38478

CUISINES = [
    "Tacos: Burritos: Quesadillas",
    "Hot dogs: Pretzels: Soda",
    "Coffee: Espresso: Pastries",
    "Dumplings: Noodles: Bubble tea",
    "Grilled cheese: Tomato soup",
    "Falafel: Gyros: Hummus",
    "Ice cream: Shaved ice: Churros",
    "Lobster rolls: Clam chowder",
]

STREETS = ["MARKET ST", "MISSION ST", "HOWARD ST", "FOLSOM ST", "BRYANT ST", "CALIFORNIA ST", "POLK ST"]


def generate_mock_vendors(num_vendors=200, outside_fraction=0.05, output_file="vendors_generated.csv"):
    """
    Generates a vendor list in the same shape as /list.json.
    A small share of vendors is placed outside the map so the culling step
    has something to drop.
    """
    data = []

    for vendor_index in range(num_vendors):
        lat = np.random.uniform(BOTTOM_LAT, TOP_LAT)
        lng = np.random.uniform(LEFT_LNG, RIGHT_LNG)

        if np.random.random() < outside_fraction:
            # push it well south of the map
            lat = BOTTOM_LAT - np.random.uniform(0.01, 0.05)

        data.append({
            "name": f"Truck {vendor_index+1}",
            "menu": np.random.choice(CUISINES),
            "location": f"{np.random.randint(1, 3000)} {np.random.choice(STREETS)}",
            "latitude": np.round(lat, 6),
            "longitude": np.round(lng, 6),
        })

    df = pd.DataFrame(data)
    df.to_csv(output_file, index=False)
    print(f"✅ Generated {num_vendors} vendors and saved to '{output_file}'")

    print("\nTop 5 menus:")
    counts = df['menu'].value_counts().head(5)
    for menu, count in counts.items():
        print(f"  {menu}: {count} vendors")

    return df


if __name__ == "__main__":
    generate_mock_vendors(num_vendors=200)
