import pandas as pd
import numpy as np
from datetime import datetime, timezone, timedelta

def generate_mock_orders(num_orders=200, num_merchants=15, output_file="mock_orders.csv"):
    """
    Generates a dataset of delivery orders on the 100 x 100 grid.
    Pickups come from a fixed set of merchants so several orders compete
    for the couriers around the same spot, which exercises the backlog.
    """
    # 1. Generate fixed merchants (pickups)
    merchants = []
    for merchant_index in range(num_merchants):
        merchants.append({
            "name": f"Merchant {merchant_index+1}",
            "x": np.random.uniform(5, 95),
            "y": np.random.uniform(5, 95),
        })

    data = []
    now = datetime.now(timezone.utc)

    # 2. Generate Orders
    for order_index in range(num_orders):
        merchant = merchants[np.random.randint(0, num_merchants)]

        # Delivery point within ~20 units of the merchant, clipped to the grid
        delivery_x = np.clip(merchant["x"] + np.random.uniform(-20, 20), 0, 100)
        delivery_y = np.clip(merchant["y"] + np.random.uniform(-20, 20), 0, 100)

        data.append({
            "order_id": f"o_{str(order_index+1).zfill(6)}",
            "created_at": (now - timedelta(minutes=int(np.random.randint(0, 60)))).isoformat(),
            "pickup_x": np.round(merchant["x"], 2),
            "pickup_y": np.round(merchant["y"], 2),
            "delivery_x": np.round(delivery_x, 2),
            "delivery_y": np.round(delivery_y, 2),
            # Mostly light parcels; the tail needs a bicycle or a car
            "weight_kg": np.round(np.random.choice(
                [np.random.uniform(0.5, 5.0), np.random.uniform(5.0, 15.0), np.random.uniform(15.0, 48.0)],
                p=[0.7, 0.2, 0.1],
            ), 1),
            "priority": int(np.random.randint(1, 11)),
            "pickup_address": merchant["name"]
        })

    # 3. Save to CSV
    df = pd.DataFrame(data)
    df.to_csv(output_file, index=False)
    print(f"Generated {num_orders} orders and saved to '{output_file}'")

    # Print a quick preview of pickup density
    print("\nTop 5 Merchants (Courier Contention):")
    counts = df['pickup_address'].value_counts().head(5)
    for name, count in counts.items():
        print(f"  {name}: {count} orders")

if __name__ == "__main__":
    generate_mock_orders()
