import logging
import os
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List

import pandas as pd

from couriers.models import Courier
from couriers.store import InMemoryCourierStore
from dispatch.dispatcher import Dispatcher
from geo.point import Point
from orders.models import Order, OrderStatus
from orders.store import InMemoryOrderStore

def load_orders(filepath="mock_orders.csv", limit=50) -> List[Order]:
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    df = pd.read_csv(os.path.join(base_dir, filepath)).head(limit)

    orders = []
    for _, row in df.iterrows():
        orders.append(
            Order(
                id=str(row["order_id"]),
                pickup_location=Point(float(row["pickup_x"]), float(row["pickup_y"])),
                delivery_location=Point(float(row["delivery_x"]), float(row["delivery_y"])),
                priority=int(row["priority"]),
                weight_kg=float(row["weight_kg"]),
            )
        )
    return orders

def load_couriers(filepath="mock_couriers.csv") -> List[Courier]:
    # Resolve the correct path depending on where the user runs the script from.
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    df = pd.read_csv(os.path.join(base_dir, filepath))

    return [
        Courier.new(row["type"], float(row["x"]), float(row["y"]), courier_id=str(row["courier_id"]))
        for _, row in df.iterrows()
    ]

def run_simulation(num_orders=50, workers=8, completion_rounds=3):
    print("=== STARTING CONCURRENT DISPATCH SIMULATION ===")

    # 1. Load Data
    orders = load_orders(limit=num_orders)
    couriers = load_couriers()
    print(f"Loaded {len(orders)} Orders and {len(couriers)} Couriers.\n")

    # 2. Configure System
    courier_store = InMemoryCourierStore()
    order_store = InMemoryOrderStore()
    for courier in couriers:
        courier_store.save(courier)
    dispatcher = Dispatcher(courier_store, order_store)

    # 3. Submit every order concurrently, the way parallel API requests would arrive
    print(f"Dispatching {len(orders)} orders from {workers} threads...")
    start_time = time.time()
    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(dispatcher.dispatch, orders))
    print(f"Dispatched in {time.time() - start_time:.2f}s. Backlog: {dispatcher.get_queue_size()} orders.\n")

    # 4. Finish some deliveries so the backlog drains through freed couriers
    for round_index in range(completion_rounds):
        assigned = order_store.find_by_status(OrderStatus.ASSIGNED)
        if not assigned:
            break

        finishing = random.sample(assigned, k=max(1, len(assigned) // 2))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            list(pool.map(dispatcher.complete_order, finishing))

        print(f"Round {round_index + 1}: completed {len(finishing)} orders, backlog now {dispatcher.get_queue_size()}")

    # 5. Sanity check: no courier may hold two active orders
    active = pd.DataFrame(
        [{"courier_id": o.assigned_courier_id} for o in order_store.find_by_status(OrderStatus.ASSIGNED)],
        columns=["courier_id"],
    )
    double_booked = active["courier_id"].value_counts()
    double_booked = double_booked[double_booked > 1]

    print("\n=== SIMULATION COMPLETE ===")
    stats = dispatcher.get_stats().to_dict()
    for key, value in stats.items():
        print(f"{key}: {value}")

    summary = pd.DataFrame(
        [{"status": o.status.value, "priority": o.priority, "weight_kg": o.weight_kg} for o in order_store.find_all()]
    )
    print("\n--- Orders by status ---")
    print(summary.groupby("status").agg(orders=("priority", "size"), mean_priority=("priority", "mean"), mean_weight_kg=("weight_kg", "mean")))

    if double_booked.empty:
        print("\nNo courier was double-booked.")
    else:
        print(f"\n[FAILED] Double-booked couriers: {double_booked.to_dict()}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    run_simulation()
