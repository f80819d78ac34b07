import csv
import random

from couriers.models import CourierType


def generate_mock_couriers(filename="mock_couriers.csv", count=20):
    # Couriers are scattered uniformly over the 100 x 100 service grid.
    with open(filename, mode='w', newline='') as file:
        writer = csv.writer(file)
        writer.writerow(["courier_id", "x", "y", "type"])

        for i in range(count):
            courier_id = f"CUR-{str(i+1).zfill(3)}"

            x = round(random.uniform(0, 100), 2)
            y = round(random.uniform(0, 100), 2)

            # Mostly bicycles, a few cars for the heavy orders
            courier_type = random.choices(
                [CourierType.PEDESTRIAN, CourierType.BICYCLE, CourierType.CAR],
                weights=[0.3, 0.5, 0.2],
            )[0]

            writer.writerow([courier_id, x, y, courier_type.value])

    print(f"Successfully generated {count} mock couriers into '{filename}'.")

if __name__ == "__main__":
    generate_mock_couriers()
