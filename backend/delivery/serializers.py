from rest_framework import serializers

from couriers.models import CourierType
from geo.point import MAX_COORDINATE, MIN_COORDINATE
from orders.models import MAX_PRIORITY, MIN_PRIORITY, OrderStatus


class PointSerializer(serializers.Serializer):
    x = serializers.FloatField(min_value=MIN_COORDINATE, max_value=MAX_COORDINATE)
    y = serializers.FloatField(min_value=MIN_COORDINATE, max_value=MAX_COORDINATE)


class CourierSerializer(serializers.Serializer):
    """
    Read-only shape of a Courier snapshot.
    """
    id = serializers.CharField(read_only=True)
    type = serializers.CharField(source="courier_type.value", read_only=True)
    status = serializers.CharField(source="status.value", read_only=True)
    location = PointSerializer(read_only=True)
    completedOrdersToday = serializers.IntegerField(source="completed_orders_today", read_only=True)


class RegisterCourierSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=[courier_type.value for courier_type in CourierType])
    location = PointSerializer()


class UpdateLocationSerializer(serializers.Serializer):
    location = PointSerializer()


class AvailabilitySerializer(serializers.Serializer):
    online = serializers.BooleanField()


class OrderSerializer(serializers.Serializer):
    """
    Read-only shape of an Order snapshot.
    """
    id = serializers.CharField(read_only=True)
    status = serializers.CharField(source="status.value", read_only=True)
    pickupLocation = PointSerializer(source="pickup_location", read_only=True)
    deliveryLocation = PointSerializer(source="delivery_location", read_only=True)
    priority = serializers.IntegerField(read_only=True)
    weightKg = serializers.FloatField(source="weight_kg", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    assignedCourierId = serializers.CharField(source="assigned_courier_id", read_only=True, allow_null=True)


class CreateOrderSerializer(serializers.Serializer):
    pickupLocation = PointSerializer(source="pickup_location")
    deliveryLocation = PointSerializer(source="delivery_location")
    priority = serializers.IntegerField(min_value=MIN_PRIORITY, max_value=MAX_PRIORITY)
    weightKg = serializers.FloatField(source="weight_kg")

    def validate_weightKg(self, value):
        if value <= 0:
            raise serializers.ValidationError("Weight must be greater than 0.")
        return value


class OrderStatusFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[status.value for status in OrderStatus], required=False)
