from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from couriers.models import CourierType
from geo.point import Point
from orders.models import OrderStatus

from .container import get_container
from .serializers import (
    AvailabilitySerializer,
    CourierSerializer,
    CreateOrderSerializer,
    OrderSerializer,
    OrderStatusFilterSerializer,
    RegisterCourierSerializer,
    UpdateLocationSerializer,
)


class CourierViewSet(viewsets.ViewSet):
    """
    Courier management.
    - List / Retrieve / Register
    - free: couriers currently available for matching
    - location: simulate movement (telemetry, does not take the dispatch lock)
    - availability: go online / offline
    """

    def list(self, request):
        couriers = get_container().courier_service.get_all_couriers()
        return Response(CourierSerializer(couriers, many=True).data)

    def retrieve(self, request, pk=None):
        courier = get_container().courier_service.get_courier(pk)
        return Response(CourierSerializer(courier).data)

    def create(self, request):
        serializer = RegisterCourierSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        location = serializer.validated_data["location"]

        courier = get_container().courier_service.register_courier(
            CourierType(serializer.validated_data["type"]), location["x"], location["y"]
        )
        return Response(CourierSerializer(courier).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'])
    def free(self, request):
        couriers = get_container().courier_service.get_free_couriers()
        return Response(CourierSerializer(couriers, many=True).data)

    @action(detail=True, methods=['patch'])
    def location(self, request, pk=None):
        serializer = UpdateLocationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        location = serializer.validated_data["location"]

        courier = get_container().courier_service.update_location(pk, location["x"], location["y"])
        return Response(CourierSerializer(courier).data)

    @action(detail=True, methods=['patch'])
    def availability(self, request, pk=None):
        serializer = AvailabilitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        courier = get_container().courier_service.set_availability(pk, serializer.validated_data["online"])
        return Response(CourierSerializer(courier).data)


class OrderViewSet(viewsets.ViewSet):
    """
    Order creation (which triggers dispatch) and lifecycle actions.
    """

    def list(self, request):
        filters = OrderStatusFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        order_status = filters.validated_data.get("status")

        orders = get_container().order_service.get_all_orders(
            OrderStatus(order_status) if order_status else None
        )
        return Response(OrderSerializer(orders, many=True).data)

    def retrieve(self, request, pk=None):
        order = get_container().order_service.get_order(pk)
        return Response(OrderSerializer(order).data)

    def create(self, request):
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order = get_container().order_service.create_order(
            pickup_location=Point(**data["pickup_location"]),
            delivery_location=Point(**data["delivery_location"]),
            priority=data["priority"],
            weight_kg=data["weight_kg"],
        )
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['patch'])
    def complete(self, request, pk=None):
        """
        Complete an ASSIGNED order and free its courier.
        """
        order = get_container().order_service.complete_order(pk)
        return Response(OrderSerializer(order).data)

    @action(detail=True, methods=['patch'])
    def cancel(self, request, pk=None):
        order = get_container().order_service.cancel_order(pk)
        return Response(OrderSerializer(order).data)


class DispatchStatsView(APIView):
    def get(self, request):
        return Response(get_container().dispatcher.get_stats().to_dict())
