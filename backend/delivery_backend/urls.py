from django.urls import path, include
from rest_framework.routers import DefaultRouter
from delivery.views import CourierViewSet, OrderViewSet, DispatchStatsView

router = DefaultRouter()
router.register(r'couriers', CourierViewSet, basename='courier')
router.register(r'orders', OrderViewSet, basename='order')

urlpatterns = [
    path('api/', include(router.urls)),
    path('api/dispatch/stats/', DispatchStatsView.as_view(), name='dispatch-stats'),
]
