from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import MLMViewSet

router = DefaultRouter()
router.register(r'program', MLMViewSet, basename='mlm')

urlpatterns = [
    path('', include(router.urls)),
]
