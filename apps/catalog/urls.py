from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import BlendViewSet, BrandViewSet, RegionViewSet

app_name = 'catalog'

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'brands', BrandViewSet, basename='brand')
router.register(r'regions', RegionViewSet, basename='region')
router.register(r'blends', BlendViewSet, basename='blend')

urlpatterns = [
    path('', include(router.urls)),
]
