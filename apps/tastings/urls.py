from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import TastingNoteViewSet

app_name = 'tastings'

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'tasting-notes', TastingNoteViewSet, basename='tasting-note')

urlpatterns = [
    path('', include(router.urls)),
]
