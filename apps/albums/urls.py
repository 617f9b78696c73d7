from django.urls import path
from .views import AlbumDetailView

urlpatterns = [
    path('<uuid:pk>/', AlbumDetailView.as_view(), name='album-detail'),
]
