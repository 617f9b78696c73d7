from django.urls import path
from apps.albums.views import ArtistAlbumListCreateView
from .views import ArtistListCreateView, ArtistDetailView, ArtistFollowView

urlpatterns = [
    path('', ArtistListCreateView.as_view(), name='artist-list-create'),
    path('<uuid:pk>/', ArtistDetailView.as_view(), name='artist-detail'),
    path('<uuid:pk>/albums/', ArtistAlbumListCreateView.as_view(), name='artist-album-list-create'),
    path('<uuid:pk>/follow/', ArtistFollowView.as_view(), name='artist-follow'),
]
