from rest_framework import generics
from django.shortcuts import get_object_or_404
from apps.artists.models import Artist
from apps.users.permissions import CatalogRolePermission, EDITOR_ROLES
from .models import Album
from .serializers import AlbumSerializer
from . import services


class ArtistAlbumListCreateView(generics.ListCreateAPIView):
    """
    GET: Lista os álbuns de um artista, do mais recente para o mais antigo.
    POST: Cadastra um álbum para o artista (editores e administradores).
    URL esperada: /api/artists/<uuid:pk>/albums/
    """

    serializer_class = AlbumSerializer
    permission_classes = [CatalogRolePermission]
    create_roles = EDITOR_ROLES

    def get_artist(self):
        return get_object_or_404(Artist, pk=self.kwargs["pk"])

    def get_queryset(self):
        return Album.objects.filter(artist=self.get_artist()).select_related("artist")

    def perform_create(self, serializer):
        serializer.save(artist=self.get_artist())


class AlbumDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    GET: Detalhes de um álbum.
    PUT/PATCH: Atualiza nome, ano e capa (editores e administradores).
    DELETE: Remove o álbum (editores e administradores).
    """

    queryset = Album.objects.select_related("artist")
    serializer_class = AlbumSerializer
    permission_classes = [CatalogRolePermission]
    update_roles = EDITOR_ROLES
    delete_roles = EDITOR_ROLES

    def perform_destroy(self, instance):
        services.destroy_album(instance)
