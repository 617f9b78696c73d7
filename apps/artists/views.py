from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from django.db.models import Count
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.users.permissions import CatalogRolePermission, ADMIN_ROLES, EDITOR_ROLES
from .models import Artist
from .serializers import ArtistSerializer, ArtistDetailSerializer
from . import services


class ArtistListCreateView(generics.ListCreateAPIView):
    """
    GET: Lista os artistas, com busca por nome.
    URL de exemplo: /api/artists/?query=termo&ordering=-updated_at
    POST: Cadastra um novo artista (apenas administradores).
    """

    serializer_class = ArtistSerializer
    permission_classes = [CatalogRolePermission]
    create_roles = ADMIN_ROLES

    @extend_schema(
        parameters=[
            OpenApiParameter("query", str, description="Trecho do nome do artista"),
            OpenApiParameter("ordering", str, enum=list(services.ARTIST_ORDERINGS)),
        ]
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return services.read_artists(
            query=self.request.query_params.get("query", "").strip(),
            ordering=self.request.query_params.get("ordering"),
        )


class ArtistDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    GET: Detalhes do artista, incluindo seus álbuns.
    PUT/PATCH: Atualiza nome e biografia (editores e administradores).
    DELETE: Remove o artista e todos os seus álbuns (apenas administradores).
    """

    queryset = Artist.objects.annotate(
        follower_count=Count("followers")
    ).prefetch_related("albums")
    permission_classes = [CatalogRolePermission]
    update_roles = EDITOR_ROLES
    delete_roles = ADMIN_ROLES

    def get_serializer_class(self):
        if self.request.method == "GET":
            return ArtistDetailSerializer
        return ArtistSerializer

    def perform_destroy(self, instance):
        services.destroy_artist(instance)


class ArtistFollowView(APIView):
    """
    POST: O usuário logado passa a seguir o artista.
    DELETE: O usuário logado deixa de seguir o artista.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(request=None, responses={201: dict, 200: dict})
    def post(self, request, pk):
        artist = get_object_or_404(Artist, pk=pk)
        services.follow_artist(artist, request.user)
        return Response(
            {"message": f"Agora você segue {artist.name}."},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(request=None, responses={204: None, 404: dict})
    def delete(self, request, pk):
        artist = get_object_or_404(Artist, pk=pk)
        if not services.unfollow_artist(artist, request.user):
            return Response(
                {"error": "Você não segue este artista."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)
