from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from apps.albums.serializers import AlbumSerializer
from .models import Artist
from . import services


class ArtistSerializer(serializers.ModelSerializer):
    follower_count = serializers.SerializerMethodField()

    class Meta:
        model = Artist
        fields = [
            'id',
            'name',
            'biography',
            'previous_names',
            'follower_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ('previous_names',)

    def get_follower_count(self, obj) -> int:
        # Listagens trazem a contagem anotada; criação/edição não
        count = getattr(obj, "follower_count", None)
        if count is None:
            count = obj.followers.count()
        return count

    def create(self, validated_data):
        try:
            return services.create_artist(validated_data)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(serializers.as_serializer_error(exc))

    def update(self, instance, validated_data):
        try:
            return services.update_artist(instance, validated_data)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(serializers.as_serializer_error(exc))


class ArtistDetailSerializer(ArtistSerializer):
    """Artista com seus álbuns, do mais recente para o mais antigo."""
    albums = AlbumSerializer(many=True, read_only=True)

    class Meta(ArtistSerializer.Meta):
        fields = ArtistSerializer.Meta.fields + ['albums']
