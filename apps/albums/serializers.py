from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from .models import Album
from . import services


class AlbumSerializer(serializers.ModelSerializer):
    """
    Serializer de álbum. O artista vem da URL na criação e nunca pode ser
    alterado depois, por isso é somente leitura aqui.
    """
    artist_name = serializers.ReadOnlyField(source='artist.name')
    years_ago = serializers.ReadOnlyField()

    class Meta:
        model = Album
        fields = [
            'id',
            'name',
            'year_released',
            'years_ago',
            'cover_image_url',
            'artist',
            'artist_name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ('artist',)
        # A unicidade (name, artist) é checada pelo full_clean do service
        validators = []

    def create(self, validated_data):
        try:
            return services.create_album(validated_data)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(serializers.as_serializer_error(exc))

    def update(self, instance, validated_data):
        try:
            return services.update_album(instance, validated_data)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(serializers.as_serializer_error(exc))
