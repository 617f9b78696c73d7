from rest_framework import serializers
from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    album_id = serializers.ReadOnlyField(source='album.id')
    album_name = serializers.ReadOnlyField(source='album.name')
    cover_image_url = serializers.ReadOnlyField(source='album.cover_image_url')
    artist_id = serializers.ReadOnlyField(source='album.artist.id')
    artist_name = serializers.ReadOnlyField(source='album.artist.name')

    class Meta:
        model = Notification
        fields = (
            'id',
            'album_id',
            'album_name',
            'cover_image_url',
            'artist_id',
            'artist_name',
            'is_read',
            'created_at',
        )
        read_only_fields = fields
