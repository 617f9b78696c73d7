from rest_framework import serializers
from .models import User


class UserRegistrationSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True)
    followed_artists_count = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = (
            'id',
            'username',
            'first_name',
            'email',
            'password',
            'role',
            'followed_artists_count',
        )
        read_only_fields = ('id', 'role')
        extra_kwargs = {
            'email': {'required': True, 'allow_blank': False},
        }

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data['username'],
            email=validated_data['email'],
            password=validated_data['password'],
            first_name=validated_data.get('first_name', ''),
        )

    def get_followed_artists_count(self, obj) -> int:
        return obj.followed_artists.count()
