import uuid

from django.conf import settings
from django.db import models


class Artist(models.Model):
    """Modelo para representar um artista do catálogo."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Não é único no banco: artistas homônimos são permitidos
    name = models.CharField(
        max_length=255,
        verbose_name="Nome"
    )

    biography = models.TextField(
        blank=True,
        null=True,
        verbose_name="Biografia"
    )

    previous_names = models.JSONField(
        default=list,
        blank=True,
        editable=False,
        verbose_name="Nomes Anteriores"
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Criado Em")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Atualizado Em")

    class Meta:
        db_table = "artists"
        verbose_name = "Artista"
        verbose_name_plural = "Artistas"
        ordering = ['name']

    def __str__(self):
        return self.name


class ArtistFollower(models.Model):
    """Usuário que acompanha um artista e é notificado de novos álbuns."""

    artist = models.ForeignKey(
        Artist,
        on_delete=models.CASCADE,
        related_name='followers',
        verbose_name="Artista"
    )
    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='followed_artists',
        verbose_name="Seguidor"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Seguidor de Artista"
        verbose_name_plural = "Seguidores de Artistas"
        unique_together = ('artist', 'follower')

    def __str__(self):
        return f"{self.follower.username} segue {self.artist.name}"
