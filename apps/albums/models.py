import uuid

from django.db import models
from django.utils import timezone
from apps.artists.models import Artist
from .validators import cover_image_url_validator, validate_year_released


class Album(models.Model):
    """Modelo para representar um álbum de um artista."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    artist = models.ForeignKey(
        Artist,
        on_delete=models.CASCADE,
        related_name='albums',
        verbose_name="Artista"
    )

    name = models.CharField(
        max_length=255,
        verbose_name="Título do Álbum"
    )

    year_released = models.IntegerField(
        validators=[validate_year_released],
        verbose_name="Ano de Lançamento"
    )

    cover_image_url = models.CharField(
        max_length=500,
        blank=True,
        null=True,
        validators=[cover_image_url_validator],
        verbose_name="URL da Capa"
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Criado Em")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Atualizado Em")

    class Meta:
        db_table = "albums"
        verbose_name = "Álbum"
        verbose_name_plural = "Álbuns"
        ordering = ['-year_released']
        constraints = [
            models.UniqueConstraint(
                fields=['name', 'artist'],
                name='unique_album_name_per_artist',
                violation_error_message="Este artista já possui um álbum com este nome.",
            )
        ]

    def __str__(self):
        return f"{self.name} ({self.year_released})"

    @property
    def years_ago(self):
        return timezone.now().year - self.year_released
