from django.conf import settings
from django.db import models
from django.utils import timezone
from apps.albums.models import Album


class Notification(models.Model):
    """Aviso de que um artista seguido pelo usuário lançou um novo álbum."""

    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notifications',
        verbose_name='Destinatário'
    )

    album = models.ForeignKey(
        Album,
        on_delete=models.CASCADE,
        related_name='notifications',
        verbose_name='Álbum'
    )

    is_read = models.BooleanField(default=False, verbose_name='Lida')

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Notificação"
        verbose_name_plural = "Notificações"
        unique_together = ('recipient', 'album')

    def __str__(self):
        return f"{self.recipient.username}: novo álbum {self.album.name}"
