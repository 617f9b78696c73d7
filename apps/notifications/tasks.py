import logging
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from config.celery import app
from apps.albums.models import Album
from apps.artists.models import ArtistFollower
from .models import Notification

logger = logging.getLogger(__name__)


@app.task
def notify_followers_of_new_album(album_id):
    """
    Cria uma notificação para cada seguidor do artista do álbum recém-criado.
    """
    try:
        album = Album.objects.select_related("artist").get(pk=album_id)
    except Album.DoesNotExist:
        logger.warning("Álbum id=%s não existe mais; nenhuma notificação criada.", album_id)
        return 0

    follower_ids = ArtistFollower.objects.filter(artist=album.artist).values_list(
        "follower_id", flat=True
    )
    notifications = [
        Notification(recipient_id=follower_id, album=album)
        for follower_id in follower_ids
    ]
    Notification.objects.bulk_create(notifications, ignore_conflicts=True)

    logger.info(
        "%s notificações criadas para o álbum id=%s", len(notifications), album_id
    )
    return len(notifications)


@app.task
def purge_read_notifications():
    """
    Tarefa agendada que apaga notificações já lidas mais antigas que
    NOTIFICATIONS_RETENTION_DAYS.
    """
    cutoff = timezone.now() - timedelta(days=settings.NOTIFICATIONS_RETENTION_DAYS)
    deleted, _ = Notification.objects.filter(is_read=True, created_at__lt=cutoff).delete()
    logger.info("Limpeza de notificações lidas: %s removidas.", deleted)
    return deleted
