# apps/notifications/signals.py
from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver
from apps.albums.models import Album
from .tasks import notify_followers_of_new_album
import logging

logger = logging.getLogger(__name__)

def enqueue_new_album_notifications(album_id):
    try:
        notify_followers_of_new_album.delay(str(album_id))
        logger.info("Enfileirada notify_followers_of_new_album para álbum id=%s.", album_id)
    except Exception:
        logger.exception("Falha ao enfileirar notify_followers_of_new_album para álbum id=%s.", album_id)

# Dispara só na criação; edições de um álbum não geram aviso
@receiver(post_save, sender=Album)
def album_saved(sender, instance, created, **kwargs):
    logger.debug("Signal: Album saved id=%s created=%s", instance.pk, created)
    if not created:
        return
    album_id = instance.pk
    transaction.on_commit(lambda: enqueue_new_album_notifications(album_id))
