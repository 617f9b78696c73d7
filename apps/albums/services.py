"""Funções de acesso ao catálogo de álbuns."""
import logging

from django.core.exceptions import ValidationError

from .models import Album

logger = logging.getLogger(__name__)

ALBUM_CREATE_FIELDS = ("name", "year_released", "cover_image_url", "artist")
# O artista não entra aqui: um álbum não troca de artista depois de criado
ALBUM_UPDATE_FIELDS = ("name", "year_released", "cover_image_url")


def _reject_unaccepted_fields(data, accepted):
    unaccepted = sorted(set(data) - set(accepted))
    if unaccepted:
        raise ValidationError(
            {field: "Este campo não pode ser alterado." for field in unaccepted}
        )


def create_album(data):
    _reject_unaccepted_fields(data, ALBUM_CREATE_FIELDS)

    album = Album(**data)
    album.full_clean()
    album.save()

    logger.info(
        "Álbum criado id=%s name=%r artist_id=%s", album.pk, album.name, album.artist_id
    )
    return album


def get_album_by_id(album_id):
    return Album.objects.select_related("artist").get(pk=album_id)


def update_album(album, data):
    _reject_unaccepted_fields(data, ALBUM_UPDATE_FIELDS)

    for field, value in data.items():
        setattr(album, field, value)

    album.full_clean()
    album.save()

    logger.info("Álbum atualizado id=%s", album.pk)
    return album


def destroy_album(album):
    album_id = album.pk
    album.delete()
    logger.info("Álbum removido id=%s", album_id)
