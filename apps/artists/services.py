"""
Funções de acesso ao catálogo de artistas.

Views, serializers e o admin passam por aqui para criar, ler, atualizar e
remover artistas, de modo que as regras de validação e o histórico de nomes
fiquem num lugar só.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count

from .models import Artist, ArtistFollower
from .utils import update_previous_names

logger = logging.getLogger(__name__)

ARTIST_CREATE_FIELDS = ("name", "biography")
ARTIST_UPDATE_FIELDS = ("name", "biography")

ARTIST_ORDERINGS = ("name", "-created_at", "-updated_at")


def _reject_unaccepted_fields(data, accepted):
    unaccepted = sorted(set(data) - set(accepted))
    if unaccepted:
        raise ValidationError(
            {field: "Este campo não pode ser alterado." for field in unaccepted}
        )


def create_artist(data):
    _reject_unaccepted_fields(data, ARTIST_CREATE_FIELDS)

    artist = Artist(**data)
    artist.full_clean()
    artist.save()

    logger.info("Artista criado id=%s name=%r", artist.pk, artist.name)
    return artist


def read_artists(query=None, ordering=None):
    """
    Lista artistas, opcionalmente filtrando pelo nome (`query`) e ordenando
    por um dos campos permitidos em ARTIST_ORDERINGS. Cada artista vem com
    `follower_count` anotado.
    """
    queryset = Artist.objects.annotate(follower_count=Count("followers"))

    if query:
        queryset = queryset.filter(name__icontains=query)

    if ordering in ARTIST_ORDERINGS:
        queryset = queryset.order_by(ordering)

    return queryset


def get_artist_by_id(artist_id):
    return Artist.objects.get(pk=artist_id)


@transaction.atomic
def update_artist(artist, data):
    """
    Atualiza nome e/ou biografia de um artista.

    Quando o nome muda, o histórico `previous_names` é recalculado a partir do
    estado gravado no banco antes desta atualização e salvo junto com o novo
    nome, na mesma transação.
    """
    _reject_unaccepted_fields(data, ARTIST_UPDATE_FIELDS)

    before = Artist.objects.select_for_update().get(pk=artist.pk)

    for field, value in data.items():
        setattr(artist, field, value)

    artist.full_clean()

    if "name" in data and data["name"] != before.name:
        artist.previous_names = update_previous_names(
            before.name, data["name"], before.previous_names
        )
        logger.info(
            "Artista id=%s renomeado de %r para %r", artist.pk, before.name, artist.name
        )
    else:
        artist.previous_names = before.previous_names

    artist.save()
    return artist


def destroy_artist(artist):
    artist_id = artist.pk
    artist.delete()
    logger.info("Artista removido id=%s", artist_id)


def follow_artist(artist, user):
    follower, created = ArtistFollower.objects.get_or_create(artist=artist, follower=user)
    if created:
        logger.debug("Usuário id=%s passou a seguir artista id=%s", user.pk, artist.pk)
    return follower


def unfollow_artist(artist, user):
    deleted, _ = ArtistFollower.objects.filter(artist=artist, follower=user).delete()
    return deleted > 0
