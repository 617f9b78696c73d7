import pytest
from django.urls import reverse
from apps.artists.models import Artist


@pytest.mark.django_db
class TestArtistAdmin:

    def _change_form_data(self, **fields):
        # Formset vazio do AlbumInline anexado ao ArtistAdmin
        data = {
            "albums-TOTAL_FORMS": "0",
            "albums-INITIAL_FORMS": "0",
            "albums-MIN_NUM_FORMS": "0",
            "albums-MAX_NUM_FORMS": "1000",
            "_save": "Salvar",
        }
        data.update(fields)
        return data

    def test_admin_rename_records_previous_name(self, admin_client, artist_fixture):
        """Integração: renomear pelo admin grava o nome antigo no histórico."""
        url = reverse("admin:artists_artist_change", args=[artist_fixture.pk])

        response = admin_client.post(
            url,
            self._change_form_data(name="CC", biography=artist_fixture.biography),
        )

        assert response.status_code == 302
        artist = Artist.objects.get(pk=artist_fixture.pk)
        assert artist.name == "CC"
        assert artist.previous_names == ["Crystal Castles"]

    def test_admin_biography_edit_keeps_history(self, admin_client, artist_fixture):
        url = reverse("admin:artists_artist_change", args=[artist_fixture.pk])

        response = admin_client.post(
            url,
            self._change_form_data(name="Crystal Castles", biography="Nova biografia."),
        )

        assert response.status_code == 302
        artist = Artist.objects.get(pk=artist_fixture.pk)
        assert artist.biography == "Nova biografia."
        assert artist.previous_names == []

    def test_admin_create_artist(self, admin_client):
        response = admin_client.post(
            reverse("admin:artists_artist_add"),
            self._change_form_data(name="Grimes", biography=""),
        )

        assert response.status_code == 302
        assert Artist.objects.get(name="Grimes").previous_names == []
