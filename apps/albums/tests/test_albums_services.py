import pytest
from django.core.exceptions import ValidationError
from apps.albums import services
from apps.albums.models import Album
from apps.artists.models import Artist


@pytest.mark.django_db
class TestAlbumServices:

    def test_create_album(self, artist_fixture):
        album = services.create_album(
            {"artist": artist_fixture, "name": "Amnesty (I)", "year_released": 2016}
        )

        assert Album.objects.get(pk=album.pk).artist == artist_fixture

    def test_create_album_duplicate_name_for_artist(self, album_fixture):
        """Teste Unitário: o par (name, artist) repetido vira erro de validação."""
        with pytest.raises(ValidationError):
            services.create_album(
                {"artist": album_fixture.artist, "name": "(III)", "year_released": 2013}
            )

        assert Album.objects.count() == 1

    def test_create_album_without_artist(self):
        with pytest.raises(ValidationError) as exc_info:
            services.create_album({"name": "Órfão", "year_released": 2000})

        assert "artist" in exc_info.value.message_dict

    def test_update_album(self, album_fixture):
        services.update_album(
            album_fixture,
            {"name": "III", "year_released": 2013, "cover_image_url": "https://x.com/c.png"},
        )

        album = Album.objects.get(pk=album_fixture.pk)
        assert album.name == "III"
        assert album.year_released == 2013
        assert album.cover_image_url == "https://x.com/c.png"

    def test_update_album_cannot_change_artist(self, album_fixture):
        other = Artist.objects.create(name="Outro")

        with pytest.raises(ValidationError) as exc_info:
            services.update_album(album_fixture, {"artist": other})

        assert "artist" in exc_info.value.message_dict
        assert Album.objects.get(pk=album_fixture.pk).artist_id == album_fixture.artist_id

    def test_update_album_validates_year(self, album_fixture):
        with pytest.raises(ValidationError):
            services.update_album(album_fixture, {"year_released": 1950})

        assert Album.objects.get(pk=album_fixture.pk).year_released == 2012

    def test_update_album_rejects_name_of_sibling_album(self, album_fixture):
        """Teste Unitário: renomear para o nome de outro álbum do mesmo artista falha."""
        sibling = services.create_album(
            {"artist": album_fixture.artist, "name": "Amnesty (I)", "year_released": 2016}
        )

        with pytest.raises(ValidationError):
            services.update_album(sibling, {"name": "(III)"})

        assert Album.objects.get(pk=sibling.pk).name == "Amnesty (I)"
        assert Album.objects.filter(name="(III)").count() == 1

    def test_get_and_destroy_album(self, album_fixture):
        assert services.get_album_by_id(album_fixture.pk) == album_fixture

        services.destroy_album(album_fixture)

        with pytest.raises(Album.DoesNotExist):
            services.get_album_by_id(album_fixture.pk)
