import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.albums.models import Album
from apps.artists.models import Artist


@pytest.mark.django_db
class TestArtistAlbumListCreateView:

    def test_list_albums_of_artist(self, api_client, album_fixture):
        Album.objects.create(artist=Artist.objects.create(name="Outro"), name="X", year_released=2000)
        url = reverse("artist-album-list-create", kwargs={"pk": album_fixture.artist_id})

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]["name"] == "(III)"
        assert response.data[0]["artist_name"] == "Crystal Castles"
        assert response.data[0]["years_ago"] == timezone.now().year - 2012

    def test_editor_creates_album(self, api_client, editor_fixture, artist_fixture):
        api_client.force_authenticate(user=editor_fixture)
        url = reverse("artist-album-list-create", kwargs={"pk": artist_fixture.pk})

        response = api_client.post(
            url,
            {
                "name": "Amnesty (I)",
                "year_released": 2016,
                "cover_image_url": "https://example.com/amnesty.jpg",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["artist"] == artist_fixture.pk
        assert Album.objects.filter(artist=artist_fixture, name="Amnesty (I)").exists()

    def test_create_album_for_unknown_artist(self, api_client, editor_fixture):
        api_client.force_authenticate(user=editor_fixture)
        url = reverse(
            "artist-album-list-create",
            kwargs={"pk": "00000000-0000-0000-0000-000000000000"},
        )

        response = api_client.post(url, {"name": "X", "year_released": 2000})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_regular_user_cannot_create_album(self, api_client, user_fixture, artist_fixture):
        api_client.force_authenticate(user=user_fixture)
        url = reverse("artist-album-list-create", kwargs={"pk": artist_fixture.pk})

        response = api_client.post(url, {"name": "X", "year_released": 2000})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"name": "X", "year_released": 1950}, "year_released"),
            ({"name": "X", "year_released": 2000, "cover_image_url": "http://x.com/a.jpg"}, "cover_image_url"),
            ({"year_released": 2000}, "name"),
            ({"name": "X"}, "year_released"),
        ],
    )
    def test_create_album_validation_errors(self, api_client, editor_fixture, artist_fixture, payload, field):
        api_client.force_authenticate(user=editor_fixture)
        url = reverse("artist-album-list-create", kwargs={"pk": artist_fixture.pk})

        response = api_client.post(url, payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert field in response.data

    def test_duplicate_album_name_returns_400(self, api_client, editor_fixture, album_fixture):
        api_client.force_authenticate(user=editor_fixture)
        url = reverse("artist-album-list-create", kwargs={"pk": album_fixture.artist_id})

        response = api_client.post(url, {"name": "(III)", "year_released": 2012})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Album.objects.count() == 1


@pytest.mark.django_db
class TestAlbumDetailView:

    def test_update_album_ignores_artist(self, api_client, editor_fixture, album_fixture):
        """Integração: o artista de um álbum não muda pela API."""
        other = Artist.objects.create(name="Outro")
        api_client.force_authenticate(user=editor_fixture)
        url = reverse("album-detail", kwargs={"pk": album_fixture.pk})

        response = api_client.patch(url, {"year_released": 2013, "artist": str(other.pk)})

        assert response.status_code == status.HTTP_200_OK
        album = Album.objects.get(pk=album_fixture.pk)
        assert album.year_released == 2013
        assert album.artist_id == album_fixture.artist_id

    def test_editor_deletes_album(self, api_client, editor_fixture, album_fixture):
        api_client.force_authenticate(user=editor_fixture)
        url = reverse("album-detail", kwargs={"pk": album_fixture.pk})

        response = api_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Album.objects.exists()

    def test_anonymous_cannot_delete(self, api_client, album_fixture):
        url = reverse("album-detail", kwargs={"pk": album_fixture.pk})

        assert api_client.delete(url).status_code == status.HTTP_401_UNAUTHORIZED
        assert Album.objects.exists()
