import pytest
from rest_framework.test import APIClient
from apps.artists.models import Artist
from apps.albums.models import Album

@pytest.fixture
def api_client():
    return APIClient()

@pytest.fixture
def create_user(db, django_user_model):
    """Fixture para criar usuários dinamicamente nos testes"""
    def make_user(**kwargs):
        return django_user_model.objects.create_user(**kwargs)
    return make_user


@pytest.fixture
def user_fixture(create_user):
    """Cria um usuário comum (papel 'user')."""
    return create_user(
        email='testuser@example.com',
        username='testuser',
        password='password123'
    )

@pytest.fixture
def editor_fixture(create_user):
    """Cria um usuário com papel de editor."""
    return create_user(
        email='editor@example.com',
        username='editor',
        password='password123',
        role='editor'
    )

@pytest.fixture
def admin_fixture(create_user):
    """Cria um usuário com papel de administrador."""
    return create_user(
        email='admin@example.com',
        username='admin',
        password='password123',
        role='admin'
    )

@pytest.fixture
def artist_fixture(db):
    """Cria um artista de teste."""
    return Artist.objects.create(
        name='Crystal Castles',
        biography='Duo canadense de música eletrônica.'
    )

@pytest.fixture
def album_fixture(db, artist_fixture):
    """Cria um álbum de teste associado ao artista."""
    return Album.objects.create(
        artist=artist_fixture,
        name='(III)',
        year_released=2012,
        cover_image_url='/images/albums/iii.jpg'
    )
