from django.contrib import admin
from .models import Album


class AlbumInline(admin.TabularInline):
    """Permite editar os álbuns dentro do formulário do Artista."""
    model = Album
    extra = 0
    fields = ('name', 'year_released', 'cover_image_url')


@admin.register(Album)
class AlbumAdmin(admin.ModelAdmin):
    list_display = ("name", "artist", "year_released")
    search_fields = ("name", "artist__name")
    list_filter = ("year_released",)

    def get_readonly_fields(self, request, obj=None):
        # O artista é fixo depois que o álbum existe
        if obj is not None:
            return ("artist",)
        return ()


from apps.artists.admin import ArtistAdmin
ArtistAdmin.inlines = [AlbumInline]
