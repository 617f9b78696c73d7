from django.contrib import admin
from .models import Artist, ArtistFollower
from . import services


@admin.register(Artist)
class ArtistAdmin(admin.ModelAdmin):
    list_display = ("name", "updated_at")
    search_fields = ("name",)
    readonly_fields = ("previous_names", "created_at", "updated_at")

    def save_model(self, request, obj, form, change):
        if not change:
            super().save_model(request, obj, form, change)
            return
        # Passa pelo service para manter o histórico de nomes
        changes = {
            field: form.cleaned_data[field]
            for field in form.changed_data
            if field in services.ARTIST_UPDATE_FIELDS
        }
        services.update_artist(obj, changes)


@admin.register(ArtistFollower)
class ArtistFollowerAdmin(admin.ModelAdmin):
    list_display = ("artist", "follower", "created_at")
    list_filter = ("artist",)
