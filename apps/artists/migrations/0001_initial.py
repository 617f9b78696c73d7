import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Artist",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, verbose_name="Nome")),
                ("biography", models.TextField(blank=True, null=True, verbose_name="Biografia")),
                ("previous_names", models.JSONField(blank=True, default=list, editable=False, verbose_name="Nomes Anteriores")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Criado Em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Atualizado Em")),
            ],
            options={
                "verbose_name": "Artista",
                "verbose_name_plural": "Artistas",
                "db_table": "artists",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="ArtistFollower",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("artist", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="followers", to="artists.artist", verbose_name="Artista")),
                ("follower", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="followed_artists", to=settings.AUTH_USER_MODEL, verbose_name="Seguidor")),
            ],
            options={
                "verbose_name": "Seguidor de Artista",
                "verbose_name_plural": "Seguidores de Artistas",
                "unique_together": {("artist", "follower")},
            },
        ),
    ]
