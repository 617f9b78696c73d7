import uuid

import django.db.models.deletion
from django.db import migrations, models

import apps.albums.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("artists", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Album",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, verbose_name="Título do Álbum")),
                ("year_released", models.IntegerField(validators=[apps.albums.validators.validate_year_released], verbose_name="Ano de Lançamento")),
                ("cover_image_url", models.CharField(blank=True, max_length=500, null=True, validators=[apps.albums.validators.cover_image_url_validator], verbose_name="URL da Capa")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Criado Em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Atualizado Em")),
                ("artist", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="albums", to="artists.artist", verbose_name="Artista")),
            ],
            options={
                "verbose_name": "Álbum",
                "verbose_name_plural": "Álbuns",
                "db_table": "albums",
                "ordering": ["-year_released"],
                "constraints": [
                    models.UniqueConstraint(fields=("name", "artist"), name="unique_album_name_per_artist", violation_error_message="Este artista já possui um álbum com este nome."),
                ],
            },
        ),
    ]
