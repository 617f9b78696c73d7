from django.contrib.auth.models import AbstractUser
from django.db import models

class User(AbstractUser):

    ROLE_USER = "user"
    ROLE_EDITOR = "editor"
    ROLE_ADMIN = "admin"

    ROLE_CHOICES = (
        (ROLE_USER, "Usuário"),
        (ROLE_EDITOR, "Editor"),
        (ROLE_ADMIN, "Administrador"),
    )

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_USER,
        verbose_name="Papel"
    )

    class Meta:
        verbose_name = "Usuário"
        verbose_name_plural = "Usuários"

    def has_role(self, *roles):
        """Superusuários sempre passam; os demais dependem do papel."""
        return self.is_superuser or self.role in roles
