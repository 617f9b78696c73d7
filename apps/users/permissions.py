from rest_framework.permissions import BasePermission, SAFE_METHODS

from .models import User

ADMIN_ROLES = (User.ROLE_ADMIN,)
EDITOR_ROLES = (User.ROLE_EDITOR, User.ROLE_ADMIN)


class CatalogRolePermission(BasePermission):
    """
    Leitura pública do catálogo; escrita depende do papel do usuário.

    A view pode sobrescrever `create_roles`, `update_roles` e `delete_roles`.
    """

    message = "Seu papel não permite alterar o catálogo."

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True

        user = request.user
        if not user or not user.is_authenticated:
            return False

        if request.method == "POST":
            roles = getattr(view, "create_roles", EDITOR_ROLES)
        elif request.method == "DELETE":
            roles = getattr(view, "delete_roles", ADMIN_ROLES)
        else:
            roles = getattr(view, "update_roles", EDITOR_ROLES)

        return user.has_role(*roles)
