from rest_framework import generics, status, serializers
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from django.shortcuts import get_object_or_404
from drf_yasg.utils import swagger_auto_schema
from .models import Notification
from .serializers import NotificationSerializer


class EmptyResponseSerializer(serializers.Serializer):
    pass


class NotificationListView(generics.ListAPIView):
    """
    GET: Lista as notificações não lidas do usuário logado, das mais novas
    para as mais antigas.
    """

    serializer_class = NotificationSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Notification.objects.filter(
            recipient=self.request.user, is_read=False
        ).select_related("album__artist")


class NotificationDismissView(APIView):
    """
    POST: Descarta uma notificação do usuário logado, marcando-a como lida.
    Notificações lidas somem da listagem e são apagadas pela limpeza diária.
    URL Exemplo: /api/notifications/12/dismiss/
    """

    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_id="notifications_dismiss",
        request_body=EmptyResponseSerializer,
        responses={204: "Notificação descartada.", 404: "Notificação não encontrada."},
    )
    def post(self, request, pk):
        notification = get_object_or_404(Notification, pk=pk, recipient=request.user)
        if not notification.is_read:
            notification.is_read = True
            notification.save(update_fields=["is_read"])
        return Response(status=status.HTTP_204_NO_CONTENT)
