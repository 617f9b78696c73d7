import os
from celery import Celery

# Define a configuração Django padrão para o Celery
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

app = Celery('tunez')

# Carrega as configurações do Django (o namespace CELERY_ evita conflito)
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-descobre tarefas em todos os apps instalados
app.autodiscover_tasks()
