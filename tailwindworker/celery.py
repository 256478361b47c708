import os
from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tailwindworker.settings')

app = Celery('tailwindworker')
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.broker_transport_options = {
    'visibility_timeout': 3600,
    'max_connections': 3
}

app.autodiscover_tasks()
