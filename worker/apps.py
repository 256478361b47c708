# worker/apps.py
import os
from django.apps import AppConfig


class WorkerConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'worker'

    def ready(self):
        print(f"✅ Tailwind worker started (PID: {os.getpid()})")
