import logging
import shutil
import uuid
from datetime import timedelta

from django.core.files.storage import storages
from django.core.management.base import BaseCommand
from django.utils import timezone

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Delete job workspaces that have not been touched for a while."

    def add_arguments(self, parser):
        parser.add_argument("--older-than-hours", type=float, default=24.0)
        parser.add_argument("--dry-run", action="store_true")

    def handle(self, *args, **options):
        storage = storages["jobs"]
        cutoff = timezone.now() - timedelta(hours=options["older_than_hours"])

        if not storage.exists(""):
            self.stdout.write("Nothing to purge.")
            return

        directories, _ = storage.listdir("")
        removed = 0
        for name in directories:
            # Only job workspaces, never anything else living in the root
            try:
                uuid.UUID(name)
            except ValueError:
                continue

            if storage.get_modified_time(name) >= cutoff:
                continue

            if not options["dry_run"]:
                shutil.rmtree(storage.path(name))
                logger.info(f"🗑️  Removed workspace {name}")
            removed += 1

        verb = "Would remove" if options["dry_run"] else "Removed"
        self.stdout.write(self.style.SUCCESS(f"{verb} {removed} workspace(s)."))
