from django.core.management.base import BaseCommand

from config.utils import delete_option
from spaceapi.apps import get_registry


class Command(BaseCommand):
    help = "Deletes every stored SpaceAPI option"

    def handle(self, *args, **options):
        removed = sum(delete_option(d.storage_name) for d in get_registry())
        self.stdout.write(self.style.SUCCESS(f"{removed} SpaceAPI options deleted."))
