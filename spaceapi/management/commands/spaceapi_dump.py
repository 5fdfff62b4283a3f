import json
from django.core.management.base import BaseCommand

from spaceapi.apps import get_registry
from spaceapi.record import build_space_record


class Command(BaseCommand):
    help = "Prints the current SpaceAPI JSON document"

    def add_arguments(self, parser):
        parser.add_argument('--indent', type=int, default=None)

    def handle(self, *args, **options):
        record = build_space_record(get_registry())
        self.stdout.write(json.dumps(record, indent=options['indent'], ensure_ascii=False))
