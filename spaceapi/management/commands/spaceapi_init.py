"""
Django-Management-Command zur Initialisierung der SpaceAPI-Optionen.

Legt für jeden Eintrag der Options-Tabelle einen gespeicherten Wert an,
damit das JSON-Dokument von Anfang an vollständig ist.

Hinweis:
- Bereits vorhandene Werte bleiben unverändert, außer mit ``--force``.
- Mit ``--set key=value`` lassen sich einzelne Werte direkt setzen.
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from config.utils import option_exists, update_option
from spaceapi.apps import get_registry


def parse_assignments(assignments, registry):
    """Wandelt ``['space=Test Space', ...]`` in ein Dict um und prüft die Keys."""
    values = {}
    for item in assignments:
        key, sep, value = item.partition('=')
        key = key.strip()
        if not sep or not key:
            raise CommandError(f"Ungültige Zuweisung: {item!r} (erwartet key=value)")
        if key not in registry:
            raise CommandError(
                f"Unbekannte Option: {key!r}. Erlaubt: {', '.join(registry.keys())}"
            )
        values[key] = value
    return values


class Command(BaseCommand):
    help = (
        "Initialisiert die SpaceAPI-Optionen mit Standardwerten "
        "und setzt optional einzelne Werte."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            '--force', action='store_true',
            help="Vorhandene Werte mit den Standardwerten überschreiben.",
        )
        parser.add_argument(
            '--set', action='append', default=[], metavar='KEY=VALUE', dest='assignments',
            help="Einen Wert direkt setzen (mehrfach möglich).",
        )

    def handle(self, *args, **options):
        registry = get_registry()
        assignments = parse_assignments(options['assignments'], registry)
        defaults = {'api': getattr(settings, 'SPACEAPI_DEFAULT_API_VERSION', '0.13')}

        self.stdout.write(self.style.NOTICE("Starte SpaceAPI-Initialisierung …"))

        written = 0
        with transaction.atomic():
            for descriptor in registry:
                if descriptor.key in assignments:
                    value = assignments[descriptor.key]
                elif options['force'] or not option_exists(descriptor.storage_name):
                    value = defaults.get(descriptor.key, '')
                else:
                    continue
                update_option(descriptor.storage_name, value, description=str(descriptor.label))
                written += 1

        self.stdout.write(self.style.SUCCESS(
            f"SpaceAPI-Initialisierung abgeschlossen ({written} Optionen geschrieben)."
        ))
