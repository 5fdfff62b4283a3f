import logging
from django.conf import settings
from django.core.cache import cache
from django.db import connection, transaction
from config.models import Option

logger = logging.getLogger(__name__)

CACHE_TIMEOUT = getattr(settings, "OPTION_CACHE_TIMEOUT", 60 * 5)  # 5 Minuten


def _cache_key(name):
  return f"option:{name}"


def get_option(name, default=None):
  """
  Liefert den gespeicherten Wert einer Option aus dem Cache / der Datenbank.
  Ist die Option nie gespeichert worden, kommt ``default`` zurück.
  """
  cache_key = _cache_key(name)
  cached = cache.get(cache_key)
  if cached is not None:
      return cached

  try:
      option = Option.objects.get(name=name)
  except Option.DoesNotExist:
      return default

  # Innerhalb einer offenen Transaktion nicht cachen: der Wert ist evtl. noch nicht committet
  if not connection.in_atomic_block:
      cache.set(cache_key, option.value, CACHE_TIMEOUT)
  return option.value


def update_option(name, value, description=""):
  """
  Legt die Option an oder überschreibt ihren Wert.
  Der alte Cache-Eintrag fällt sofort weg, der neue Wert landet erst
  nach dem Commit im Cache.
  """
  value = "" if value is None else str(value)
  defaults = {"value": value}
  if description:
      defaults["description"] = description
  _, created = Option.objects.update_or_create(name=name, defaults=defaults)
  cache_key = _cache_key(name)
  cache.delete(cache_key)
  transaction.on_commit(lambda: cache.set(cache_key, value, CACHE_TIMEOUT))
  logger.info("Option %s %s.", name, "created" if created else "updated")
  return created


def delete_option(name):
  deleted, _ = Option.objects.filter(name=name).delete()
  cache_key = _cache_key(name)
  cache.delete(cache_key)
  transaction.on_commit(lambda: cache.delete(cache_key))
  if deleted:
      logger.info("Option %s deleted.", name)
  return bool(deleted)


def option_exists(name):
  return get_option(name) is not None
