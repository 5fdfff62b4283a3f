from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)

class SpaceApiConfig(AppConfig):
  name = 'spaceapi'
  verbose_name = 'SpaceAPI'
  registry = None

  def ready(self):
      # Die Options-Tabelle wird genau einmal beim App-Start aufgebaut.
      from django.conf import settings
      from .registry import build_registry, DEFAULT_SECTION

      section = getattr(settings, 'SPACEAPI_SETTINGS_SECTION', DEFAULT_SECTION)
      self.registry = build_registry(section)
      logger.debug("SpaceAPI registry ready (%d options).", len(self.registry))


def get_registry():
  from django.apps import apps
  return apps.get_app_config('spaceapi').registry
