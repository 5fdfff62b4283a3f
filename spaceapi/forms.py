from django import forms
from django.db import transaction
from config.utils import update_option


class SpaceSettingsForm(forms.Form):
  """
  Settings form generated from the option registry.
  One field per descriptor, named after its storage name, in registry order.
  """

  def __init__(self, registry, *args, **kwargs):
      self.registry = registry
      super().__init__(*args, **kwargs)
      for descriptor in registry:
          field = descriptor.form_field()
          field.initial = registry.current_value(descriptor.key)
          self.fields[descriptor.storage_name] = field

  def save(self):
      """Persist one value per descriptor under its storage name, all or nothing."""
      with transaction.atomic():
          for descriptor in self.registry:
              update_option(
                  descriptor.storage_name,
                  self.cleaned_data.get(descriptor.storage_name, ''),
                  description=str(descriptor.label),
              )
