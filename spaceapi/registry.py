"""
Declarative table of the SpaceAPI options.

Every configurable value of the space is described by one
:class:`OptionDescriptor`.  The ordered :class:`OptionRegistry` built from
that table drives both the settings form (one field per descriptor, in
table order) and the public JSON document (keys in table order).
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Tuple

from django.core.exceptions import ImproperlyConfigured
from django.utils.html import escape as html_escape
from django.utils.translation import gettext_lazy as _

from config.utils import get_option
from .fields import channels_field, coordinate_field, text_field, url_field

log = logging.getLogger(__name__)

DEFAULT_SECTION = "spaceapi-wp-settings-section"

# (key, label, renderer)
DEFAULT_OPTIONS = (
    ("api", _("SpaceAPI Api Version"), text_field),
    ("space", _("Name of HackSpace"), text_field),
    ("logo", _("Image for the HackSpace"), url_field),
    ("url", _("Web Address for the HackSpace"), url_field),
    ("address", _("Address for the HackSpace"), text_field),
    ("lat", _("Latitude for the HackSpace"), coordinate_field(90)),
    ("lon", _("Longitude for the HackSpace"), coordinate_field(180)),
    ("issue_report_channels", _("List of channels to report issues, comma separated"), channels_field),
)


@dataclass(frozen=True)
class OptionDescriptor:
    """One configurable field of the space."""

    key: str
    storage_name: str
    label: str
    renderer: Callable

    def form_field(self):
        return self.renderer(self)


class OptionRegistry:
    """
    Immutable, ordered collection of :class:`OptionDescriptor` objects.

    ``reader`` is the storage lookup used for values; it receives the
    storage name and returns the stored string or ``None``.
    """

    def __init__(
        self,
        section: str,
        entries: Iterable[Tuple[str, str, Callable]],
        reader: Callable[[str], Optional[str]] = get_option,
    ):
        if not section:
            raise ImproperlyConfigured("The SpaceAPI settings section must not be empty.")
        self.section = section
        self._reader = reader
        descriptors = {}
        for key, label, renderer in entries:
            if key in descriptors:
                raise ImproperlyConfigured(f"Duplicate SpaceAPI option key: {key!r}")
            if not callable(renderer):
                raise ImproperlyConfigured(f"Renderer for SpaceAPI option {key!r} is not callable.")
            descriptors[key] = OptionDescriptor(
                key=key,
                storage_name=f"{section}-{key}",
                label=label,
                renderer=renderer,
            )
        self._descriptors = descriptors
        log.debug("SpaceAPI registry for section %s: %s", section, ", ".join(descriptors))

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self):
        return len(self._descriptors)

    def __contains__(self, key):
        return key in self._descriptors

    def keys(self):
        return list(self._descriptors)

    def describe(self, key) -> Optional[OptionDescriptor]:
        return self._descriptors.get(key)

    def storage_name(self, key) -> str:
        descriptor = self.describe(key)
        return descriptor.storage_name if descriptor else ""

    def stored_value(self, key) -> Optional[str]:
        """Raw stored value, ``None`` when the key is unknown or was never saved."""
        descriptor = self.describe(key)
        if descriptor is None:
            return None
        return self._reader(descriptor.storage_name)

    def current_value(self, key, escape=False) -> str:
        """
        Current value of ``key`` as a string.

        JSON output wants the raw value; ``escape=True`` returns it
        HTML-escaped for embedding into markup.  Never escape twice.
        """
        value = self.stored_value(key)
        if value is None:
            return ""
        return html_escape(value) if escape else value


def build_registry(section=DEFAULT_SECTION, entries=DEFAULT_OPTIONS, reader=get_option):
    return OptionRegistry(section, entries, reader=reader)
