from decimal import Decimal, InvalidOperation
from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

TEXT_ATTRS = {'class': 'vTextField'}


def parse_coordinate(value, limit):
    """Prüft eine Koordinate wie '52.5163' gegen +/- ``limit`` und gibt sie normalisiert zurück."""
    value = value.strip()
    if not value:
        return ''
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise ValidationError(
            _('Invalid coordinate: %(value)s'),
            params={'value': value},
        )
    if not number.is_finite() or abs(number) > limit:
        raise ValidationError(
            _('Coordinate must be between -%(limit)s and %(limit)s.'),
            params={'limit': limit},
        )
    return value


class CoordinateField(forms.CharField):
    """
    Ein CharField für Breiten-/Längengrade.
    Der Wert bleibt ein String, damit er unverändert gespeichert und
    ausgeliefert wird.
    """

    def __init__(self, *, limit, **kwargs):
        self.limit = limit
        super().__init__(**kwargs)

    def clean(self, value):
        value = super().clean(value)
        return parse_coordinate(value, self.limit)


class ChannelListField(forms.CharField):
    """Komma-getrennte Liste; Leerzeichen um die einzelnen Kanäle werden entfernt."""

    def clean(self, value):
        value = super().clean(value)
        channels = [c.strip() for c in value.split(',')]
        return ','.join(c for c in channels if c)


# ------------------------------------------------------------------
#  Renderer: Descriptor -> Formularfeld
# ------------------------------------------------------------------

def text_field(descriptor):
    return forms.CharField(
        label=descriptor.label,
        required=False,
        widget=forms.TextInput(attrs={**TEXT_ATTRS, 'id': descriptor.storage_name}),
    )


def url_field(descriptor):
    return forms.URLField(
        label=descriptor.label,
        required=False,
        assume_scheme='https',
        widget=forms.URLInput(attrs={**TEXT_ATTRS, 'id': descriptor.storage_name}),
    )


def coordinate_field(limit):
    def renderer(descriptor):
        return CoordinateField(
            limit=limit,
            label=descriptor.label,
            required=False,
            widget=forms.TextInput(attrs={**TEXT_ATTRS, 'id': descriptor.storage_name}),
        )
    return renderer


def channels_field(descriptor):
    return ChannelListField(
        label=descriptor.label,
        required=False,
        help_text=_('e.g. email,issue_mail,twitter'),
        widget=forms.TextInput(attrs={**TEXT_ATTRS, 'id': descriptor.storage_name}),
    )
