"""Assembly of the SpaceAPI document from the registry values."""

LOCATION_KEYS = ("address", "lat", "lon")
CHANNELS_KEY = "issue_report_channels"


def split_channels(value):
    """
    Split the stored comma separated channel list.

    An empty stored value means no channels at all and gives ``[]``.
    """
    if not value:
        return []
    return value.split(",")


def build_space_record(registry):
    """
    Build the ``index`` document: one entry per registry option, in registry
    order.  ``address``/``lat``/``lon`` are nested under ``location``, the
    channel list becomes a list.  Options that were never saved are left out.
    Values are raw; escaping belongs to whoever embeds them into markup.
    """
    record = {}
    for descriptor in registry:
        value = registry.stored_value(descriptor.key)
        if value is None:
            continue
        if descriptor.key in LOCATION_KEYS:
            record.setdefault("location", {})[descriptor.key] = value
        elif descriptor.key == CHANNELS_KEY:
            record[CHANNELS_KEY] = split_channels(value)
        else:
            record[descriptor.key] = value
    return record
