"""
Routing of the ``spaceapi`` path fragment.

The surface is a flat two level router: a version token, then an action.
Only ``v1`` and its ``index`` action exist; everything else that is
addressed to us is answered with a redirect to the site root.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from .record import build_space_record

log = logging.getLogger(__name__)

SUPPORTED_VERSION = "v1"
DEFAULT_ACTION = "index"


@dataclass(frozen=True)
class PassThrough:
    """Request is not addressed to the SpaceAPI endpoint."""


@dataclass(frozen=True)
class Redirect:
    reason: str


@dataclass(frozen=True)
class JsonDocument:
    payload: dict = field(default_factory=dict)


Outcome = Union[PassThrough, Redirect, JsonDocument]


def _index(registry):
    return JsonDocument(build_space_record(registry))


ACTIONS = {
    DEFAULT_ACTION: _index,
}


def dispatch(fragment: Optional[str], registry) -> Outcome:
    if fragment is None:
        return PassThrough()

    if fragment == "":
        return _redirect("empty path")

    parts = fragment.split("/")
    version = parts[0]
    if version == "":
        return _redirect("empty version")
    if version != SUPPORTED_VERSION:
        return _redirect(f"unsupported version {version!r}")

    action = parts[1] if len(parts) > 1 else DEFAULT_ACTION
    handler = ACTIONS.get(action)
    if handler is None:
        return _redirect(f"unknown action {action!r}")

    return handler(registry)


def _redirect(reason):
    log.debug("SpaceAPI request redirected: %s", reason)
    return Redirect(reason)
