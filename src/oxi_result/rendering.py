"""Text rendering of Result payloads.

Payloads are passed through ``json.dumps`` so that strings render quoted and
containers render as JSON. Objects the encoder cannot handle are projected one
level at a time: anything exposing ``to_dict()`` (nested results included) by
that method, dataclass instances by their fields, everything else by ``repr``
or ``str`` depending on ``RenderSettings.fallback``. A payload the encoder
rejects outright (non-string dict keys, circular references) renders as the
fallback text of the whole payload.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Literal

type Fallback = Literal["repr", "str"]

FALLBACKS: tuple[Fallback, ...] = ("repr", "str")


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """Options forwarded to the JSON encoder when rendering a payload."""

    sort_keys: bool = False
    ensure_ascii: bool = True
    fallback: Fallback = "repr"


DEFAULT_SETTINGS = RenderSettings()


def render_payload(payload: object, settings: RenderSettings = DEFAULT_SETTINGS) -> str:
    """Serialize a payload to JSON text, projecting values JSON cannot encode."""
    try:
        return json.dumps(
            payload,
            default=lambda obj: _project(obj, settings.fallback),
            sort_keys=settings.sort_keys,
            ensure_ascii=settings.ensure_ascii,
        )
    except (TypeError, ValueError):
        return json.dumps(_as_text(payload, settings.fallback), ensure_ascii=settings.ensure_ascii)


def _project(obj: object, fallback: Fallback) -> object:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        # Nested values go back through the encoder's default hook.
        return {field.name: getattr(obj, field.name) for field in dataclasses.fields(obj)}
    return _as_text(obj, fallback)


def _as_text(obj: object, fallback: Fallback) -> str:
    if fallback == "str":
        return str(obj)
    return repr(obj)
