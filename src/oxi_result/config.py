from __future__ import annotations

import logging
from typing import cast

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from oxi_result.errors import ConfigError
from oxi_result.rendering import FALLBACKS, Fallback, RenderSettings

logger = logging.getLogger(__name__)

_DEFAULTS: dict[str, object] = {
    "render": {
        "sort_keys": False,
        "ensure_ascii": True,
        "fallback": "repr",
    },
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def create_config(
    yaml_path: str = "oxi_result.yaml",
    env_prefix: str = "OXI_RESULT",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g. ``OXI_RESULT__RENDER__SORT_KEYS``.
        defaults: Default configuration values.
    """
    if defaults is None:
        defaults = _DEFAULTS

    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def _as_bool(key: str, raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ConfigError(key, raw, "expected a boolean")


def _as_fallback(key: str, raw: object) -> Fallback:
    text = str(raw).strip().lower()
    if text not in FALLBACKS:
        raise ConfigError(key, raw, f"expected one of {', '.join(FALLBACKS)}")
    return cast("Fallback", text)


def load_render_settings(cfg: ConfigurationSet | None = None) -> RenderSettings:
    if cfg is None:
        cfg = create_config()
    settings = RenderSettings(
        sort_keys=_as_bool("render.sort_keys", cfg["render.sort_keys"]),
        ensure_ascii=_as_bool("render.ensure_ascii", cfg["render.ensure_ascii"]),
        fallback=_as_fallback("render.fallback", cfg["render.fallback"]),
    )
    logger.debug("Loaded render settings %s", settings)
    return settings
