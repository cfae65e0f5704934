"""oxi_result: explicit success/failure values for sync and async code.

Public API:
    - Result, Ok, Err: the two-variant result type and its combinators
    - from_, wrap: adapt raising functions and awaitables into results
    - json_default: ``json.dumps`` hook for results
    - UnwrapError: raised when unwrapping the wrong variant

Layered configuration (create_config, load_render_settings) lives in
``oxi_result.config`` and is only imported when asked for.
"""

from __future__ import annotations

import logging

from oxi_result.errors import ConfigError, UnwrapError
from oxi_result.rendering import RenderSettings
from oxi_result.result import Err, ErrDict, Ok, OkDict, Result, from_, json_default, wrap

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("oxi-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("oxi_result").addHandler(logging.NullHandler())

__all__ = [
    "ConfigError",
    "Err",
    "ErrDict",
    "Ok",
    "OkDict",
    "RenderSettings",
    "Result",
    "UnwrapError",
    "from_",
    "json_default",
    "wrap",
]
