# flake8: noqa
import os as _os

import pooch as _pooch
import toml as _toml

try:
    _cfg = _toml.load(_os.path.expanduser("~/.rayspace.toml"))
except (FileNotFoundError, _toml.TomlDecodeError):
    _cfg = {}

from .__version__ import __version__


class config:
    DATABANK = (
        _os.environ.pop("RS_DATABANK", None)
        or _os.path.expanduser(_cfg.pop("DATABANK", ""))
        or _pooch.os_cache("rayspace")
    )
    LOG_LEVEL = _os.environ.pop("RS_LOG_LEVEL", None) or _cfg.pop(
        "LOG_LEVEL", "WARNING"
    )


from . import filters, image, io, lifi
from .lifi import LightField
