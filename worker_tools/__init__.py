""" Workers Tools Namespace """

from . import _version
from .api import WorkersSession
from .exceptions import ConfigError, FatalError, UnexpectedResponseError, UserError, WorkersException

__version__ = _version.get_versions()["version"]
