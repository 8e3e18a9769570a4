"""
mp_errlog – Structured error/fatal logging for server processes.

Import path convention::

    from mp_errlog import Logger, Level
    from mp_errlog.kernel.errors import BucketNotFound, wrap
    from mp_errlog.observability.logging import LoggerSettings
"""

from mp_errlog.observability.logging import Level, Logger, LoggerConfig

__version__ = "0.1.0"
__all__ = ["Level", "Logger", "LoggerConfig", "__version__"]
