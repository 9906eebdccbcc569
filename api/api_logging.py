"""
Logging shim used by all modules: `import api_logging as logging`.

Resolves to structlog when one of the structlog strategies is configured,
and to the standard library logging module otherwise.
"""

from django.conf import settings

STRUCTLOG_STRATEGIES = ("structlog_json", "structlog_flatline")

if settings.LOGGING_STRATEGY in STRUCTLOG_STRATEGIES:
    from structlog import *
else:
    from logging import *
