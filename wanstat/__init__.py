"""Router WAN status reporter.

Fetches the ``/api/status/wan`` document from a router and renders the
devices it reports together with their connectors (WiFi client, DHCP, or
anything else the router exposes).
"""

__version__ = "0.1.0"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"skiplog": False})
    glogger.enable(__name__)


from wanstat.exceptions import (  # noqa: E402
    APIError,
    AuthenticationError,
    InvalidAddressError,
    MissingRequiredFieldError,
    ParseError,
    UpstreamFailureError,
    WanStatError,
)
from wanstat.models import (  # noqa: E402
    Connector,
    ConnectorRow,
    DeviceSummary,
    DHCPConnector,
    GenericConnector,
    IPInfo,
    WiFiClientConnector,
)
from wanstat.report import WanStatusReport  # noqa: E402
from wanstat.transport import WanStatusClient  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "WanStatusReport",
    "WanStatusClient",
    "Connector",
    "ConnectorRow",
    "DeviceSummary",
    "DHCPConnector",
    "GenericConnector",
    "IPInfo",
    "WiFiClientConnector",
    "WanStatError",
    "ParseError",
    "MissingRequiredFieldError",
    "InvalidAddressError",
    "UpstreamFailureError",
    "APIError",
    "AuthenticationError",
]
