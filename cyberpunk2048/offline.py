# -*- coding: utf-8 -*-
"""
Caching policy of the offline asset worker.

The worker itself runs in the browser; this module decides which strategy serves a request and
which cache stores belong to the current generation.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable
from urllib.parse import urlsplit

FONT_ORIGINS = frozenset({"https://fonts.googleapis.com", "https://fonts.gstatic.com"})

# ##: Request destinations refreshed from the network first.
NETWORK_FIRST_DESTINATIONS = frozenset({"script", "style", "document"})

DEFAULT_PORTS = {"http": 80, "https": 443}

SHELL_ASSETS = (
    "/",
    "./",
    "index.html",
    "style.css",
    "game.js",
    "manifest.webmanifest",
    "icons/icon.svg",
    "icons/maskable-icon.svg",
)


class Strategy(str, Enum):
    """How the worker answers a request."""

    NETWORK_FIRST_SHELL = "network-first-shell"
    NETWORK_FIRST = "network-first"
    CACHE_FIRST_REVALIDATE = "cache-first-revalidate"
    STALE_WHILE_REVALIDATE = "stale-while-revalidate"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class AssetRequest:
    """
    The parts of a fetch request the policy looks at.

    Attributes
    ----------
    url : str
        Absolute URL of the request.
    mode : str
        Fetch mode; ``"navigate"`` for page loads.
    destination : str
        Fetch destination (``"script"``, ``"style"``, ``"image"``, ...), empty when unknown.
    """

    url: str
    mode: str = "cors"
    destination: str = ""


def origin_of(url: str) -> str:
    """Scheme, host and non-default port of an absolute URL, e.g. ``https://example.com:8080``."""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None and parts.port != DEFAULT_PORTS.get(scheme):
        host = f"{host}:{parts.port}"
    return f"{scheme}://{host}"


def route(request: AssetRequest, origin: str) -> Strategy:
    """
    Choose the caching strategy for a request.

    Parameters
    ----------
    request : AssetRequest
        The intercepted request.
    origin : str
        Origin the worker is registered on.

    Returns
    -------
    Strategy
        Navigations fall back to the cached shell; same-origin code and documents are fetched
        first; other same-origin assets come from the cache and are refreshed in the background;
        web fonts are served stale while revalidating; everything else is left to the network.
    """
    if request.mode == "navigate":
        return Strategy.NETWORK_FIRST_SHELL

    request_origin = origin_of(request.url)
    if request_origin == origin_of(origin):
        if request.destination in NETWORK_FIRST_DESTINATIONS:
            return Strategy.NETWORK_FIRST
        return Strategy.CACHE_FIRST_REVALIDATE

    if request_origin in FONT_ORIGINS:
        return Strategy.STALE_WHILE_REVALIDATE
    return Strategy.PASSTHROUGH


@dataclass(frozen=True)
class CacheGeneration:
    """
    One versioned generation of cache stores.

    Activating a generation deletes every store it does not own.
    """

    version: int
    prefix: str = "cyberpunk-2048"
    assets: tuple[str, ...] = field(default=SHELL_ASSETS)

    @property
    def asset_cache(self) -> str:
        return f"{self.prefix}-v{self.version}"

    @property
    def font_cache(self) -> str:
        return f"{self.prefix}-fonts-v{self.version}"

    def cache_for(self, strategy: Strategy) -> str:
        """Name of the store a strategy writes to."""
        if strategy is Strategy.STALE_WHILE_REVALIDATE:
            return self.font_cache
        return self.asset_cache

    def stale(self, names: Iterable[str]) -> list[str]:
        """Store names left over from other generations."""
        current = {self.asset_cache, self.font_cache}
        return [name for name in names if name not in current]
