"""
Configuration management for naivehttp.

Holds the request defaults shared by every invocation. There are no
environment or file sources; callers that need different defaults
build a ClientConfig and install it with set_config().
"""

from dataclasses import dataclass

from naivehttp import __version__


@dataclass
class ClientConfig:
    """HTTP client defaults."""

    user_agent: str = f"naivehttp/{__version__}"

    # Marker header sent with every request
    marker_header: tuple[str, str] = ("X-Powered-By", "Python")

    # Redirects are handled by httpx
    follow_redirects: bool = True

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers attached to every outgoing request."""
        name, value = self.marker_header
        return {
            name: value,
            "User-Agent": self.user_agent,
        }


# Global config instance
_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ClientConfig()
    return _config


def set_config(config: ClientConfig | None) -> None:
    """Set the global configuration instance (None restores defaults)."""
    global _config
    _config = config
