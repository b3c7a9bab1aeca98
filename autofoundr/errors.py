class AutoFoundrError(Exception):
    """Base class for errors raised by the storefront prototype."""


class ProxyError(AutoFoundrError):
    """The proxy could not obtain a usable response from the generation service."""


class GenerationError(AutoFoundrError):
    """The builder could not obtain a bundle from the proxy."""
