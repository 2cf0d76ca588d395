from __future__ import annotations


class RheoSDKError(Exception):
    """Base class for every error raised by the SDK."""


class NoOperationsError(RheoSDKError, ValueError):
    def __init__(self, message: str = "no operations to execute"):
        super().__init__(message)


class UnsupportedVersionError(RheoSDKError, ValueError):
    def __init__(self, version: str, supported: tuple[str, ...]):
        self.version = version
        self.supported = supported
        super().__init__(
            f"Unsupported protocol version {version!r} "
            f"(expected one of: {', '.join(supported)})"
        )


class AbiResolutionError(RheoSDKError, ValueError):
    """Raised when bytes or a name cannot be matched against an ABI registry."""


class ErrorDecodingError(RheoSDKError):
    def __init__(self, data: str, message: str | None = None):
        self.data = data
        super().__init__(message or f"Unable to decode revert data: {data}")
