"""Exceptions raised inside the hook layer.

None of these ever reach the intercepted application: the engine and the
registration driver recover from each of them locally.
"""


class HideMockError(Exception):
    """Base class for hook layer errors."""


class UnavailableSurface(HideMockError):
    """The target method does not exist on the running platform level."""

    def __init__(self, signature: str, sdk_int: int = None):
        self.signature = signature
        self.sdk_int = sdk_int
        where = f" on API {sdk_int}" if sdk_int is not None else ""
        super().__init__(f"{signature} not available{where}")


class HostBindingFailure(HideMockError):
    """The host raised while installing a hook."""

    def __init__(self, signature: str, cause: BaseException):
        self.signature = signature
        self.cause = cause
        super().__init__(f"binding {signature} failed: {cause}")


class TransformerRuntimeFault(HideMockError):
    """A transformer got a result or argument it cannot handle."""

    def __init__(self, transformer: str, reason: str):
        self.transformer = transformer
        self.reason = reason
        super().__init__(f"{transformer}: {reason}")
