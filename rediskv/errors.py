"""rediskv error types."""


class KVError(Exception):
    """Base class for store errors surfaced to callers."""


class KeyNotFound(KVError):
    """Raised when a key, or every key under a directory, is absent."""


class KeyModified(KVError):
    """Raised when an optimistic-concurrency check fails.

    The key was created, changed or removed after the caller's
    ``previous`` pair was read. The caller should re-read and retry.
    """


class Unsupported(KVError):
    """Raised for configurations this backend cannot honour.

    Multiple endpoints and TLS are both rejected: the adapter talks to
    exactly one plaintext engine node.
    """


class FeatureNotImplemented(Unsupported, NotImplementedError):
    """Raised by capabilities the adapter declares but does not provide."""

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"redis driver does not support {feature}")


class CorruptValue(RuntimeError):
    """Raised when stored bytes are not a versioned envelope.

    Every writer sharing the keyspace is expected to store envelopes,
    so this signals a broken invariant rather than a user error.

    Attributes:
        raw: The bytes that failed to decode.
    """

    def __init__(self, raw: bytes, reason: str) -> None:
        self.raw = raw
        super().__init__(f"Not a versioned value ({reason}): {raw[:64]!r}")
