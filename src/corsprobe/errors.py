"""Exception types shared across corsprobe."""


class CorsProbeError(Exception):
    """Base class for corsprobe errors."""


class ScanConfigError(CorsProbeError, ValueError):
    """Raised when a scan cannot start because its inputs are unusable."""


class ReportWriteError(CorsProbeError, OSError):
    """Raised when a report file cannot be created or written."""
