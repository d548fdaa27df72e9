from talent_intake.exceptions import UpstreamModelError


class NormalizationError(UpstreamModelError):
    """Model output is unusable: empty, cut off, unparseable or off-schema."""


class NormalizationValidationError(NormalizationError):
    """Parsed JSON does not match the structured record schema."""


class NormalizationNetworkError(NormalizationError):
    """The provider call itself failed: timeout, connection or HTTP status."""
