"""Game errors with tracking IDs."""

from utils.timestamp import format_timestamp
from utils.ksuid import generate_ksuid


class BaseGameError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class InvalidRange(BaseGameError, ValueError):
    """Random range with non-integer bounds or min above max."""

    def __init__(self, min_value, max_value, reason=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(min_value=min_value, max_value=max_value)
        reason = reason or f"min {min_value!r} > max {max_value!r}"
        super().__init__(f"invalid range: {reason}", context=context, **kwargs)
        self.min_value = min_value
        self.max_value = max_value


class InvalidDimensions(BaseGameError, ValueError):
    """Viewport width or height is not a positive number."""

    def __init__(self, width, height, **kwargs):
        context = kwargs.pop("context", {})
        context.update(width=width, height=height)
        super().__init__(f"invalid viewport dimensions: {width!r}x{height!r}", context=context, **kwargs)
        self.width = width
        self.height = height


class InvalidInput(BaseGameError, ValueError):
    """Unknown player control direction."""

    def __init__(self, direction, **kwargs):
        context = kwargs.pop("context", {})
        context["direction"] = direction
        super().__init__(f"unknown direction: {direction!r}", context=context, **kwargs)
        self.direction = direction


class BusError(BaseGameError):
    """Event bus errors (subscribe/publish failures)."""

    def __init__(self, message, subscriber_name=None, **kwargs):
        context = kwargs.pop("context", {})
        if subscriber_name:
            context["subscriber_name"] = subscriber_name
        super().__init__(message, context=context, **kwargs)


class HealthCheckError(BaseGameError):
    """Health check failures."""

    def __init__(self, message, component=None, **kwargs):
        context = kwargs.pop("context", {})
        if component:
            context["component"] = component
        super().__init__(message, context=context, **kwargs)
