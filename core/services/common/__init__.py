from .base import ServiceBase
from .clock import Clock, utc_now
from .collaborators import NullAnalytics, NullAnnouncer, NullTranslator
from .numeric import clamp, percent_of, round_half_up

__all__ = [
    "ServiceBase",
    "Clock",
    "utc_now",
    "NullAnalytics",
    "NullAnnouncer",
    "NullTranslator",
    "clamp",
    "percent_of",
    "round_half_up",
]
