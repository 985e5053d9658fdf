"""Configuration and request handlers for an advert recommendation service."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "common",
    "ad_plans",
    "ad_creatives",
    "user_events",
    "user_interests",
    "service",
]