"""RPC handlers for the user advert event log."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from advertrec.common import Response, failure, format_time, success

log = logging.getLogger(__name__)


@dataclass
class UserAdEvent:
    """User advert event as sent over the wire."""

    event_id: int
    user_id: int
    creative_id: int
    event_type: int
    ts: str
    extra: str


def convert_user_ad_event(event: Any) -> UserAdEvent:
    """Convert a stored event record into its wire form."""
    return UserAdEvent(
        event_id=event.event_id,
        user_id=event.user_id,
        creative_id=event.creative_id,
        event_type=event.event_type,
        ts=format_time(event.ts),
        extra=event.extra,
    )


class UserAdEventHandlers:
    """Event endpoints; expects ``self.ad_event_service`` to hold the event store."""

    ad_event_service: Any

    def create_ad_event(self, user_id, creative_id, event_type, ts, extra) -> Response:
        log.info(
            "CreateAdEvent: user_id=%r creative_id=%r event_type=%r ts=%r extra=%r",
            user_id, creative_id, event_type, ts, extra,
        )
        try:
            event_id = self.ad_event_service.create_ad_event(
                user_id, creative_id, event_type, ts, extra
            )
        except Exception as exc:
            return failure(500, str(exc))
        return success(event_id=event_id)

    def get_user_ad_events(self, user_id, page, page_size, event_type=None) -> Response:
        log.info(
            "GetUserAdEvents: user_id=%r page=%r page_size=%r event_type=%r",
            user_id, page, page_size, event_type,
        )
        try:
            events, total = self.ad_event_service.get_user_ad_events(
                user_id, int(page), int(page_size), event_type
            )
        except Exception as exc:
            return failure(500, str(exc))
        return success(events=[convert_user_ad_event(event) for event in events], total=total)

    def get_creative_ad_events(self, creative_id, page, page_size, event_type=None) -> Response:
        log.info(
            "GetCreativeAdEvents: creative_id=%r page=%r page_size=%r event_type=%r",
            creative_id, page, page_size, event_type,
        )
        try:
            events, total = self.ad_event_service.get_creative_ad_events(
                creative_id, int(page), int(page_size), event_type
            )
        except Exception as exc:
            return failure(500, str(exc))
        return success(events=[convert_user_ad_event(event) for event in events], total=total)