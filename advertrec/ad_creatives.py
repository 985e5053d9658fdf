"""RPC handlers for advertising creatives and advert recommendation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from advertrec.common import Response, failure, format_time, success

log = logging.getLogger(__name__)


@dataclass
class AdCreative:
    """Advertising creative as sent over the wire."""

    creative_id: int
    plan_id: int
    creative_type: int
    media_url: str
    title: str
    description: str
    status: int
    create_time: str
    update_time: str
    weight: float = 0.0


def convert_ad_creative(creative: Any) -> AdCreative:
    """Convert a stored creative record into its wire form."""
    return AdCreative(
        creative_id=creative.creative_id,
        plan_id=creative.plan_id,
        creative_type=creative.creative_type,
        media_url=creative.media_url,
        title=creative.title,
        description=creative.description,
        status=creative.status,
        create_time=format_time(creative.create_time),
        update_time=format_time(creative.update_time),
        weight=getattr(creative, "weight", 0.0),
    )


class AdCreativeHandlers:
    """Creative endpoints; expects ``self.ad_creative_service`` to hold the store."""

    ad_creative_service: Any

    def create_ad_creative(self, plan_id, creative_type, media_url, title, description) -> Response:
        log.info(
            "CreateAdCreative: plan_id=%r creative_type=%r media_url=%r title=%r description=%r",
            plan_id, creative_type, media_url, title, description,
        )
        try:
            creative_id = self.ad_creative_service.create_ad_creative(
                plan_id, creative_type, media_url, title, description
            )
        except Exception as exc:
            return failure(500, str(exc))
        return success(creative_id=creative_id)

    def update_ad_creative(
        self,
        creative_id,
        *,
        plan_id=None,
        creative_type=None,
        media_url=None,
        title=None,
        description=None,
        status=None,
    ) -> Response:
        fields = {
            "plan_id": plan_id,
            "creative_type": creative_type,
            "media_url": media_url,
            "title": title,
            "description": description,
            "status": status,
        }
        updates = {key: value for key, value in fields.items() if value is not None}
        log.info("UpdateAdCreative: creative_id=%r updates=%r", creative_id, updates)
        try:
            self.ad_creative_service.update_ad_creative(creative_id, updates)
        except Exception as exc:
            return failure(500, str(exc))
        return success()

    def get_ad_creative(self, creative_id) -> Response:
        log.info("GetAdCreative: creative_id=%r", creative_id)
        try:
            creative = self.ad_creative_service.get_ad_creative(creative_id)
        except Exception as exc:
            return failure(404, str(exc))
        return success(ad_creative=convert_ad_creative(creative))

    def list_ad_creatives(self, page, page_size, plan_id=None) -> Response:
        log.info("ListAdCreatives: page=%r page_size=%r plan_id=%r", page, page_size, plan_id)
        try:
            creatives, total = self.ad_creative_service.list_ad_creatives(
                int(page), int(page_size), plan_id
            )
        except Exception as exc:
            return failure(500, str(exc))
        return success(
            ad_creatives=[convert_ad_creative(creative) for creative in creatives],
            total=total,
        )

    def delete_ad_creative(self, creative_id) -> Response:
        log.info("DeleteAdCreative: creative_id=%r", creative_id)
        try:
            self.ad_creative_service.delete_ad_creative(creative_id)
        except Exception as exc:
            return failure(500, str(exc))
        return success()

    def get_advert_recommend(self, user_id) -> Response:
        log.info("GetAdvertRecommend: user_id=%r", user_id)
        try:
            creatives, total = self.ad_creative_service.get_advert_recommend(user_id)
        except Exception as exc:
            return failure(500, str(exc))
        return success(
            adverts=[convert_ad_creative(creative) for creative in creatives],
            total=total,
        )