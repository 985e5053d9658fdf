"""RPC handlers for user interest profiles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from advertrec.common import Response, failure, format_time, success

log = logging.getLogger(__name__)


@dataclass
class UserInterest:
    """User interest tag as sent over the wire."""

    interest_id: int
    user_id: int
    tag: str
    weight: float
    update_time: str


def convert_user_interest(interest: Any) -> UserInterest:
    """Convert a stored interest record into its wire form."""
    return UserInterest(
        interest_id=interest.id,
        user_id=interest.user_id,
        tag=interest.tag,
        weight=interest.weight,
        update_time=format_time(interest.update_time),
    )


class UserInterestHandlers:
    """Interest endpoints; expects ``self.user_interest_service`` to hold the store."""

    user_interest_service: Any

    def add_user_interest(self, user_id, tag, weight) -> Response:
        log.info("AddUserInterest: user_id=%r tag=%r weight=%r", user_id, tag, weight)
        try:
            interest_id = self.user_interest_service.add_user_interest(user_id, tag, weight)
        except Exception as exc:
            return failure(500, str(exc))
        return success(interest_id=interest_id)

    def update_user_interest(self, interest_id, weight) -> Response:
        log.info("UpdateUserInterest: interest_id=%r weight=%r", interest_id, weight)
        try:
            self.user_interest_service.update_user_interest(interest_id, weight)
        except Exception as exc:
            return failure(500, str(exc))
        return success()

    def get_user_interests(self, user_id) -> Response:
        log.info("GetUserInterests: user_id=%r", user_id)
        try:
            interests = self.user_interest_service.get_user_interests(user_id)
        except Exception as exc:
            return failure(500, str(exc))
        return success(interests=[convert_user_interest(item) for item in interests])

    def delete_user_interest(self, interest_id) -> Response:
        log.info("DeleteUserInterest: interest_id=%r", interest_id)
        try:
            self.user_interest_service.delete_user_interest(interest_id)
        except Exception as exc:
            return failure(500, str(exc))
        return success()