from datetime import datetime
from typing import Optional

from teamboard.models.base import ApiModel, DocumentModel
from teamboard.models.user import UserPublic

COMMENT_ADDED = "comment_added"
TASK_CREATED = "task_created"
TASK_COMPLETED = "task_completed"


class Activity(DocumentModel):
    """Append-only audit entry scoped to a team."""

    action: str
    user: str
    team: str
    task_id: Optional[str] = None
    description: str = ""


class ActivityResponse(ApiModel):
    id: str
    action: str
    user: Optional[UserPublic] = None
    team: str
    task_id: Optional[str] = None
    description: str
    created_at: datetime

    @classmethod
    def build(cls, activity: Activity, user: Optional[UserPublic]) -> "ActivityResponse":
        return cls(
            id=activity.id,
            action=activity.action,
            user=user,
            team=activity.team,
            task_id=activity.task_id,
            description=activity.description,
            created_at=activity.created_at,
        )
