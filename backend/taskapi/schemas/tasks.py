from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..db.models import Task


class TaskIn(BaseModel):
    """Request body for create and update.

    Missing fields fall back to empty values so the service, not the decoder,
    decides what is required. Unknown fields are ignored.
    """

    id: int = 0
    title: str = ""
    description: str = ""
    status: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    status: str
    created_at: datetime
    updated_at: datetime
