from pydantic import BaseModel, ConfigDict, Field, model_serializer
from datetime import datetime
from typing import Dict, Optional

from prr.models.submission import SectionScore


class ServiceSearchResult(BaseModel):
    """
    A service matched by search, with the tallies of its newest submission.

    latestPrrScores / lastPrrTimestamp are omitted when the service has
    never been reviewed.
    """

    model_config = ConfigDict(populate_by_name=True)

    service_id: str = Field(..., alias="serviceId")
    service_name: str = Field(..., alias="serviceName")
    latest_prr_scores: Optional[Dict[str, SectionScore]] = Field(default=None, alias="latestPrrScores")
    last_prr_timestamp: Optional[datetime] = Field(default=None, alias="lastPrrTimestamp")

    @model_serializer(mode="wrap")
    def _omit_unreviewed_fields(self, handler):
        data = handler(self)
        for key in ("latestPrrScores", "latest_prr_scores", "lastPrrTimestamp", "last_prr_timestamp"):
            if key in data and not data[key]:
                data.pop(key)
        return data
