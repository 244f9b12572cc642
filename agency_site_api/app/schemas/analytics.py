"""
Pydantic schemas for analytics events.

The event log is open-ended (any event name may be recorded) but the
event types the aggregation layer reads carry a fixed metadata shape:

* ``service_inquiry`` -> ``{"serviceName": str}``
* ``portfolio_view`` -> ``{"projectId": str}``

``page_view`` events must carry a ``path``.

``EVENT_METADATA_MODELS`` maps those event names to the model their
metadata must satisfy; other events keep free-form metadata.
"""

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .base import CamelModel


PAGE_VIEW = "page_view"
CONTACT_FORM = "contact_form"
SERVICE_INQUIRY = "service_inquiry"
PORTFOLIO_VIEW = "portfolio_view"


class ServiceInquiryMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    serviceName: str = Field(..., min_length=1)


class PortfolioViewMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    projectId: str = Field(..., min_length=1)


EVENT_METADATA_MODELS: Dict[str, Type[BaseModel]] = {
    SERVICE_INQUIRY: ServiceInquiryMetadata,
    PORTFOLIO_VIEW: PortfolioViewMetadata,
}


class AnalyticsEventCreate(CamelModel):
    """Schema for recording an analytics event.  The timestamp is assigned by the server."""

    event: str = Field(..., min_length=1, max_length=100)
    path: Optional[str] = None
    referrer: Optional[str] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    session_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @model_validator(mode="after")
    def check_metadata_shape(self) -> "AnalyticsEventCreate":
        if self.event == PAGE_VIEW and not self.path:
            raise ValueError("'page_view' events require a path")
        model = EVENT_METADATA_MODELS.get(self.event)
        if model is None:
            return self
        try:
            model.model_validate(self.metadata or {})
        except ValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            raise ValueError(f"Invalid metadata for '{self.event}' event: {fields}") from exc
        return self


class AnalyticsEventRead(CamelModel):
    """Schema for reading a stored analytics event."""

    id: str
    event: str
    path: Optional[str] = None
    referrer: Optional[str] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    session_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    timestamp: int
