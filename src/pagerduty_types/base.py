from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

class APIObject(BaseModel):
    """
    Reference to another PagerDuty entity by identity.

    Used wherever the API embeds a related object (services, schemas, ...).
    The reference is never owned by the object that carries it.
    """

    id: Optional[str] = Field(None, description="Entity identifier")
    type: Optional[str] = Field(None, description="Entity type, e.g. 'service_reference'")
    summary: Optional[str] = Field(None, description="Short human readable summary")
    self_: Optional[str] = Field(None, alias="self", description="API URL of the entity")
    html_url: Optional[str] = Field(None, description="Web UI URL of the entity")

    model_config = ConfigDict(populate_by_name=True)

class APIListObject(BaseModel):
    """Offset pagination fields shared by list requests and list responses."""

    limit: Optional[int] = None
    offset: Optional[int] = None
    more: Optional[bool] = None
    total: Optional[int] = None
