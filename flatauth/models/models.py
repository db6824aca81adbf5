from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class credentials(BaseModel):
    email: Optional[str] = Field(None, title="Email Address")
    password: Optional[str] = Field(None, title="Password")


class user_record(BaseModel):
    # records written by hand or by older versions may lack fields or carry extra ones
    model_config = ConfigDict(extra="allow")

    email: Optional[str] = Field(None, title="Email Address")
    password: Optional[str] = Field(None, title="Password")
    timestamp: Optional[str] = Field(None, title="Signup time (ISO-8601)")


class message_response(BaseModel):
    message: str
