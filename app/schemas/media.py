from pydantic import BaseModel, ConfigDict
from typing import Optional

class MediaBase(BaseModel):
    filename: str
    url: Optional[str] = None
    mime_type: Optional[str] = None
    filesize: Optional[int] = None
    alt: Optional[str] = None

class MediaCreate(MediaBase):
    pass

class Media(MediaBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
