from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

class CompletedSectionCreate(BaseModel):
    section_title: str
    completed_at: Optional[datetime] = None

class CompletedSection(BaseModel):
    section_title: str
    completed_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class UserProgressCreate(BaseModel):
    user_id: int
    course_id: Optional[int] = None
    progress: Optional[float] = None
    completed_sections: List[CompletedSectionCreate] = Field(default_factory=list)

class UserProgress(BaseModel):
    id: int
    user_id: int
    course_id: Optional[int] = None
    progress: Optional[float] = None
    completed_sections: List[CompletedSection] = Field(default_factory=list)
    last_updated: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
