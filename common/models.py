from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Union


class Case(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: str = Field(alias="userId")
    case_number: str = Field(alias="caseNumber")
    status: str
    lawyer_assigned: Optional[str] = Field(default="", alias="lawyerAssigned")

    @field_validator("lawyer_assigned", mode="before")
    @classmethod
    def unassigned_as_empty(cls, value):
        # unassigned cases are stored with null
        return "" if value is None else value


class Lawyer(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    expertise: str
    location: str
    rating: Union[int, float]


class ChatPayload(BaseModel):
    message: str


class ChatResponse(BaseModel):
    reply: str


class AnalysisResponse(BaseModel):
    analysis: str


# Gemini generateContent envelope; every level may be missing
class GeminiPart(BaseModel):
    text: Optional[str] = None


class GeminiContent(BaseModel):
    role: Optional[str] = None
    parts: Optional[List[GeminiPart]] = None


class GeminiCandidate(BaseModel):
    content: Optional[GeminiContent] = None
    finishReason: Optional[str] = None


class GeminiResponse(BaseModel):
    candidates: Optional[List[GeminiCandidate]] = None

    def first_text(self) -> Optional[str]:
        """Text of the first part of the first candidate, if there is one."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text
