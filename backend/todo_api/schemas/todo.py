from pydantic import BaseModel, ConfigDict, Field, StrictStr
from typing import Any, Optional

class TodoCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    text: StrictStr = Field(min_length=1)

class TodoUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    text: Optional[StrictStr] = Field(default=None, min_length=1)
    completed: Any = None
