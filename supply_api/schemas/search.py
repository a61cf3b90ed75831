from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

SuggestionType = Literal["product", "supplier", "order"]


class SearchSuggestion(BaseModel):
    type: SuggestionType
    id: int
    text: str
    subtext: str
    metadata: Optional[Dict[str, Union[str, float, int, bool]]] = None

    model_config = ConfigDict(frozen=True)


class SearchResponse(BaseModel):
    query: str
    suggestions: List[SearchSuggestion]
