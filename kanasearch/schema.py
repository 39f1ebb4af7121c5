from typing import Any, Dict, Optional
from urllib.parse import urlencode
from pydantic import BaseModel, Field, ConfigDict

from kanasearch import API_BASE_URL, SEARCH_ENDPOINT

class SearchRequest(BaseModel):
    """Query parameters of a dictionary search call."""
    q:     str           = Field(..., min_length=1)
    limit: Optional[int] = Field(None, ge=1)
    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def to_url(self, base_url: Optional[str] = None) -> str:
        """Full GET url of the search endpoint, percent-encoding the query."""
        base = API_BASE_URL if base_url is None else base_url
        return f"{base.rstrip('/')}{SEARCH_ENDPOINT}?{urlencode(self.to_params())}"

class ConvertedQuery(BaseModel):
    raw:     str
    preview: str  # quotes kept, shown while typing
    submit:  str  # quotes stripped, sent to the search endpoint
    model_config = ConfigDict(extra="forbid")
