"""Error response body, for OpenAPI documentation."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ProblemResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    kind: str
    title: str
    status: int
    detail: Any
    instance: str
    request_id: str | None = None


FORBIDDEN_RESPONSE: dict[int | str, dict[str, Any]] = {
    403: {"model": ProblemResponse, "description": "No access to the tenant"},
}
