"""Query parameters documented for paged collection endpoints."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict


class PageableParameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: Literal["integer", "string", "array"]
    description: str
    parameter_in: Literal["query"] = "query"
    items: Optional[str] = None
    allow_multiple: bool = False


PAGEABLE_PARAMETERS: List[PageableParameter] = [
    PageableParameter(
        name="page",
        type="integer",
        description="Results page you want to retrieve (0..N)",
    ),
    PageableParameter(
        name="size",
        type="integer",
        description="Number of records per page.",
    ),
    PageableParameter(
        name="sort",
        type="array",
        items="string",
        description="Sorting criteria in the format: property(,asc|desc). "
                    "Default sort order is ascending. "
                    "Multiple sort criteria are supported.",
        allow_multiple=True,
    ),
]


def pageable_parameters() -> List[PageableParameter]:
    return list(PAGEABLE_PARAMETERS)
