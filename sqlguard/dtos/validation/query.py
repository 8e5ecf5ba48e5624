"""
Query input DTOs
"""
from typing import Annotated, Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator

# Bound value: string, number, boolean or null
ParamValue = Union[bool, int, float, str, None]
ParamKey = Union[int, str]


class RawQuery(BaseModel):
    """
    A literal, unparameterized SQL statement
    """
    kind: Literal["raw"] = "raw"
    text: str


class ParameterizedQuery(BaseModel):
    """
    A SQL statement plus its bound parameters

    Keys are 0-based positions (for '?') or names (for ':name').
    Insertion order is preserved.
    """
    kind: Literal["parameterized"] = "parameterized"
    text: str
    params: Dict[ParamKey, ParamValue] = Field(default_factory=dict)

    @field_validator("params", mode="before")
    @classmethod
    def _params_from_sequence(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, (list, tuple)):
            return {i: v for i, v in enumerate(value)}
        return value


QueryInput = Annotated[Union[RawQuery, ParameterizedQuery], Field(discriminator="kind")]


def coerce_query(query: Any) -> Union[RawQuery, ParameterizedQuery]:
    """
    Build a query model from the loose shapes callers pass around

    Accepts:
    - RawQuery / ParameterizedQuery (returned as is)
    - str → RawQuery
    - mapping with "sql" (or "query") and optional "params" → ParameterizedQuery
    """
    if isinstance(query, (RawQuery, ParameterizedQuery)):
        return query
    if isinstance(query, str):
        return RawQuery(text=query)
    if isinstance(query, dict):
        text = query.get("sql", query.get("query", "")) or ""
        return ParameterizedQuery(text=text, params=query.get("params"))
    raise TypeError(f"Unsupported query type: {type(query).__name__}")


def query_text(query: Any) -> str:
    """Extract the SQL text without building a model (used for bypassed reports)"""
    if isinstance(query, (RawQuery, ParameterizedQuery)):
        return query.text
    if isinstance(query, dict):
        return query.get("sql", query.get("query", "")) or ""
    if isinstance(query, str):
        return query
    return ""


def query_params(query: Union[RawQuery, ParameterizedQuery]) -> Optional[Dict[ParamKey, ParamValue]]:
    if isinstance(query, ParameterizedQuery):
        return dict(query.params)
    return None
