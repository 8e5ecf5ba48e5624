from pydantic import BaseModel, Field
from typing import Optional, Union, List, Dict

from sqlguard.dtos.validation.query import ParamValue


class ValidateRequest(BaseModel):
    sql: str
    # None → raw query; list or dict → parameterized query
    params: Optional[Union[List[ParamValue], Dict[str, ParamValue]]] = None
    enabled: bool = True
    verbose: Optional[bool] = Field(None, description="Defaults to VALIDATION_VERBOSE")
    notify: bool = Field(False, description="Send an alert when errors are found")


class VersionResponse(BaseModel):
    name: str
    version: str
