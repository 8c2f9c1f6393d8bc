"""Data models for recorded method calls."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MethodCallRecord(BaseModel):
    """One call made through a recording proxy.

    Attributes:
        instance_name: Registry name of the proxy the call went through
        method: Name of the invoked method
        args: Positional arguments
        kwargs: Keyword arguments
        result: Return value after endpoint substitution
        remote_returned: True if the result graph contained an endpoint
        remote_instances: Endpoint name -> path for endpoints in the result
        exception: repr() of the exception raised by the target, if any
        timestamp: When the call was started (UTC)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    instance_name: str
    method: str
    args: List[Any] = Field(default_factory=list)
    kwargs: Dict[str, Any] = Field(default_factory=dict)
    result: Any = None
    remote_returned: bool = False
    remote_instances: Dict[str, str] = Field(default_factory=dict)
    exception: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
