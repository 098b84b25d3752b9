"""Pydantic models for JSON output schemas.

These models ensure type safety and provide runtime validation of the JSON
printed by `health-inspector cookbooks --json`.
"""

from pydantic import BaseModel, ConfigDict, Field


class CookbookResult(BaseModel):
    """Outcome for a single cookbook.

    Attributes:
        name: Cookbook name
        status: "pass" or "fail"
        failures: Failure messages in check order (empty when passing)
    """

    model_config = ConfigDict(strict=True)

    name: str
    status: str = Field(..., pattern="^(pass|fail)$")
    failures: list[str]


class CookbooksCommandResponse(BaseModel):
    """JSON response schema for the `health-inspector cookbooks` command."""

    model_config = ConfigDict(strict=True)

    cookbooks: list[CookbookResult]
    passed: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
