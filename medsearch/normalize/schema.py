from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NormalizedSummary(BaseModel):
    """Heading plus list decomposition of a narrative summary."""

    model_config = ConfigDict(frozen=True)

    heading: Optional[str] = None
    items: List[str] = Field(default_factory=list)
    numbered: bool = False


class SummaryItem(BaseModel):
    """One enumerated entry split into a title and its description."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str


class TestCard(BaseModel):
    """Test names sharing one relevance score."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    score: Optional[float] = None
    names: List[str] = Field(min_length=1)
