from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from medsearch.normalize.schema import NormalizedSummary, SummaryItem, TestCard


class SummaryObj(BaseModel):
    model_config = ConfigDict(extra="allow")

    summary: Any = None
    source: Optional[str] = None
    pages: Any = None

    @field_validator("source", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


class ImageObj(BaseModel):
    model_config = ConfigDict(extra="allow")

    caption_text: Optional[str] = None
    disease_image_base64: Optional[str] = None
    image_page_num: Optional[int] = None
    name_distance: Optional[float] = None

    @field_validator("caption_text", "disease_image_base64", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("image_page_num", mode="before")
    @classmethod
    def _int_or_none(cls, value: Any) -> Optional[int]:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @field_validator("name_distance", mode="before")
    @classmethod
    def _number_or_none(cls, value: Any) -> Optional[float]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value


class DetailItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    disease_name: Optional[str] = None
    summary_pdf: Optional[SummaryObj] = None
    summary_csv: Union[SummaryObj, str, List[Any], None] = None
    details_chunks: Any = None
    tests_details: Any = None
    related_images: List[ImageObj] = Field(default_factory=list)

    @field_validator("disease_name", mode="before")
    @classmethod
    def _name_or_none(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("summary_pdf", mode="before")
    @classmethod
    def _mapping_or_none(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, SummaryObj)) else None

    @field_validator("summary_csv", mode="before")
    @classmethod
    def _known_shape_or_none(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, SummaryObj, str, list)) else None

    @field_validator("related_images", mode="before")
    @classmethod
    def _image_list(cls, value: Any) -> List[Any]:
        if not isinstance(value, list):
            return []
        return [image for image in value if isinstance(image, (dict, ImageObj))]


class ApiResponse(BaseModel):
    sql_command: Optional[str] = None
    details: Optional[List[DetailItem]] = None


class SearchResult(BaseModel):
    """Everything the rendering layer needs for one search, already normalized."""

    query: str
    message: Optional[str] = None
    error: Optional[str] = None
    sql_command: Optional[str] = None
    disease_name: Optional[str] = None
    pdf_text: Optional[str] = None
    pdf_source: Optional[str] = None
    pdf_pages: List[Union[int, str]] = Field(default_factory=list)
    csv_text: Optional[str] = None
    csv_source: Optional[str] = None
    csv_lines: List[str] = Field(default_factory=list)
    csv_list: Optional[List[str]] = None
    csv_summary: NormalizedSummary = Field(default_factory=NormalizedSummary)
    csv_items: Optional[List[SummaryItem]] = None
    test_cards: Optional[List[TestCard]] = None
    related_images: List[ImageObj] = Field(default_factory=list)
    details_chunks: Any = None

    @property
    def found(self) -> bool:
        return self.error is None
