"""Tool endpoint models (carriers, languages, action categories)."""

from typing import List, Optional

from pydantic import Field

from .common import BaseAPIResponse


class Carrier(BaseAPIResponse):
    carrier_id: Optional[str] = None
    carrier_name: Optional[str] = None


class CarrierResponse(BaseAPIResponse):
    carriers: List[Carrier] = Field(default_factory=list)


class Language(BaseAPIResponse):
    language_code: Optional[str] = None
    language_name: Optional[str] = None


class LanguageResponse(BaseAPIResponse):
    languages: List[Language] = Field(default_factory=list)


class ActionCategory(BaseAPIResponse):
    action_category_id: Optional[str] = None
    action_category_name: Optional[str] = None


class ActionCategoryResponse(BaseAPIResponse):
    action_categories: List[ActionCategory] = Field(default_factory=list)
