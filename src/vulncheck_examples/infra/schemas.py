from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiMeta(BaseModel):
	"""Paging and provenance block returned under ``_meta``"""
	model_config = ConfigDict(extra="allow")

	timestamp: Optional[str] = None
	index: Optional[str] = None
	limit: Optional[int] = None
	total_documents: Optional[int] = None
	sort: Optional[str] = None
	order: Optional[str] = None
	page: Optional[int] = None
	total_pages: Optional[int] = None
	max_pages: Optional[int] = None
	first_item: Optional[int] = None
	last_item: Optional[int] = None


class ApiEnvelope(BaseModel):
	"""Top-level JSON body shared by every JSON endpoint"""
	model_config = ConfigDict(extra="allow", populate_by_name=True)

	benchmark: Optional[float] = Field(None, alias="_benchmark")
	meta: Optional[ApiMeta] = Field(None, alias="_meta")
	data: Any = None
