# remote_config/schemas/app/app_stats_schemas.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List
from datetime import datetime

# --- 单个应用的统计 ---

class MenuStats(BaseModel):
    total: int = 0
    visible: int = 0
    enabled: int = 0
    categories: int = 0
    items: int = 0
    dividers: int = 0

class ToolbarStats(BaseModel):
    total: int = 0
    visible: int = 0

class FcmTopicStats(BaseModel):
    total: int = 0
    active: int = 0
    default: int = 0

class StyleStats(BaseModel):
    total: int = 0
    categories: Dict[str, int] = Field(default_factory=dict)

class AppStats(BaseModel):
    menus: MenuStats
    toolbars: ToolbarStats
    fcm_topics: FcmTopicStats
    styles: StyleStats

# --- 全局统计 ---

class AppStatusStats(BaseModel):
    total: int = 0
    active: int = 0
    inactive: int = 0
    maintenance: int = 0

# 全局统计对外沿用 averagePerApp / topCategories / lastUpdated 这几个驼峰键名
class EntityTotals(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    average_per_app: float = Field(0.0, alias="averagePerApp")

class StyleCategoryCount(BaseModel):
    category: str
    count: int

class GlobalStyleStats(EntityTotals):
    top_categories: List[StyleCategoryCount] = Field(default_factory=list, alias="topCategories")

class GlobalStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    apps: AppStatusStats
    menus: EntityTotals
    toolbars: EntityTotals
    fcm_topics: EntityTotals
    styles: GlobalStyleStats
    last_updated: datetime = Field(..., alias="lastUpdated")
