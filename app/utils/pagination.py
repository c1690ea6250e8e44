# app/utils/pagination.py - Page/limit normalisation shared by list endpoints
import math
from typing import Any, Dict, List

from app.core.config import settings


def normalize_page(page: int = None, limit: int = None, default_limit: int = None) -> tuple:
    """Clamp page to >= 1 and limit to [1, PAGINATION_MAX_LIMIT]"""
    page = max(1, page or 1)
    limit = limit or default_limit or settings.PAGINATION_DEFAULT_LIMIT
    limit = max(1, min(limit, settings.PAGINATION_MAX_LIMIT))
    return page, limit


def build_page(docs: List[Any], total: int, page: int, limit: int, **extra) -> Dict[str, Any]:
    pages = math.ceil(total / limit) if limit else 0
    result = {
        "docs": docs,
        "total": total,
        "page": page,
        "pages": pages,
        "limit": limit,
        "hasNext": page < pages,
        "hasPrev": page > 1,
    }
    result.update(extra)
    return result
