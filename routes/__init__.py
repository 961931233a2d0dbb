# Routes package __init__.py - re-exports routers for main.py convenience
from .review import router as review_router
from .progress import router as progress_router
from .stats import router as stats_router

__all__ = ['review_router', 'progress_router', 'stats_router']
