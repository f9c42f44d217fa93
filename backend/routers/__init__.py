# backend/routers/__init__.py

from .transactions import router as transactions_router
from .stats import router as stats_router
from .visuals import router as visuals_router
from .seed import router as seed_router
