"""
Trainer API Routers.

All routers are imported here for easy access.
"""

from trainer.routers.intake import router as intake_router
from trainer.routers.plan import router as plan_router

__all__ = [
    "intake_router",
    "plan_router",
]
