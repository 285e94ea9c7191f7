"""
Gateway route table.

Every (method, path) the gateway answers is declared by the routers included
here. Requests for a known path with another method get a 405; requests for
any other path get the API documentation (see main.py).
"""

from fastapi import APIRouter

from api.v1.analytics import router as analytics_router
from api.v1.integrations import router as integrations_router
from api.v1.polls import router as polls_router
from api.v1.webhooks import router as webhooks_router

router = APIRouter()

router.include_router(polls_router, prefix="/polls", tags=["Polls"])
router.include_router(analytics_router, prefix="/analytics", tags=["Analytics"])
router.include_router(webhooks_router, prefix="/webhooks", tags=["Webhooks"])
router.include_router(integrations_router, prefix="/integrations", tags=["Integrations"])
