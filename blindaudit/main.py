import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blindaudit.api.acknowledgments import router as acknowledgments_router
from blindaudit.api.health import router as health_router
from blindaudit.api.me import router as me_router
from blindaudit.api.prompts import router as prompts_router
from blindaudit.api.root import router as root_router
from blindaudit.api.topics import router as topics_router
from blindaudit.core.config import settings
from blindaudit.core.errors import BlindAuditError
from blindaudit.core.log_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Blind Audit")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BlindAuditError)
async def _blind_audit_error_handler(request: Request, exc: BlindAuditError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(root_router)
app.include_router(health_router)
app.include_router(me_router)
app.include_router(prompts_router)
app.include_router(acknowledgments_router)
app.include_router(topics_router)
