import logging
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from codepad.core.config import Settings, get_settings
from codepad.core.logging import setup_logging
from codepad.api.routers import run as r_run
from codepad.api.routers import templates as r_templates

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(
    CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"]
)

app.include_router(r_templates.router, prefix=settings.API_PREFIX)
app.include_router(r_run.router, prefix=settings.API_PREFIX)


@app.get(f"{settings.API_PREFIX}/health")
async def health(current: Settings = Depends(get_settings)):
    return {"ok": True, "execution_configured": current.execution_configured}


@app.on_event("startup")
async def warn_if_unconfigured():
    if not settings.execution_configured:
        logging.getLogger("codepad").warning(
            "Judge0 API key not found. Set JUDGE0_API_KEY and JUDGE0_API_URL "
            "in your .env file; code execution is disabled until then."
        )
