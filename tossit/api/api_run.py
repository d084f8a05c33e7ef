from fastapi import FastAPI
import logging

from tossit.api.routes import calendar
from tossit.utilities.config import DEBUG

# Logging
logger = logging.getLogger("tossit_app")

# Initialize FastAPI app
app = FastAPI(title="TossIt Freshness Calendar API", debug=DEBUG)

# Include routers
app.include_router(calendar.router)


@app.on_event("startup")
def _startup_log():
    logger.info("Freshness calendar API started")


@app.get("/health")
def health():
    return {"status": "ok"}
