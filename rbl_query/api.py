"""FastAPI application exposing RBL queries and a health probe."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from rbl_query.config import Config
from rbl_query.models.zone_result import results_to_json
from rbl_query.services.rbl_checker import check_ip
from rbl_query.utils.ip_utils import InvalidAddress

logger = logging.getLogger(__name__)


def create_app(config: Config) -> FastAPI:
    """Build the application around an already loaded configuration."""
    app = FastAPI(title="RBL Query")
    app.state.config = config

    @app.exception_handler(InvalidAddress)
    async def invalid_address_handler(request: Request, exc: InvalidAddress):
        logger.warning("Rejected query", extra={"address": str(exc.address)})
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/query/{ip}")
    def query(ip: str, request: Request):
        """Check an IP against every configured RBL zone."""
        results = check_ip(ip, request.app.state.config)
        return JSONResponse(content=results_to_json(results))

    @app.get("/health", response_class=PlainTextResponse)
    def health():
        return PlainTextResponse("OK")

    return app
