import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from app import messages
from app.core.config import RESPONSE_HEADERS
from app.core.logging import setup_logging_from_settings
from app.handler import handle

# Set up logging
setup_logging_from_settings()
logger = logging.getLogger(__name__)

app = FastAPI(title="Material Submission Relay")

SUBMISSION_PATHS = ["/.netlify/functions/submit-material", "/api/submit-material"]
SUBMISSION_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Add exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception handler caught: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": messages.server_error()},
        headers={k: v for k, v in RESPONSE_HEADERS.items() if k != "Content-Type"},
    )

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}

async def submit_material(request: Request):
    """Relay a material submission to the site mailbox."""
    body = await request.body()
    result = await handle(request.method, body)
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )

for path in SUBMISSION_PATHS:
    app.add_api_route(path, submit_material, methods=SUBMISSION_METHODS)
