"""
api/routes/documents.py
-----------------------
GET /download-pdf — serves the Smart Tour brochure as an attachment.

  404  file absent at config.PDF_PATH
  500  file present but unreadable
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

import config

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/download-pdf", summary="Download the Smart Tour brochure")
def download_pdf() -> Response:
    path = config.PDF_PATH
    if not path.is_file():
        return JSONResponse(status_code=404, content={"error": "PDF file not found"})

    try:
        content = path.read_bytes()
    except OSError:
        logger.exception("Error serving PDF %s", path)
        return JSONResponse(status_code=500, content={"error": "Failed to serve PDF"})

    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={config.PDF_DOWNLOAD_NAME}"},
    )
