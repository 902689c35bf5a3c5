"""
FastAPI service exposing DOCX article extraction over HTTP.
"""

import os
import tempfile

import uvicorn
from fastapi import FastAPI, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Config
from .logger import configure_logging, get_logger
from .markers import MarkerSet
from .processor import DocumentProcessor

logger = get_logger("api")


def _empty_envelope(message: str) -> dict:
    return {"success": False, "message": message, "articles": [], "logs": []}


def create_app(config: Config | None = None, processor: DocumentProcessor | None = None) -> FastAPI:
    """
    Build the HTTP application.

    Args:
        config: Service configuration. If None, loads from the environment.
        processor: Optional DocumentProcessor. If None, builds one from config.

    Returns:
        FastAPI application
    """
    config = config or Config.from_env()
    processor = processor or DocumentProcessor(
        converter=config.build_converter(),
        markers=MarkerSet(config.title_keyword, config.content_keyword),
    )

    app = FastAPI(
        title="DOCX Article Extractor",
        description="Extract title/content articles from DOCX documents",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/api/process-docx")
    async def process_docx(file: UploadFile | None = File(None)):
        if file is None:
            return JSONResponse(status_code=400, content=_empty_envelope("No file uploaded"))

        tmp_path = None
        try:
            data = await file.read()
            with tempfile.NamedTemporaryFile(dir=config.upload_dir, suffix=".docx", delete=False) as tmp:
                tmp.write(data)
                tmp_path = tmp.name

            logger.info("Processing upload", extra={"upload": file.filename, "size": len(data)})
            result = await run_in_threadpool(processor.process_file, tmp_path, file.filename or None)
            return result.to_dict()
        except Exception as e:
            logger.error("Error processing DOCX file", extra={"upload": file.filename, "error": str(e)})
            return JSONResponse(status_code=500, content=_empty_envelope("Error processing DOCX file"))
        finally:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError as e:
                    logger.error("Error deleting temporary file", extra={"path": tmp_path, "error": str(e)})

    return app


def serve() -> None:
    """Run the service with uvicorn using environment configuration."""
    config = Config.from_env()
    configure_logging(config.log_level, config.log_format)
    uvicorn.run(create_app(config), host=config.host, port=config.port)
