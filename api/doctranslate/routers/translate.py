import logging
import time

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from doctranslate.config import settings
from doctranslate.dependencies import TranslationClientDep
from doctranslate.middleware.metrics import UPLOAD_SIZE
from doctranslate.schemas.translate import TranslateResponse, TranslationRequest
from doctranslate.services.documents import check_size, file_extension, read_document
from doctranslate.services.errors import ApiError, ReadFailure, TranslationFailure
from doctranslate.services.pipeline import run_translate

logger = logging.getLogger("doctranslate")
router = APIRouter()


@router.post("/translate", response_model=TranslateResponse, summary="Translate a document")
async def translate(
    client: TranslationClientDep,
    file: UploadFile = File(..., description="TXT, PDF or DOCX file"),
    source_language: str = Form("auto"),
    target_language: str = Form("en"),
    style: str = Form("professional"),
    output_format: str = Form("paragraphs"),
    context: str = Form("general"),
    literal: bool = Form(False),
    with_explanations: bool = Form(False),
    deep_analysis: bool = Form(False),
    with_examples: bool = Form(False),
    download: bool = Form(False),
):
    """Translate an uploaded TXT, PDF or DOCX file with Claude.

    Text files are embedded in the prompt; PDF and DOCX files are sent to the
    model as a base64 document.

    - `download=false` : JSON with the translation
    - `download=true` : the translation as a `.txt` attachment
    """
    filename = file.filename or ""

    try:
        if file.size is not None:
            check_size(file.size)
        # One byte past the limit is enough for read_document to reject it
        data = await file.read(settings.upload_max_bytes + 1)
        document = read_document(filename, data)
    except ReadFailure as e:
        raise HTTPException(status_code=400, detail=e.message)

    UPLOAD_SIZE.labels(kind=file_extension(filename)).observe(len(data))

    request = TranslationRequest(
        source_language=source_language,
        target_language=target_language,
        style=style,
        output_format=output_format,
        context=context,
        literal=literal,
        with_explanations=with_explanations,
        deep_analysis=deep_analysis,
        with_examples=with_examples,
        raw_text=document.raw_text,
        attachment=document.attachment,
    )

    try:
        translation, processing_ms = await run_translate(client, request)
    except (ApiError, TranslationFailure) as e:
        raise HTTPException(status_code=502, detail=e.message)

    if download:
        download_name = f"translation_{int(time.time() * 1000)}.txt"
        return Response(
            content=translation.encode("utf-8"),
            media_type="text/plain; charset=utf-8",
            headers={
                "Content-Disposition": f'attachment; filename="{download_name}"',
                "X-Processing-Ms": str(round(processing_ms)),
            },
        )

    return TranslateResponse(
        translation=translation,
        filename=filename,
        model=client.model,
        processing_ms=round(processing_ms),
    )
