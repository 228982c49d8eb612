from pydantic import BaseModel, Field


class Attachment(BaseModel):
    media_type: str = Field(..., description="application/pdf or the DOCX OOXML media type")
    data: str = Field(..., description="Base64-encoded document payload")


class TranslationRequest(BaseModel):
    source_language: str = Field(default="auto", description="Source language code or 'auto'")
    target_language: str = Field(default="en", description="Target language code")
    style: str = Field(default="professional", description="academic, professional, email, formal, casual, creative")
    output_format: str = Field(default="paragraphs", description="paragraphs, letter, recommendation, bullets")
    context: str = Field(default="general", description="general, academic, business, presentation, research")

    literal: bool = False
    with_explanations: bool = False
    deep_analysis: bool = False
    with_examples: bool = False

    raw_text: str = Field(default="", description="Plain text to translate, or a document placeholder")
    attachment: Attachment | None = None


class TranslateResponse(BaseModel):
    translation: str
    filename: str
    model: str
    processing_ms: float
