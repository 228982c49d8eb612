from doctranslate.schemas.translate import TranslationRequest

LANGUAGE_NAMES = {
    "auto": "Auto-detect",
    "el": "Greek",
    "en": "English",
    "fr": "French",
    "de": "German",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "zh": "Chinese",
    "ja": "Japanese",
}

STYLE_INSTRUCTIONS = {
    "academic": "Use academic, scholarly language with formal terminology and rigorous structure.",
    "professional": "Use professional, business-appropriate language that is clear and competent.",
    "email": "Format as a professional email with appropriate greeting and closing.",
    "formal": "Use very formal, official document language suitable for legal or governmental contexts.",
    "casual": "Use conversational, everyday language that feels natural and friendly.",
    "creative": "Use creative, engaging language with literary flair and expressive phrasing.",
}

FORMAT_INSTRUCTIONS = {
    "paragraphs": "Present the translation in well-structured paragraphs.",
    "letter": "Format as a formal letter with date, greeting, body, and closing.",
    "recommendation": "Format as a recommendation letter with proper structure.",
    "bullets": "Format as bullet points for clarity and easy reading.",
}

CONTEXT_INSTRUCTIONS = {
    "academic": "This is for an academic/university setting.",
    "business": "This is for a professional business meeting.",
    "presentation": "This is for a presentation.",
    "research": "This is for a research paper.",
}

PREAMBLE = "You are a professional translator with expertise in multiple languages and contexts."

HUMAN_TONE_INSTRUCTION = (
    "IMPORTANT: The translation MUST sound natural and human-written, as if created by a "
    "professional human translator. Avoid robotic or machine-like phrasing."
)

LITERAL_INSTRUCTION = (
    "Provide a literal, word-for-word translation that stays as close to the original as possible."
)
EXPLANATIONS_INSTRUCTION = (
    "After the translation, provide explanations of key terms, idioms, or culturally "
    "specific references in brackets."
)
DEEP_ANALYSIS_INSTRUCTION = (
    "After the translation, provide a deeper analysis of the text's meaning, context, and nuances."
)
EXAMPLES_INSTRUCTION = "Include relevant examples to illustrate complex concepts or terminology."

EXTRACT_INSTRUCTION = "Please extract and translate all text from the uploaded document."

# Placeholders set as raw_text when the content travels as an attachment
PDF_PLACEHOLDER = "[PDF CONTENT - Will be processed by AI]"
DOCX_PLACEHOLDER = "[DOCX CONTENT - Will be processed by AI]"
PLACEHOLDER_MARKERS = ("[PDF CONTENT", "[DOCX CONTENT")


def language_name(code: str) -> str:
    """Display name for a language code; unknown codes are returned as-is."""
    return LANGUAGE_NAMES.get(code, code)


def is_document_placeholder(text: str) -> bool:
    return any(marker in text for marker in PLACEHOLDER_MARKERS)


def build_prompt(request: TranslationRequest) -> str:
    """Build the instruction sent to the model for one translation request.

    Never raises: a style, format or context missing from its table leaves
    that clause with an empty instruction.
    """
    target = language_name(request.target_language)

    prompt = f"{PREAMBLE}\n\n"

    if request.source_language == "auto":
        prompt += f"Please detect the source language automatically and translate to {target}.\n\n"
    else:
        source = language_name(request.source_language)
        prompt += f"Translate the following text from {source} to {target}.\n\n"

    prompt += f"Translation Style: {STYLE_INSTRUCTIONS.get(request.style, '')}\n\n"
    prompt += f"Format: {FORMAT_INSTRUCTIONS.get(request.output_format, '')}\n\n"

    if request.context != "general":
        prompt += f"Context: {CONTEXT_INSTRUCTIONS.get(request.context, '')}\n\n"

    prompt += f"{HUMAN_TONE_INSTRUCTION}\n\n"

    if request.literal:
        prompt += f"{LITERAL_INSTRUCTION}\n\n"
    if request.with_explanations:
        prompt += f"{EXPLANATIONS_INSTRUCTION}\n\n"
    if request.deep_analysis:
        prompt += f"{DEEP_ANALYSIS_INSTRUCTION}\n\n"
    if request.with_examples:
        prompt += f"{EXAMPLES_INSTRUCTION}\n\n"

    text = request.raw_text
    if text and not is_document_placeholder(text):
        prompt += f"\n\nText to translate:\n{text}"
    elif is_document_placeholder(text):
        prompt += f"\n\n{EXTRACT_INSTRUCTION}"

    return prompt
