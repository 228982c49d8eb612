from prometheus_client import Counter, Histogram
from prometheus_fastapi_instrumentator import Instrumentator

TRANSLATIONS = Counter(
    "doctranslate_translations_total",
    "Total translation requests",
    ["outcome"],
)

TRANSLATION_DURATION = Histogram(
    "doctranslate_translation_duration_seconds",
    "Translation API round-trip duration",
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 30.0, 60.0, 120.0],
)

UPLOAD_SIZE = Histogram(
    "doctranslate_upload_bytes",
    "Size of uploaded documents",
    ["kind"],
    buckets=[1_000, 10_000, 100_000, 1_000_000, 5_000_000, 10_000_000],
)


def setup_metrics(app):
    Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=["/metrics", "/docs", "/openapi.json"],
    ).instrument(app).expose(app, endpoint="/metrics")
