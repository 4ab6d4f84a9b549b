"""
End-to-end illustration planning.

Runs analysis, content-type detection, query generation and title derivation
for one block of prose and packages the result with processing metadata.
"""

import time
from typing import Any, Optional

import structlog

from .analysis import analyze_text
from .classification import default_content_type, detect_content_type
from .models.plan import IllustrationPlan
from .queries import DescriptorPicker, generate_queries
from .titles import generate_title
from .version import get_current_pipeline_version


logger = structlog.get_logger(__name__)


def build_illustration_plan(
    text: str,
    config: Any = None,
    picker: Optional[DescriptorPicker] = None,
) -> IllustrationPlan:
    """
    Build the illustration plan for a text.

    Args:
        text: Raw article text
        config: Query configuration (None, partial override mapping or full config)
        picker: Descriptor picker for reproducible queries (default: random)

    Returns:
        IllustrationPlan with title, signals, content type and ranked queries
    """
    start_time = time.time()

    analysis = analyze_text(text)

    try:
        content_type = detect_content_type(analysis)
    except Exception as e:
        logger.warning("content_type_detection_failed", error=str(e))
        content_type = default_content_type()

    queries = generate_queries(analysis, config, picker=picker, content_type=content_type)
    title = generate_title(text if isinstance(text, str) else "", analysis.keywords)

    processing_time_ms = (time.time() - start_time) * 1000

    logger.info(
        "illustration_plan_built",
        title=title,
        content_type=content_type.type.value,
        queries_count=len(queries),
        processing_time_ms=round(processing_time_ms, 2),
    )

    return IllustrationPlan(
        title=title,
        keywords=analysis.keyword_words,
        themes=list(analysis.themes),
        entities=list(analysis.entities),
        content_type=content_type,
        queries=queries,
        pipeline_version=get_current_pipeline_version(),
        processing_time_ms=processing_time_ms,
    )
