"""Prompt templating API routes.

Hosts the templating engine over HTTP: variable extraction, final prompt
rendering, annotated preview and sample values. Documents are sent with
every request; nothing is stored.
"""

import structlog
from fastapi import APIRouter, Depends, status

from promptdoc.api.deps import enforce_block_limit, get_app_settings, get_components
from promptdoc.api.schemas import (
    CompletionStatus,
    DocumentRequest,
    PreviewResponse,
    RenderRequest,
    RenderResponse,
    SampleValuesResponse,
    SegmentResponse,
    VariablesResponse,
)
from promptdoc.core.config import Settings
from promptdoc.core.factory import ComponentFactory
from promptdoc.interfaces.document import (
    FallbackPolicy,
    Variable,
    VariableValues,
    has_value,
    segments_to_text,
)

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/prompts", tags=["prompts"])


# =============================================================================
# Helper Functions
# =============================================================================


def _completion(variables: list[Variable], values: VariableValues) -> CompletionStatus:
    """Count filled variables, e.g. for a "3 of 5 variables filled" indicator."""
    filled = sum(1 for variable in variables if has_value(values, variable.name))
    return CompletionStatus(
        filled=filled,
        total=len(variables),
        all_filled=filled == len(variables),
    )


def _policy(payload: RenderRequest, settings: Settings) -> FallbackPolicy:
    return payload.policy or settings.default_fallback_policy


# =============================================================================
# Endpoints
# =============================================================================


@router.post(
    "/variables",
    response_model=VariablesResponse,
    status_code=status.HTTP_200_OK,
)
async def extract_prompt_variables(
    payload: DocumentRequest,
    settings: Settings = Depends(get_app_settings),
    components: ComponentFactory = Depends(get_components),
) -> VariablesResponse:
    """Extract the variables a document references, in first-discovery order."""
    enforce_block_limit(payload, settings)

    variables = components.get_extractor().extract(payload.to_document())

    log.info("variables_extracted", blocks=len(payload.blocks), variables=len(variables))
    return VariablesResponse(variables=variables, count=len(variables))


@router.post(
    "/render",
    response_model=RenderResponse,
    status_code=status.HTTP_200_OK,
)
async def render_prompt(
    payload: RenderRequest,
    settings: Settings = Depends(get_app_settings),
    components: ComponentFactory = Depends(get_components),
) -> RenderResponse:
    """Render the final prompt text.

    ``copy_ready`` is False while any variable is still unfilled, so a
    client can hold back the copy action until the prompt is complete.
    A document without variables is always ready.
    """
    enforce_block_limit(payload, settings)

    document = payload.to_document()
    policy = _policy(payload, settings)

    variables = components.get_extractor().extract(document)
    text = components.get_renderer("plain").render(document, payload.values, policy)
    completion = _completion(variables, payload.values)

    log.info(
        "prompt_rendered",
        blocks=len(payload.blocks),
        policy=policy.value,
        filled=completion.filled,
        total=completion.total,
    )
    return RenderResponse(
        text=text,
        policy=policy,
        completion=completion,
        copy_ready=completion.all_filled,
    )


@router.post(
    "/preview",
    response_model=PreviewResponse,
    status_code=status.HTTP_200_OK,
)
async def preview_prompt(
    payload: RenderRequest,
    settings: Settings = Depends(get_app_settings),
    components: ComponentFactory = Depends(get_components),
) -> PreviewResponse:
    """Render annotated segments for on-screen review."""
    enforce_block_limit(payload, settings)

    document = payload.to_document()
    policy = _policy(payload, settings)

    variables = components.get_extractor().extract(document)
    segments = components.get_renderer("annotated").render(document, payload.values, policy)

    log.info("prompt_previewed", blocks=len(payload.blocks), segments=len(segments))
    return PreviewResponse(
        segments=[SegmentResponse.from_segment(segment) for segment in segments],
        text=segments_to_text(segments),
        policy=policy,
        completion=_completion(variables, payload.values),
    )


@router.post(
    "/sample-values",
    response_model=SampleValuesResponse,
    status_code=status.HTTP_200_OK,
)
async def generate_sample_values(
    payload: DocumentRequest,
    settings: Settings = Depends(get_app_settings),
    components: ComponentFactory = Depends(get_components),
) -> SampleValuesResponse:
    """Fill every variable with a deterministic sample value."""
    enforce_block_limit(payload, settings)

    variables = components.get_extractor().extract(payload.to_document())
    values = components.get_sample_generator().generate(variables)

    log.info("sample_values_generated", variables=len(variables))
    return SampleValuesResponse(values=values, variables=variables)
