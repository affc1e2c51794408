from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from poper.applications.interfaces.dtos.suggestion import (
    FilterOptionsResponse,
    SuggestionRequestSchema,
    SuggestionResultResponse,
)
from poper.applications.services.suggestion_dto_mapper import SuggestionDtoMapper
from poper.domain.exceptions import ConfigurationError, UpstreamError, ValidationError
from poper.domain.ports.services.suggestion_service_port import SuggestionServicePort
from poper.infrastructure.config.dependencies import get_settings, get_suggestion_service
from poper.infrastructure.config.settings import Settings
from poper.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.post("", response_model=SuggestionResultResponse)
async def suggest_movies(
    request: SuggestionRequestSchema,
    suggestion_service: Annotated[SuggestionServicePort, Depends(get_suggestion_service)],
):
    """Suggest movies for a mood description and filter selection"""
    try:
        result = await suggestion_service.suggest(SuggestionDtoMapper.request_to_domain(request))
        return SuggestionResultResponse(**SuggestionDtoMapper.to_suggestion_result_response_dict(result))

    except ValidationError as e:
        logger.warning(f"Bad request in suggestions: {e}")
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))
    except ConfigurationError:
        raise
    except UpstreamError as e:
        logger.error(f"Upstream {e.source} API failed: {e}")
        raise HTTPException(status_code=HTTPStatus.BAD_GATEWAY, detail=str(e))
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error generating suggestions")
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail="An unknown error occurred. Please try again."
        )


@router.get("/options", response_model=FilterOptionsResponse)
async def get_filter_options():
    """Dropdown options for the language, genre and year filters"""
    return FilterOptionsResponse(**SuggestionDtoMapper.to_filter_options_dict())


@router.get("/health")
async def suggestion_health_check(settings: Annotated[Settings, Depends(get_settings)]):
    """Health check endpoint for the suggestion service"""
    missing = settings.missing_credentials()
    return {
        "status": "healthy" if not missing else "misconfigured",
        "service": "movie-suggestions",
        "configured": not missing,
        "missing_credentials": missing,
    }
