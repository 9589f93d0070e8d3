"""Routes for the version and advice endpoints."""

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from advice_proxy.api.dependencies import HandlerDep
from advice_proxy.dto import AdviceResponse, ErrorResponse

router = APIRouter()

_SERVER_ERRORS = {
    status.HTTP_408_REQUEST_TIMEOUT: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.get("/", response_class=PlainTextResponse)
async def root(handler: HandlerDep) -> str:
    """Return the service version."""
    return await handler.get_version()


@router.get("/advices", response_model=list[AdviceResponse], responses=_SERVER_ERRORS)
async def list_advices(handler: HandlerDep) -> list[AdviceResponse]:
    """List every stored advice."""
    return await handler.list_advices()


@router.post(
    "/advices",
    response_model=AdviceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse}, **_SERVER_ERRORS},
)
async def create_advice(handler: HandlerDep) -> AdviceResponse:
    """Fetch a new advice from the upstream and store it.

    The request body, if any, is ignored.
    """
    return await handler.create_advice()


@router.delete(
    "/advices/{advice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        **_SERVER_ERRORS,
    },
)
async def delete_advice(advice_id: str, handler: HandlerDep) -> Response:
    """Delete an advice by id."""
    await handler.delete_advice(advice_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
