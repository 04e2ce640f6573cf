import logging
import traceback

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from serverinfo.hwosinfo.collector import HostInfoCollector

router = APIRouter(tags=["Info"])
logger = logging.getLogger(__name__)


def get_collector(request: Request) -> HostInfoCollector:
    return request.app.state.collector


@router.get("/info")
@router.get("/")
def get_info_endpoint(collector: HostInfoCollector = Depends(get_collector)):
    server_info = collector.collect()
    try:
        body = server_info.model_dump_json()
    except (ValueError, TypeError) as e:
        logger.error(f"Error encoding server info: {e}\n{traceback.format_exc()}")
        return PlainTextResponse("Error encoding JSON", status_code=500)

    return Response(content=body, media_type="application/json")
