"""Demos router for Python Primer API."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address

from primer.core.config import DemoConfig, get_config
from primer.core.constants import DemoCategory
from primer.core.exceptions import DemoExecutionError, DemoNotFoundError
from primer.core.logging_config import get_logger
from primer.demos import capture_demo, get_demo, list_demos

logger = get_logger("api.demos")

router = APIRouter()

# Running a demo occupies a worker thread for as long as its sleeps last
limiter = Limiter(key_func=get_remote_address)


def _demo_run_limit() -> str:
    return get_config().api.demo_run_limit


class DemoInfo(BaseModel):
    name: str
    title: str
    category: str
    category_name: str
    summary: str = ""


class DemoRunResponse(BaseModel):
    name: str
    title: str
    output: str


@router.get("", response_model=List[DemoInfo])
async def list_all_demos(category: Optional[str] = None):
    """List the demo catalogue, optionally filtered by category."""
    selected = None
    if category:
        try:
            selected = DemoCategory(category.lower())
        except ValueError:
            valid = ", ".join(c.value for c in DemoCategory)
            raise HTTPException(
                status_code=400,
                detail=f"Unknown category '{category}'. Valid categories: {valid}",
            )
    return [DemoInfo(**entry.to_dict()) for entry in list_demos(selected)]


@router.get("/{name}", response_model=DemoInfo)
async def get_demo_info(name: str):
    try:
        entry = get_demo(name)
    except DemoNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return DemoInfo(**entry.to_dict())


@router.post("/{name}/run", response_model=DemoRunResponse)
@limiter.limit(_demo_run_limit)
def run_demo_endpoint(
    request: Request,
    name: str,
    time_scale: Optional[float] = Query(None, ge=0),
):
    """Run a demo and return everything it printed.

    Defined as a plain function so FastAPI runs it in a worker thread;
    the async demo starts its own event loop.
    """
    try:
        entry = get_demo(name)
    except DemoNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    demo_config = get_config().demos
    config = DemoConfig(
        time_scale=demo_config.time_scale if time_scale is None else time_scale,
        seed=demo_config.seed,
    )

    try:
        output = capture_demo(entry.name, config)
    except DemoExecutionError as e:
        logger.error(f"Demo run failed: {e}")
        raise HTTPException(status_code=500, detail=e.message)

    return DemoRunResponse(name=entry.name, title=entry.title, output=output)
