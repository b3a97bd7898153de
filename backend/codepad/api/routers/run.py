import logging
from fastapi import APIRouter, Depends, HTTPException
from codepad.api.deps import get_judge0
from codepad.core.errors import ExecutionError
from codepad.schemas.run import RunCreate, RunOut
from codepad.services.judge0 import Judge0Client

router = APIRouter(prefix="/run", tags=["run"])
log = logging.getLogger(__name__)


@router.post("", response_model=RunOut)
async def run_code(payload: RunCreate, judge0: Judge0Client = Depends(get_judge0)):
    if not payload.source_code.strip():
        raise HTTPException(400, "source code is empty")
    try:
        output = await judge0.execute_code(
            payload.language_id, payload.source_code, payload.stdin
        )
    except ExecutionError as e:
        log.exception("Error executing code")
        raise HTTPException(status_code=502, detail=f"Error: {e}")
    return RunOut(output=output)
