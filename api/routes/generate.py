"""Generate and run endpoints for ACT-R models."""

import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ValidationError

from actrgen.amod.loader import load_model
from actrgen.emitter.script import ScriptAssembler
from actrgen.emitter.writer import ScriptWriter
from actrgen.errors import ActrGenError, ExecutionError, PreflightError
from actrgen.framework.config import FrameworkConfig
from actrgen.framework.pyactr import PyACTR, parse_initial_goal

router = APIRouter()


class GenerateRequest(BaseModel):
    """Request body for script generation."""
    model: Dict[str, Any]
    initial_goal: Optional[str] = None


class GenerateResponse(BaseModel):
    """Response body for script generation."""
    name: str
    class_name: str
    code: str


class RunResponse(BaseModel):
    """Response body for a script run."""
    success: bool
    output: str
    code: Optional[str] = None


def _load(request: GenerateRequest):
    try:
        return load_model(request.model)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"invalid model - {e}")
    except ActrGenError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/generate", response_model=GenerateResponse)
async def generate_script(request: GenerateRequest):
    """Generate a pyactr script for a model."""
    model = _load(request)

    try:
        assembler = ScriptAssembler(model)
        goal = parse_initial_goal(model, request.initial_goal)

        writer = ScriptWriter()
        assembler.write(writer, goal)
    except ActrGenError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return GenerateResponse(
        name=model.name,
        class_name=assembler.class_name,
        code=writer.contents(),
    )


@router.post("/run", response_model=RunResponse)
def run_model(request: GenerateRequest):
    """Generate a pyactr script for a model and run it."""
    model = _load(request)

    with tempfile.TemporaryDirectory(prefix="actrgen-") as tmp:
        framework = PyACTR(FrameworkConfig(tmp_path=Path(tmp)))

        try:
            framework.set_model(model)
            framework.initialize()
            result = framework.run(request.initial_goal)
        except PreflightError as e:
            raise HTTPException(status_code=503, detail=str(e))
        except ExecutionError as e:
            return RunResponse(success=False, output=e.output)
        except ActrGenError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return RunResponse(success=True, output=result.output, code=result.generated_code)
