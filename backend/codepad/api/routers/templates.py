from fastapi import APIRouter, Depends, HTTPException
from codepad.core.config import Settings, get_settings
from codepad.schemas.template import CodeTemplate
from codepad.services.templates import load_all_templates, load_template

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[CodeTemplate], response_model_by_alias=True)
async def list_templates(settings: Settings = Depends(get_settings)):
    return load_all_templates(templates_dir=settings.TEMPLATES_DIR)


@router.get("/{language}", response_model=CodeTemplate, response_model_by_alias=True)
async def get_template(language: str, settings: Settings = Depends(get_settings)):
    template = load_template(language, settings.TEMPLATES_DIR)
    if not template:
        raise HTTPException(404, "template not found")
    return template
