from fastapi import Depends
from codepad.core.config import Settings, get_settings
from codepad.services.judge0 import Judge0Client


def get_judge0(settings: Settings = Depends(get_settings)) -> Judge0Client:
    return Judge0Client(settings)
