from pydantic import BaseModel, ConfigDict, Field


class RunCreate(BaseModel):
    language_id: int
    source_code: str
    stdin: str = Field(default="")


class RunOut(BaseModel):
    output: str


class SubmissionStatus(BaseModel):
    id: int
    description: str = ""


class ExecutionResult(BaseModel):
    # fields=* returns much more (token, language, limits...); keep what we format
    model_config = ConfigDict(extra="ignore", frozen=True)

    stdout: str | None = None
    stderr: str | None = None
    compile_output: str | None = None
    status: SubmissionStatus
    time: str | None = None
    memory: int | None = None
