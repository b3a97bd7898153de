from pydantic import BaseModel, ConfigDict, Field


class CodeTemplate(BaseModel):
    """Starter descriptor for one language, stored as camelCase JSON."""

    model_config = ConfigDict(populate_by_name=True)

    value: str
    label: str
    judge0_id: int = Field(alias="judge0Id")
    description: str
    default_code: str = Field(alias="defaultCode")
    example_input: str = Field(default="", alias="exampleInput")
    example_output: str = Field(default="", alias="exampleOutput")
