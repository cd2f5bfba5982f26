from pydantic import BaseModel, ConfigDict


class FrozenDTO(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


class ToolchainRecord(FrozenDTO):
    """Base for records decoded from cargo's JSON stream.

    Unknown keys are ignored so newer cargo releases can add fields.
    """
