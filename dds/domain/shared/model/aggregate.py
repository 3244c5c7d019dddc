from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base for entities: validated on construction and on every assignment."""

    model_config = ConfigDict(validate_assignment=True)
