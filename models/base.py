from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Input record supplied by the organizer; field changes are re-validated."""
    model_config = ConfigDict(validate_assignment=True)


class ResultModel(BaseModel):
    """Immutable value produced by a skins computation."""
    model_config = ConfigDict(frozen=True)
