"""
Base model classes.
"""

from pydantic import BaseModel, ConfigDict


class StateModel(BaseModel):
    """
    Base for mutable session state (registry, score store).

    Mutation goes through model methods; assignment is still validated.
    """
    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )


class RecordModel(BaseModel):
    """
    Base for immutable records (categories, snapshots, derived results).

    Unknown fields from older stored data are ignored.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
