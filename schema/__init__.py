from pydantic import BaseModel
from util.enum import DbState, HealthState


class Outcome(BaseModel):
    success: bool
    message: str


class HealthOut(BaseModel):
    status: HealthState = HealthState.ok
    dbState: DbState
