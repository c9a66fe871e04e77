from fastapi import APIRouter, Depends
from api.dependencies import get_health_op
from controller.health import HealthOp
from schema import HealthOut

health_router = APIRouter(tags=["health"])


@health_router.get("/health", response_model=HealthOut)
def health(health_op: HealthOp = Depends(get_health_op)):
    return health_op.health()
