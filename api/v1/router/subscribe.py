from fastapi import APIRouter, Depends
from api.dependencies import get_subscription_op
from controller.subscriber import SubscriptionOp
from schema import Outcome
from schema.subscriber import SubscribeIn

subscribe_router = APIRouter(tags=["newsletter"])


@subscribe_router.post("/subscribe", response_model=Outcome)
async def subscribe(
    data: SubscribeIn, subscription_op: SubscriptionOp = Depends(get_subscription_op)
):
    """Register an email address for the newsletter"""
    return await subscription_op.subscribe(data.email)
