from fastapi import APIRouter, Depends
from api.dependencies import contact_limiter, get_contact_op
from controller.contact import ContactOp
from schema import Outcome
from schema.contact import ContactFormIn

contact_router = APIRouter(tags=["contact"])


@contact_router.post(
    "/contact", response_model=Outcome, dependencies=[Depends(contact_limiter)]
)
async def submit_contact_form(
    contact_data: ContactFormIn, contact_op: ContactOp = Depends(get_contact_op)
):
    """
    Submit the contact form
    - Stores the message
    - Notifies the site owner and acknowledges the sender by email
    """
    return await contact_op.submit_contact(
        name=contact_data.name,
        email=contact_data.email,
        subject=contact_data.subject,
        message=contact_data.message,
    )
