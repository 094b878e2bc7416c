"""Administrative account endpoints.

These routes carry no authentication of their own; deploy them behind a
trusted network boundary.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from schemas.auth import DeleteAccountRequest, MessageResponse
from services.password_service import PasswordService


router = APIRouter()


@router.delete("/accounts", response_model=MessageResponse)
def delete_account(payload: DeleteAccountRequest, db: Session = Depends(get_db)):
    """
    Delete an account and all of its password reset tokens.

    Deleting an account that does not exist still returns 200.
    """
    service = PasswordService(db)
    deleted = service.delete_account(payload.username)

    if not deleted:
        return {"message": "Account not found; nothing to delete"}
    return {"message": "Account deleted successfully"}
