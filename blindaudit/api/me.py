from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from blindaudit.core.security import get_current_user, get_partner
from blindaudit.db.session import get_db
from blindaudit.models.user import User
from blindaudit.schemas.user import MeOut, PartnerOut

router = APIRouter(tags=["auth"])


@router.get("/me", response_model=MeOut)
def me(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Current user plus the other participant, if one exists yet"""
    partner = get_partner(db, current_user)
    return MeOut(
        id=str(current_user.id),
        email=current_user.email,
        full_name=current_user.full_name,
        partner=PartnerOut(
            id=str(partner.id),
            email=partner.email,
            full_name=partner.full_name,
        ) if partner else None,
    )
