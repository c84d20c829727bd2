# routers/valuations.py
"""
Valuation API routes: yield calculation, stored snapshots and the
portfolio summary.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_owner_id
from schemas.valuation import PortfolioSummary, ValuationRequest, ValuationResponse, ValuationResult
from services import PortfolioService, ValuationService

router = APIRouter(prefix="/api/valuations", tags=["valuations"])


@router.post(
     "/calculate",
     response_model=ValuationResult,
     status_code=status.HTTP_201_CREATED,
     summary="Calculate yields and a suggested sale price",
)
def calculate_valuation(
     body: ValuationRequest,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     """
     Compute gross yield, net yield and cash-on-cash return for a property
     and the sale price that delivers **target_yield** (default 5%).

     The snapshot is stored; **details** carries intermediate figures that
     are not.
     """
     result = ValuationService(db).calculate(
          owner_id, body.property_id, target_yield=body.target_yield, memo=body.memo
     )
     db.commit()
     return result


@router.get("/portfolio/summary", response_model=PortfolioSummary, summary="Portfolio summary")
def get_portfolio_summary(
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return PortfolioService(db).summary(owner_id)


@router.get("", response_model=List[ValuationResponse], summary="List stored valuations")
def list_valuations(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return ValuationService(db).list_valuations(owner_id, property_id=property_id)


@router.get("/{valuation_id}", response_model=ValuationResponse, summary="Get valuation by ID")
def get_valuation(
     valuation_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return ValuationService(db).get_valuation(owner_id, valuation_id)


@router.delete("/{valuation_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete valuation")
def delete_valuation(
     valuation_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     ValuationService(db).delete_valuation(owner_id, valuation_id)
     db.commit()
     return None
