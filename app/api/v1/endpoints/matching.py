import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import DataAccessFailure, InvalidInput, NotFound
from app.schemas.match import MatchRequest, MatchResponse
from app.services.match_ranker import SupplierMatcher
from app.services.repository import SqlMatchRepository
from app.services.workflow_webhook import notify_suppliers_matched

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=MatchResponse)
async def match_suppliers(
    request: MatchRequest,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    """
    Returns ranked active suppliers for an open RFQ.
    """
    matcher = SupplierMatcher(SqlMatchRepository(db))
    try:
        result = matcher.match(request.rfq_id)
    except InvalidInput as e:
        logger.warning(f"Rejected match request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DataAccessFailure as e:
        logger.error(f"Error matching suppliers: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to match suppliers")

    background_tasks.add_task(notify_suppliers_matched, result)
    return result
