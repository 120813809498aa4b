"""
Portfolio Backend — Career Service
====================================

What:  Reads and edits career positions and their ordered accomplishments.
Who:   GET /api/career and the /api/admin/career routes.

Error Handling Strategy:
    NotFoundError for unknown ids (→ 404). SQLAlchemy failures are logged and
    wrapped in DatabaseError (→ 500) so no SQL reaches the client.
"""

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.exceptions import DatabaseError, NotFoundError
from portfolio.models.career import CareerAccomplishment, CareerPosition
from portfolio.schemas.career import CareerPositionRequest, CareerPositionResponse

logger = logging.getLogger(__name__)


def _build_accomplishments(items: List[str]) -> List[CareerAccomplishment]:
    return [
        CareerAccomplishment(accomplishment=text, sort_order=index)
        for index, text in enumerate(items)
    ]


class CareerService:
    """
    Business logic for the career timeline.

    Responsibilities:
        - list_positions(): timeline in start-date order with bullets attached
        - create_position(): insert a position and its bullets in one flush
        - update_position(): overwrite fields and replace the bullet list
        - delete_position(): remove a position; bullets go with it
    """

    @staticmethod
    def to_response(position: CareerPosition) -> CareerPositionResponse:
        return CareerPositionResponse(
            id=position.id,
            title=position.title,
            company=position.company,
            location=position.location,
            start_date=position.start_date,
            end_date=position.end_date,
            coordinates=(position.coordinates_lng, position.coordinates_lat),
            accomplishments=[a.accomplishment for a in position.accomplishments],
        )

    async def list_positions(self, db: AsyncSession) -> List[CareerPositionResponse]:
        """
        Return every position ordered by start_date ascending (ties by id).

        Accomplishments arrive through the relationship's selectin load,
        already ordered by sort_order: two queries total, no N+1.
        """
        try:
            result = await db.execute(
                select(CareerPosition).order_by(
                    asc(CareerPosition.start_date), asc(CareerPosition.id)
                )
            )
            positions = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing career positions: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch career data",
                context={"error_type": type(e).__name__},
            )
        return [self.to_response(p) for p in positions]

    async def create_position(self, db: AsyncSession, payload: CareerPositionRequest) -> int:
        lng, lat = payload.coordinates
        position = CareerPosition(
            title=payload.title,
            company=payload.company,
            location=payload.location,
            start_date=payload.start_date,
            end_date=payload.end_date,
            coordinates_lng=lng,
            coordinates_lat=lat,
            accomplishments=_build_accomplishments(payload.accomplishments),
        )
        try:
            db.add(position)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating career position: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create career position",
                context={"error_type": type(e).__name__},
            )
        logger.info(
            "Career position %d created (%s at %s, %d accomplishments)",
            position.id,
            position.title,
            position.company,
            len(payload.accomplishments),
        )
        return position.id

    async def update_position(
        self, db: AsyncSession, position_id: int, payload: CareerPositionRequest
    ) -> None:
        """
        Overwrite a position and replace its accomplishments.

        The old bullets are removed by the delete-orphan cascade when the
        collection is reassigned; the new ones get sort_order 0..n-1 in the
        order received.
        """
        position = await self._get_position(db, position_id)
        lng, lat = payload.coordinates
        position.title = payload.title
        position.company = payload.company
        position.location = payload.location
        position.start_date = payload.start_date
        position.end_date = payload.end_date
        position.coordinates_lng = lng
        position.coordinates_lat = lat
        # Set explicitly: a bullets-only edit leaves the row's own columns unchanged
        position.updated_at = datetime.now(timezone.utc)
        position.accomplishments = _build_accomplishments(payload.accomplishments)
        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating career position %d: %s", position_id, str(e))
            raise DatabaseError(
                message="Failed to update career position",
                context={"position_id": position_id},
            )
        logger.info("Career position %d updated", position_id)

    async def delete_position(self, db: AsyncSession, position_id: int) -> None:
        position = await self._get_position(db, position_id)
        try:
            await db.delete(position)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting career position %d: %s", position_id, str(e))
            raise DatabaseError(
                message="Failed to delete career position",
                context={"position_id": position_id},
            )
        logger.info("Career position %d deleted", position_id)

    async def _get_position(self, db: AsyncSession, position_id: int) -> CareerPosition:
        try:
            position = await db.get(CareerPosition, position_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching career position %d: %s", position_id, str(e))
            raise DatabaseError(
                message="Failed to fetch career position",
                context={"position_id": position_id},
            )
        if position is None:
            raise NotFoundError(resource="career position", resource_id=str(position_id))
        return position


career_service = CareerService()
