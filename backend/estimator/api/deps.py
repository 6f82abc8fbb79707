"""Request-scoped dependencies for the API layer"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from estimator.db.session import get_db
from estimator.domains.estimation.domain.gateway import PersistenceGateway
from estimator.domains.estimation.infrastructure.repositories import SqlAlchemyGateway
from estimator.services.estimation_service import EstimationService


def get_gateway(db: AsyncSession = Depends(get_db)) -> PersistenceGateway:
    return SqlAlchemyGateway(db)


def get_estimation_service(gateway: PersistenceGateway = Depends(get_gateway)) -> EstimationService:
    return EstimationService(gateway)
