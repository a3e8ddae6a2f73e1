from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.core.datetime_utils import ISODate
from app.db.session import get_db
from app.stats.repositories.order_statistics import OrderStatisticsRepository
from app.stats.schemas.revenue import Period, PeriodQuery
from app.stats.services.period import ReportWindow, resolve_period


def get_period_query(
    period: Period | None = Query(None, description="Time period (defaults to last 30 days)"),
    start_date: ISODate | None = Query(
        None, alias="startDate", description="Start date (YYYY-MM-DD), required if period=custom"
    ),
    end_date: ISODate | None = Query(
        None, alias="endDate", description="End date (YYYY-MM-DD), required if period=custom"
    ),
) -> PeriodQuery:
    return PeriodQuery(period=period, start_date=start_date, end_date=end_date)


def get_report_window(query: PeriodQuery = Depends(get_period_query)) -> ReportWindow:
    """Resolve the request's period; raises InvalidRangeError before any query runs."""
    return resolve_period(query.period, query.start_date, query.end_date)


def get_order_statistics_repository(db: Session = Depends(get_db)) -> OrderStatisticsRepository:
    return OrderStatisticsRepository(db)
