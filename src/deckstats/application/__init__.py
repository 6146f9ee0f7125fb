# Application Package
from .aggregator import StatsAggregator
from .report_service import ReportResult, ReportService, summary_line

__all__ = ["StatsAggregator", "ReportService", "ReportResult", "summary_line"]
