from .stats_export_comp import report_filename, write_csv_reports
from .stats_report_comp import StatsReport, natural_sort_key

__all__ = [
    "StatsReport",
    "natural_sort_key",
    "report_filename",
    "write_csv_reports",
]
