from .pipeline import AnalysisReport, ROIPipeline, run_analysis
from .payload import build_calculator_data, json_safe, report_to_dict

__all__ = [
    "AnalysisReport",
    "ROIPipeline",
    "run_analysis",
    "build_calculator_data",
    "json_safe",
    "report_to_dict",
]
