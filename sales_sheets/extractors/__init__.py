"""
sales_sheets/extractors package marker.
"""

from sales_sheets.extractors.goal_trend_extractor import GoalTrendExtractor
from sales_sheets.extractors.keyword_extractor import KeywordExtractor
from sales_sheets.extractors.monthly_breakdown_extractor import MonthlyBreakdownExtractor
from sales_sheets.extractors.sales_summary_extractor import SalesSummaryExtractor

__all__ = [
    "GoalTrendExtractor",
    "KeywordExtractor",
    "MonthlyBreakdownExtractor",
    "SalesSummaryExtractor",
]
