"""Provider exports."""

from .base import AnalysisProvider
from .openai_provider import OpenAIAnalysisProvider
from .rule_based import RuleBasedAnalysisProvider

__all__ = ["AnalysisProvider", "OpenAIAnalysisProvider", "RuleBasedAnalysisProvider"]
