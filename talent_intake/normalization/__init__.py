from talent_intake.normalization.base import BaseNormalizer
from talent_intake.normalization.factory import NormalizerFactory
from talent_intake.normalization.job_analyzer import JobAnalyzer
from talent_intake.normalization.models import JobAnalysis, StructuredRecord
from talent_intake.normalization.normalizer import Normalizer

__all__ = [
    "BaseNormalizer",
    "JobAnalysis",
    "JobAnalyzer",
    "Normalizer",
    "NormalizerFactory",
    "StructuredRecord",
]
