"""
Therapy card and its nested editors.
"""

from .administration_status import AdministrationStatus
from .clinical_support import ClinicalSupport
from .dispensing import Dispensing
from .service_enrollment import ServiceEnrollment
from .therapy_card import TherapyCard

__all__ = [
    "AdministrationStatus",
    "ClinicalSupport",
    "Dispensing",
    "ServiceEnrollment",
    "TherapyCard",
]
