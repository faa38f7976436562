"""
================================================================================
Page Components
================================================================================

Reusable widgets built on ElementHandle.

Each component class encapsulates:
    - Its locator (and those of its sub-widgets)
    - Widget-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .basic import ElementHandle, ElementSize
from .calendar import Calendar, month_and_year, tomorrows_date
from .checkbox import Checkbox
from .class_list import CardState, card_state_from_classes
from .dropdown import Dropdown, verify_options_from_dropdown
from .floating_action import FloatingActionMenu
from .multi_select import MultiSelectDropdown
from .patient_searcher import PatientSearcher
from .radio_button import RadioButton
from .table import Table
from .task_card import TaskCard
from .text_input import TextInput
from .therapy_card import (
    AdministrationStatus,
    ClinicalSupport,
    Dispensing,
    ServiceEnrollment,
    TherapyCard,
)

__all__ = [
    "AdministrationStatus",
    "Calendar",
    "CardState",
    "Checkbox",
    "ClinicalSupport",
    "Dispensing",
    "Dropdown",
    "ElementHandle",
    "ElementSize",
    "FloatingActionMenu",
    "MultiSelectDropdown",
    "PatientSearcher",
    "RadioButton",
    "ServiceEnrollment",
    "Table",
    "TaskCard",
    "TextInput",
    "TherapyCard",
    "card_state_from_classes",
    "month_and_year",
    "tomorrows_date",
    "verify_options_from_dropdown",
]
