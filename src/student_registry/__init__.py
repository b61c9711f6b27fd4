"""Student Registry: validation toolkit for student onboarding, exam
registration and holiday-leave records.

The engine under `student_registry.validation` decides whether a record is
accepted; storage, HTTP handling and uploads are left to the caller. A small
CLI (validate, describe) checks CSV/JSON exports of form submissions.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
