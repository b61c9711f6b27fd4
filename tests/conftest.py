"""Shared pytest configuration and fixtures for record validation testing."""

from datetime import datetime

import pytest


@pytest.fixture
def now() -> datetime:
    """Fixed reference time so age and past-date checks are deterministic."""
    return datetime(2025, 5, 20, 10, 30)


@pytest.fixture
def student_form() -> dict:
    """A student registration form as submitted by the browser (all strings)."""
    return {
        "studentName": "Amina Wanjiru",
        "studentNo": "STU20250042",
        "studentType": "KUCCPS",
        "birthCertNo": "BC-4471902",
        "birthDate": "2005-03-14",
        "county": "Nakuru",
        "subCounty": "Naivasha",
        "gender": "Female",
        "nationality": "Kenyan",
        "phoneNumber": "+254712345678",
        "email": "amina.wanjiru@example.com",
        "class": "Year 1",
        "session": "2025/2026",
        "programme": "Diploma in Computer Science",
        "departmentId": "dept-cs",
        "kcpeIndex": "",
        "kcseIndex": "12345678/2022",
    }


@pytest.fixture
def exam_form() -> dict:
    """An exam creation form with string-typed dates and a numeric string capacity."""
    return {
        "title": "Introduction to Computer Science Final Exam",
        "courseCode": "CS101",
        "description": "Comprehensive final examination covering all course material",
        "examType": "Final Exam",
        "departmentId": "dept-cs",
        "sessionId": "session-2025",
        "examDate": "2025-12-15",
        "startTime": "09:00",
        "endTime": "12:00",
        "room": "Hall A",
        "maxCapacity": "100",
        "registrationDeadline": "2025-12-10",
        "registrationFee": 500,
    }


@pytest.fixture
def holiday_form() -> dict:
    """A holiday report form submitted ahead of the leave."""
    return {
        "holidayType": "Medical Leave",
        "startDate": "2025-06-01",
        "expectedReturnDate": "2025-06-05",
        "destination": "Kisumu",
        "reason": "Scheduled surgery and recovery at home",
        "emergencyContactName": "Grace Achieng",
        "emergencyContactPhone": "0722 123 456",
    }


@pytest.fixture
def exam_record() -> dict:
    """A stored exam as returned by the listing endpoint."""
    return {
        "id": "exam-1",
        "title": "Data Structures Mid-term Exam",
        "courseCode": "CS201",
        "description": None,
        "examType": "Mid-term Exam",
        "departmentId": "dept-cs",
        "sessionId": "session-2025",
        "examDate": "2025-11-20T14:00:00Z",
        "startTime": "14:00",
        "endTime": "16:00",
        "room": "Room 305",
        "maxCapacity": 50,
        "registrationDeadline": "2025-11-15T23:59:59Z",
        "registrationFee": 300,
        "status": "PUBLISHED",
    }


@pytest.fixture
def holiday_record() -> dict:
    """A stored holiday report awaiting review."""
    return {
        "id": "holiday-7",
        "studentId": "student-3",
        "holidayType": "Family Emergency",
        "priorityLevel": "Urgent",
        "startDate": "2025-03-01",
        "expectedReturnDate": "2025-03-08",
        "destination": "Eldoret",
        "reason": "Attending a family funeral upcountry",
        "status": "PENDING",
        "submittedAt": "2025-02-27T08:15:00Z",
    }
