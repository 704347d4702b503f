from enum import Enum


class GrievanceCategory(str, Enum):
    INFRASTRUCTURE = "Infrastructure"
    ACADEMIC = "Academic"
    HOSTEL = "Hostel"
    OTHER = "Other"
    IT = "IT"
    MESS = "Mess"


class GrievancePriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class GrievanceStatus(str, Enum):
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"
