from .grievance import Grievance
from .remark import GrievanceRemark
from .user import User

__all__ = ["Grievance", "GrievanceRemark", "User"]
