from courseplatform.database import Base

from .course import Course
from .enrollment import Enrollment
from .user import User

# Import all models here
# This way when we import Base all models are also registered on its metadata
