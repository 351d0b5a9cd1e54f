from .courses import CourseRepository, SqlCourseRepository
from .enrollments import EnrollmentRepository, SqlEnrollmentRepository
from .users import SqlUserRepository, UserRepository
