"""Direct attendance writes used by the /logAttendance endpoint."""
from geotrack.models.attendance import AttendanceRecord
from geotrack.utils.helpers import parse_timestamp

class AttendanceService:
    @staticmethod
    def log_attendance(user_id, timestamp, is_entering) -> AttendanceRecord:
        """Write one attendance record as given.

        Field shapes are not checked; only the timestamp has to convert.
        """
        return AttendanceRecord(
            user_id=user_id,
            timestamp=parse_timestamp(timestamp),
            is_entering=is_entering
        ).save()
