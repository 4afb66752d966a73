"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

ON_TIME = time(9, 0)
UNNAMED_WORKER = "Unnamed"
STORAGE_KEY = "labour_attendance_v2"

REPORT_TITLE = "Labour Attendance Report"
REPORT_COLUMNS = (14, 70, 110, 140, 170, 200)
REPORT_HEADERS = ("Name", "Present", "Absent", "Late Days", "Working", "Sundays")
REPORT_TITLE_ROW = 18
REPORT_SUBTITLE_ROW = 26
REPORT_SUMMARY_ROW = 32
REPORT_HEADER_ROW = 40
REPORT_ROW_STEP = 8
REPORT_PAGE_BOTTOM = 280
REPORT_PAGE_TOP = 20
