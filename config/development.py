import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Local key-value file holding the roster blob
DATA_FILE = os.getenv("DATA_FILE", "instance/attendance.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "labour_attendance_v2")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True
