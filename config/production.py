import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_FILE = os.getenv("DATA_FILE", "instance/attendance.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "labour_attendance_v2")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False
