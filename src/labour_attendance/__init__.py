"""Labour Attendance package.

Organized by feature modules (calendar_range, workers, stats, reports) with
pure service functions, a JSON-file repository and a thin Flask controller
layer on top.
"""
