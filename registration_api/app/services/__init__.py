"""
Service layer abstraction.

Each service encapsulates the business logic for one concern.  The
services only talk to the spreadsheet through ``core.sheets`` so that
API handlers never see rows or ranges.
"""
